"""
Configuration components for the cache cleaner.
"""
from .configuration import (
    CleanConfiguration,
    ensure_clean_config,
    load_config_file,
    load_configuration_from_env,
)
from .loader import find_default_config, load_config, merge_configs

__all__ = [
    "CleanConfiguration",
    "ensure_clean_config",
    "load_config_file",
    "load_configuration_from_env",
    "find_default_config",
    "load_config",
    "merge_configs",
]

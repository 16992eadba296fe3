"""
Centralized configuration loading for the cache cleaner.

Values are layered: defaults, then a config file, then ANTI_CLEAN_* environment
variables (after a local .env file has been read).
"""
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from dotenv import find_dotenv, load_dotenv

from .configuration import (
    CleanConfiguration,
    ensure_clean_config,
    load_config_file,
    load_configuration_from_env,
)

logger = logging.getLogger(__name__)


def default_search_paths() -> List[Path]:
    return [
        Path.cwd() / "anti_clean.yaml",
        Path.cwd() / "anti_clean.yml",
        Path.cwd() / "anti_clean.json",
        Path.home() / ".anti_clean" / "config.yaml",
    ]


def find_default_config(search_paths: Optional[List[Path]] = None) -> Optional[Path]:
    """Return the first existing configuration file, if any."""
    for path in search_paths if search_paths is not None else default_search_paths():
        if path.exists():
            return path
    return None


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configuration dictionaries."""
    result = base.copy()
    for key, value in override.items():
        if isinstance(value, dict) and key in result and isinstance(result[key], dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value
    return result


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    defaults: Optional[Dict[str, Any]] = None,
    search_paths: Optional[List[Path]] = None,
    use_dotenv: bool = True
) -> CleanConfiguration:
    """
    Load configuration from a file and the environment.

    Args:
        config_path: Explicit configuration file; must exist when given
        defaults: Values applied before the file and environment
        search_paths: Candidate files used when no explicit path is given
        use_dotenv: Whether to read a .env file into the environment first

    Returns:
        Validated CleanConfiguration

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid
    """
    if use_dotenv:
        dotenv_path = find_dotenv(usecwd=True)
        if dotenv_path:
            load_dotenv(dotenv_path)

    config = dict(defaults or {})

    if config_path:
        logger.info(f"Loading configuration from specified file: {config_path}")
        config = merge_configs(config, load_config_file(str(config_path)))
    else:
        discovered = find_default_config(search_paths)
        if discovered:
            logger.info(f"Loading configuration from discovered file: {discovered}")
            config = merge_configs(config, load_config_file(str(discovered)))
        else:
            logger.debug("No configuration file found, using defaults and environment variables")

    config = merge_configs(config, load_configuration_from_env())

    return ensure_clean_config(config)

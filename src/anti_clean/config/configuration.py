"""
Configuration management for the cache cleaner.
"""
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator

from ..error.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "ANTI_CLEAN_"


class CleanConfiguration(BaseModel):
    """Configuration for running the clean script."""

    # Execution settings
    interpreter: str = Field(default="/bin/bash", description="Shell used to run the script")
    script_name: str = Field(default="anti-clean.sh", description="File name of the temporary script")
    temp_dir: Optional[Path] = Field(default=None, description="Directory for the temporary script")
    force_flag: str = Field(default="--force", description="Argument appended when force is requested")
    unique_temp_path: bool = Field(default=False, description="Suffix the script name per invocation")

    # Logging settings
    log_level: str = "INFO"
    log_file: Optional[Path] = None
    structured_logging: bool = False
    log_max_bytes: int = Field(default=10 * 1024 * 1024, ge=1)
    log_backup_count: int = Field(default=5, ge=0)

    @field_validator("interpreter")
    @classmethod
    def validate_interpreter(cls, value: str) -> str:
        """Require an absolute interpreter path."""
        if "\x00" in value:
            raise ValueError("Interpreter path must not contain a NUL byte")
        if not os.path.isabs(value):
            raise ValueError(f"Interpreter must be an absolute path, got '{value}'")
        return value

    @field_validator("script_name")
    @classmethod
    def validate_script_name(cls, value: str) -> str:
        """Reject names that would escape the temp directory."""
        if not value or "/" in value or "\\" in value or "\x00" in value or value in {".", ".."}:
            raise ValueError(f"Invalid script name {value!r}")
        return value

    @field_validator("force_flag")
    @classmethod
    def validate_force_flag(cls, value: str) -> str:
        if not value.startswith("-"):
            raise ValueError(f"Force flag must start with '-', got '{value}'")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        value_upper = value.upper()
        if value_upper not in valid_levels:
            raise ValueError(f"Invalid log level '{value}'. Must be one of: {valid_levels}")
        return value_upper

    @field_validator("temp_dir", "log_file")
    @classmethod
    def expand_path(cls, value: Optional[Path]) -> Optional[Path]:
        if value is None:
            return None
        if "\x00" in str(value):
            raise ValueError("Path must not contain a NUL byte")
        return Path(value).expanduser()

    class Config:
        """Pydantic configuration."""
        extra = "forbid"
        validate_assignment = True


def ensure_clean_config(config: Union[Dict[str, Any], CleanConfiguration, None] = None) -> CleanConfiguration:
    """Build a validated configuration from a dictionary."""
    if isinstance(config, CleanConfiguration):
        return config

    try:
        return CleanConfiguration(**(config or {}))
    except Exception as e:
        raise ConfigurationError(f"Invalid configuration: {str(e)}")


def load_config_file(file_path: str) -> Dict[str, Any]:
    """
    Load configuration from a file (YAML or JSON).

    Args:
        file_path: Path to the configuration file

    Returns:
        Dictionary with configuration

    Raises:
        ConfigurationError: If the file is not found or cannot be parsed
    """
    path = Path(file_path).expanduser()

    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {file_path}")

    try:
        content = path.read_text(encoding='utf-8')
    except OSError as e:
        raise ConfigurationError(f"Error reading config file {file_path}: {str(e)}")

    try:
        if path.suffix in (".yaml", ".yml"):
            loaded_config = yaml.safe_load(content) or {}
        elif path.suffix == ".json":
            loaded_config = json.loads(content) or {}
        else:
            raise ConfigurationError(f"Unsupported config file format: {file_path}")
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML format in {file_path}: {str(e)}")
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON format in {file_path}: {str(e)}")

    if not isinstance(loaded_config, dict):
        raise ConfigurationError(f"Configuration in {file_path} must be a mapping")

    logger.debug(f"Loaded configuration from {file_path}")
    return loaded_config


def load_configuration_from_env(prefix: str = ENV_PREFIX) -> Dict[str, Any]:
    """
    Collect configuration values from prefixed environment variables.

    ANTI_CLEAN_TEMP_DIR=/var/tmp becomes {"temp_dir": "/var/tmp"}. Only known
    fields are picked up; pydantic coerces the string values.
    """
    values = {}
    for field_name in CleanConfiguration.model_fields:
        env_value = os.environ.get(f"{prefix}{field_name.upper()}")
        if env_value is not None and env_value != "":
            values[field_name] = env_value
    return values

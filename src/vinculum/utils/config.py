"""Configuration management utilities."""

import json
import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import find_dotenv, load_dotenv

from .constants import DEFAULT_CONFIG
from .exceptions import ConfigurationError

DEFAULT_CONFIG_PATH = "config.json"

# Environment variables that override values from config.json
ENV_OVERRIDES = {
    "VINCULUM_SERVICE_URL": "service_base_url",
    "VINCULUM_LOG_LEVEL": "log_level",
}


@dataclass
class Config:
    """
    Validated configuration schema for Vinculum.

    All configuration values are validated upon instantiation to ensure
    required fields exist and have appropriate types.
    """

    service_base_url: str
    timeout: int
    max_retries: int
    max_workers: int
    output_dir: str
    log_level: str

    def __post_init__(self):
        """Validates configuration values after initialization."""
        if not self.service_base_url:
            raise ConfigurationError("service_base_url cannot be empty")

        if self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")

        if self.max_retries < 0:
            raise ConfigurationError("max_retries cannot be negative")

        if self.max_workers <= 0:
            raise ConfigurationError("max_workers must be positive")

        if not self.output_dir:
            raise ConfigurationError("output_dir cannot be empty")

        self.log_level = str(self.log_level).upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigurationError(f"Unknown log_level: {self.log_level}")

    def to_dict(self) -> Dict[str, Any]:
        """Converts the config back to a dictionary for compatibility."""
        return asdict(self)


def load_config(config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Loads and validates settings from a config.json file.

    Values missing from the file fall back to the built-in defaults, and the
    VINCULUM_* environment variables (read from a .env file if present) take
    precedence over both.

    Args:
        config_path: Path to the config file. When omitted, config.json in the
            working directory is used if it exists.

    Returns:
        A dictionary containing validated configuration settings

    Raises:
        ConfigurationError: If the config file cannot be found, parsed, or validated
    """
    load_dotenv(find_dotenv(usecwd=True))
    raw_config: Dict[str, Any] = dict(DEFAULT_CONFIG)

    try:
        path = Path(config_path or DEFAULT_CONFIG_PATH)

        if path.exists():
            with open(path, "r", encoding="utf-8") as f:
                file_config = json.load(f)
            if not isinstance(file_config, dict):
                raise ConfigurationError(f"Configuration in {path} must be a JSON object")
            raw_config.update(file_config)
        elif config_path is not None:
            raise ConfigurationError(f"Configuration file not found at {path}")

        for env_name, key in ENV_OVERRIDES.items():
            if os.getenv(env_name):
                raw_config[key] = os.environ[env_name]

        # Validate configuration using the Config dataclass
        try:
            validated_config = Config(**raw_config)
            return validated_config.to_dict()
        except TypeError as e:
            # Missing or extra fields, or values of the wrong type
            raise ConfigurationError(f"Invalid configuration schema: {e}")

    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in configuration file: {e}")
    except ConfigurationError:
        # Re-raise ConfigurationError as-is
        raise
    except Exception as e:
        raise ConfigurationError(f"Failed to load configuration: {e}")

"""Configuration loading from files and environment variables."""
import copy
import json
import logging
import os
from typing import Any, Callable, Dict, Optional, Tuple

from service_locator.domain.exceptions import ConfigurationError

from .schemas import AppConfig
from .utils.env_expansion import expand_config_env_vars

logger = logging.getLogger(__name__)

CONFIG_FILE_ENV = "SERVICE_LOCATOR_CONFIG"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean value '{value}'")


# Environment variable -> (section, key, converter)
ENVIRONMENT_OVERRIDES: Dict[str, Tuple[str, str, Callable[[str], Any]]] = {
    "SERVICE_LOCATOR_LOG_LEVEL": ("logging", "level", str),
    "SERVICE_LOCATOR_LOG_DESTINATION": ("logging", "destination", str),
    "SERVICE_LOCATOR_LOG_FILE": ("logging", "file_path", str),
    "SERVICE_LOCATOR_THREAD_SAFE": ("container", "thread_safe", _parse_bool),
    "SERVICE_LOCATOR_TIMING_ENABLED": ("container", "timing_enabled", _parse_bool),
}


class ConfigurationLoader:
    """Loads raw configuration data and turns it into typed configuration."""

    @staticmethod
    def load_from_file(config_file: str) -> Dict[str, Any]:
        """
        Load configuration from a JSON file.

        Args:
            config_file: Path to the configuration file

        Returns:
            Raw configuration dictionary with environment variables expanded

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ConfigurationError(f"Configuration file not found: {config_file}") from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file {config_file}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {config_file}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {config_file} must contain a JSON object")

        logger.debug("Loaded configuration from %s", config_file)
        return expand_config_env_vars(data)

    @classmethod
    def load_configuration(cls, config_file: Optional[str] = None) -> Dict[str, Any]:
        """Load configuration from an explicit file, the file named by the environment, or defaults."""
        path = config_file or os.environ.get(CONFIG_FILE_ENV)
        if path:
            return cls.load_from_file(path)
        return {}

    @staticmethod
    def apply_environment_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply SERVICE_LOCATOR_* environment variable overrides."""
        result = copy.deepcopy(config_data)
        for env_name, (section, key, convert) in ENVIRONMENT_OVERRIDES.items():
            raw = os.environ.get(env_name)
            if raw is None:
                continue
            result.setdefault(section, {})[key] = convert(raw)
            logger.debug("Applied environment override %s", env_name)
        return result

    @classmethod
    def load(cls, config_file: Optional[str] = None) -> AppConfig:
        """Load, override and validate configuration."""
        config_data = cls.load_configuration(config_file)
        config_data = cls.apply_environment_overrides(config_data)
        return AppConfig.from_dict(config_data)

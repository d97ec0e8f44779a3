"""Unified configuration management for the service locator."""
from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Optional, Type, TypeVar, cast

from .loader import ConfigurationLoader
from .schemas import AppConfig, ContainerConfig, LoggingConfig

T = TypeVar('T')
logger = logging.getLogger(__name__)


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Configuration is loaded lazily on first access from the given file (or
    the file named by SERVICE_LOCATOR_CONFIG), with SERVICE_LOCATOR_*
    environment overrides applied and the result validated.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._config_cache: Dict[Type, Any] = {}

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = ConfigurationLoader.load(self._config_file)
                    logger.info("Configuration loaded successfully")
        return self._app_config

    def get_typed(self, config_type: Type[T]) -> T:
        """Get typed configuration with caching."""
        if config_type not in self._config_cache:
            with self._lock:
                if config_type not in self._config_cache:
                    self._config_cache[config_type] = self._create_typed_config(config_type)
        return cast(T, self._config_cache[config_type])

    def _create_typed_config(self, config_type: Type[T]) -> Any:
        """Map a config type to the matching section of the application config."""
        if config_type is AppConfig:
            return self.app_config
        if config_type is ContainerConfig:
            return self.app_config.container
        if config_type is LoggingConfig:
            return self.app_config.logging
        raise ValueError(f"Unknown configuration type: {config_type.__name__}")

    def reload(self) -> None:
        """Reload configuration from sources on next access."""
        with self._lock:
            self._app_config = None
            self._config_cache.clear()


_config_manager: Optional[ConfigurationManager] = None
_manager_lock = threading.Lock()


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """
    Get the global configuration manager.

    The config file is only honoured when the manager is first created.
    """
    global _config_manager
    if _config_manager is None:
        with _manager_lock:
            if _config_manager is None:
                _config_manager = ConfigurationManager(config_file)
    return _config_manager


def reset_config_manager() -> None:
    """Reset the global configuration manager."""
    global _config_manager
    with _manager_lock:
        _config_manager = None

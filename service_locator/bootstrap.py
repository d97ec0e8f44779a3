"""Application bootstrap - configuration, logging and the container."""

from __future__ import annotations

from typing import Optional

from service_locator.config import ContainerConfig, LoggingConfig
from service_locator.config.manager import ConfigurationManager, get_config_manager
from service_locator.infrastructure.di.container import Container, get_container, reset_container
from service_locator.infrastructure.logging.logger import get_logger, setup_logging


class Application:
    """
    Application context that wires configuration, logging and the container.

    Without a config path the global configuration manager and global
    container are used. With a config path the application owns its own
    manager and container, built from that file only.
    """

    def __init__(self, config_path: Optional[str] = None) -> None:
        """Initialize the instance."""
        self.config_path = config_path
        self._initialized = False

        # Defer heavy initialization until first use
        self._container: Optional[Container] = None
        self._config_manager: Optional[ConfigurationManager] = None

        self.logger = get_logger(__name__)

    def _ensure_config_manager(self) -> ConfigurationManager:
        """Ensure config manager is created (lazy initialization)."""
        if self._config_manager is None:
            if self.config_path is None:
                self._config_manager = get_config_manager()
            else:
                self._config_manager = ConfigurationManager(self.config_path)
        return self._config_manager

    def _ensure_container(self) -> Container:
        """Ensure container is created (lazy initialization)."""
        if self._container is None:
            if self.config_path is None:
                self._container = get_container()
            else:
                config = self._ensure_config_manager().get_typed(ContainerConfig)
                self._container = Container(config=config)
        return self._container

    def initialize(self) -> None:
        """
        Set up logging and build the container.

        Raises:
            ConfigurationError: If the configuration cannot be loaded
        """
        if self._initialized:
            return

        config_manager = self._ensure_config_manager()
        setup_logging(config_manager.get_typed(LoggingConfig))
        container = self._ensure_container()

        self._initialized = True
        self.logger.info(
            "Application initialized",
            config_path=self.config_path,
            thread_safe=container.config.thread_safe,
            preregistered_types=len(container.config.types),
        )

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def container(self) -> Container:
        """Get the application container, initializing on first access."""
        if not self._initialized:
            self.initialize()
        return self._ensure_container()

    def shutdown(self) -> None:
        """Shutdown the application."""
        self.logger.info("Shutting down application")
        if self.config_path is None:
            reset_container()
        elif self._container is not None:
            self._container.clear()
        self._container = None
        self._initialized = False

    def __enter__(self) -> "Application":
        self.initialize()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.shutdown()

"""Configuration package with clean public API."""

# Main configuration classes
from .schemas import (
    AppConfig, validate_config,
    ContainerConfig,
    LogDestination, LoggingConfig,
)

# Configuration management
from .loader import ConfigurationLoader
from .manager import ConfigurationManager, get_config_manager, reset_config_manager

__all__ = [
    # Main configuration
    'AppConfig',
    'validate_config',

    # Specific configurations
    'ContainerConfig',
    'LogDestination',
    'LoggingConfig',

    # Management
    'ConfigurationLoader',
    'ConfigurationManager',
    'get_config_manager',
    'reset_config_manager',
]

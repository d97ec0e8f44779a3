"""Configuration schemas package."""

from .app_schema import AppConfig, validate_config
from .container_schema import ContainerConfig
from .logging_schema import LogDestination, LoggingConfig

__all__ = [
    'AppConfig',
    'validate_config',
    'ContainerConfig',
    'LogDestination',
    'LoggingConfig',
]

"""Application configuration schema."""
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from service_locator.domain.exceptions import ConfigurationError

from .container_schema import ContainerConfig
from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Top-level configuration."""
    model_config = ConfigDict(extra="forbid")

    container: ContainerConfig = Field(default_factory=ContainerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AppConfig':
        """Create configuration from a raw dictionary."""
        return validate_config(data)


def validate_config(data: Dict[str, Any]) -> AppConfig:
    """
    Validate raw configuration data.

    Raises:
        ConfigurationError: If the data does not match the schema
    """
    try:
        return AppConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e.error_count()} error(s)", e.errors()) from e

"""Logging configuration schema."""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDOUT = "stdout"
    BOTH = "both"


class LoggingConfig(BaseModel):
    """Logging configuration."""
    model_config = ConfigDict(extra="forbid")

    level: str = Field("INFO", description="Root log level")
    destination: LogDestination = Field(LogDestination.STDOUT, description="Where log records are written")
    file_path: str = Field("logs/service_locator.log", description="Log file path, environment variables allowed")
    max_size_mb: int = Field(10, description="Maximum log file size before rotation")
    backup_count: int = Field(5, description="Number of rotated log files to keep")

    @field_validator('level', mode='before')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate and normalise the log level."""
        level = str(v).upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level must be one of {', '.join(VALID_LOG_LEVELS)}")
        return level

    @field_validator('max_size_mb')
    @classmethod
    def validate_max_size(cls, v: int) -> int:
        """Validate maximum file size."""
        if v < 1:
            raise ValueError("Maximum log file size must be at least 1 MB")
        return v

    @field_validator('backup_count')
    @classmethod
    def validate_backup_count(cls, v: int) -> int:
        """Validate backup count."""
        if v < 0:
            raise ValueError("Backup count cannot be negative")
        return v

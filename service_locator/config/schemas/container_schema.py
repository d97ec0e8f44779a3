"""Container configuration schema."""
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ContainerConfig(BaseModel):
    """Service container configuration."""
    model_config = ConfigDict(extra="forbid")

    thread_safe: bool = Field(True, description="Guard container tables with a re-entrant lock")
    timing_enabled: bool = Field(False, description="Log how long each resolution takes")
    allow_import_paths: bool = Field(True, description="Import dotted type names that are not registered")
    types: Dict[str, str] = Field(
        default_factory=dict,
        description="Symbolic type names mapped to 'package.module:Attr' import paths",
    )

    @field_validator('types')
    @classmethod
    def validate_types(cls, v: Dict[str, str]) -> Dict[str, str]:
        """Validate type import paths."""
        for type_name, import_path in v.items():
            if not type_name:
                raise ValueError("Type names cannot be empty")
            if "." not in import_path and ":" not in import_path:
                raise ValueError(f"Import path for '{type_name}' must be a dotted path, got '{import_path}'")
        return v

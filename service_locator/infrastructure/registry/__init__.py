"""Registry infrastructure."""

from .type_registry import TypeRegistry, import_from_path

__all__ = ['TypeRegistry', 'import_from_path']

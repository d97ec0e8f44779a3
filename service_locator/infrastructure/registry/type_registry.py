"""Type Registry - symbolic type names mapped to constructors.

Construction by name is a lookup into this registry followed by a normal
call, so no reflection on arbitrary strings is needed at resolution time.
Dotted names such as ``package.module:ClassName`` can optionally be imported
on demand and are cached once imported.
"""

import importlib
import threading
from typing import Any, Callable, Dict, List, Sequence

from service_locator.domain.exceptions import TypeRegistrationError, UnknownTypeError
from service_locator.infrastructure.logging.logger import get_logger


def import_from_path(import_path: str) -> Any:
    """
    Import an attribute from ``package.module:Attr`` or ``package.module.Attr``.

    Raises:
        UnknownTypeError: If the module or attribute cannot be imported
    """
    if ":" in import_path:
        module_name, _, attr_path = import_path.partition(":")
    else:
        module_name, _, attr_path = import_path.rpartition(".")

    if not module_name or not attr_path:
        raise UnknownTypeError(import_path, "not an importable path")

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise UnknownTypeError(import_path, f"cannot import module '{module_name}': {e}") from e

    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as e:
            raise UnknownTypeError(import_path, f"'{module_name}' has no attribute '{attr_path}'") from e
    return target


class TypeRegistry:
    """
    Registry of constructors addressable by symbolic type name.

    Thread-safe; every operation runs under a re-entrant lock.
    """

    def __init__(self, allow_import_paths: bool = True):
        """
        Initialize type registry.

        Args:
            allow_import_paths: Import unregistered dotted type names on demand
        """
        self._constructors: Dict[str, Callable[..., Any]] = {}
        self._allow_import_paths = allow_import_paths
        self._lock = threading.RLock()
        self._logger = get_logger(__name__)

    def register_type(self, type_name: str, constructor: Callable[..., Any], replace: bool = False) -> None:
        """
        Register a constructor under a symbolic type name.

        Args:
            type_name: Name used by TypeName descriptors
            constructor: Class or callable building the type
            replace: Overwrite an existing registration instead of failing

        Raises:
            TypeRegistrationError: If the constructor is not callable or the
                name is already registered and replace is False
        """
        if not type_name:
            raise TypeRegistrationError(repr(type_name), "type name cannot be empty")
        if not callable(constructor):
            raise TypeRegistrationError(type_name, "constructor must be callable")

        with self._lock:
            if type_name in self._constructors and not replace:
                raise TypeRegistrationError(type_name, "type name is already registered")
            self._constructors[type_name] = constructor
            self._logger.debug("Registered type", type_name=type_name)

    def register_import_path(self, type_name: str, import_path: str, replace: bool = False) -> None:
        """Import a constructor from a dotted path and register it under type_name."""
        self.register_type(type_name, import_from_path(import_path), replace=replace)

    def unregister_type(self, type_name: str) -> bool:
        """Unregister a type name. Returns True if it was registered."""
        with self._lock:
            if type_name in self._constructors:
                del self._constructors[type_name]
                self._logger.debug("Unregistered type", type_name=type_name)
                return True
            return False

    def is_type_registered(self, type_name: str) -> bool:
        with self._lock:
            return type_name in self._constructors

    def get_registered_types(self) -> List[str]:
        with self._lock:
            return list(self._constructors.keys())

    def get_constructor(self, type_name: str) -> Callable[..., Any]:
        """
        Look up the constructor for a type name.

        Unregistered dotted names are imported when import paths are allowed,
        and the imported constructor is registered for later lookups.

        Raises:
            UnknownTypeError: If the type name cannot be resolved
        """
        with self._lock:
            constructor = self._constructors.get(type_name)
            if constructor is not None:
                return constructor

            if not (self._allow_import_paths and ("." in type_name or ":" in type_name)):
                raise UnknownTypeError(type_name, "not registered")

            constructor = import_from_path(type_name)
            if not callable(constructor):
                raise UnknownTypeError(type_name, "imported object is not callable")
            self._constructors[type_name] = constructor
            self._logger.debug("Imported type", type_name=type_name)
            return constructor

    def create(self, type_name: str, args: Sequence[Any] = ()) -> Any:
        """Construct a registered type, passing args positionally."""
        return self.get_constructor(type_name)(*args)

    def clear(self) -> None:
        """Clear all registered types."""
        with self._lock:
            self._constructors.clear()
            self._logger.debug("Type registry cleared")

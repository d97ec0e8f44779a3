"""
Service descriptors and bindings.

A descriptor records how a name is turned into a value. It is chosen once,
at registration time, so resolution never has to inspect raw values:

- Factory: a callable invoked with the lookup arguments
- TypeName: a symbolic type name constructed through a TypeRegistry
- Instance: an already-built value returned as-is
"""
import functools
import inspect
import numbers
from dataclasses import dataclass
from typing import Any, Callable, Union

_SCALAR_TYPES = (numbers.Number, str, bytes, bytearray)
_BUILTIN_COLLECTIONS = (list, tuple, dict, set, frozenset)


@dataclass(frozen=True)
class Factory:
    """Callable that produces the service on each resolution."""

    function: Callable[..., Any]

    def __post_init__(self) -> None:
        if not callable(self.function):
            raise TypeError(f"Factory requires a callable, got {type(self.function).__name__}")


@dataclass(frozen=True)
class TypeName:
    """Symbolic type name resolved through a type registry."""

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise TypeError("TypeName requires a non-empty string")


@dataclass(frozen=True)
class Instance:
    """Pre-built value; stored as an implicit singleton."""

    value: Any


Descriptor = Union[Factory, TypeName, Instance]


@dataclass(frozen=True)
class Binding:
    """Unresolved registration: a factory or type name plus its shared flag."""

    descriptor: Union[Factory, TypeName]
    shared: bool = False

    @property
    def is_factory(self) -> bool:
        return isinstance(self.descriptor, Factory)

    @property
    def is_type_name(self) -> bool:
        return isinstance(self.descriptor, TypeName)

    def should_cache(self, obj: Any) -> bool:
        """
        Decide whether a resolved shared result is kept as the singleton.

        Constructed type names are always cached unless None. Factory
        results are not cached when they are None, or a falsy scalar or
        empty builtin collection, so the factory runs again next time.
        Instances of other classes are cached even when they are empty.
        """
        if obj is None:
            return False
        if self.is_type_name:
            return True
        if isinstance(obj, _SCALAR_TYPES) or type(obj) in _BUILTIN_COLLECTIONS:
            return bool(obj)
        return True


def _is_factory_callable(value: Any) -> bool:
    # Callable instances are services in their own right, not factories.
    return (
        isinstance(value, type)
        or inspect.isroutine(value)
        or isinstance(value, functools.partial)
    )


def to_descriptor(value: Any) -> Descriptor:
    """
    Classify a registration value.

    Args:
        value: Descriptor, type name, factory callable or pre-built object

    Returns:
        The matching descriptor. Existing descriptors are returned unchanged.
    """
    if isinstance(value, (Factory, TypeName, Instance)):
        return value
    if isinstance(value, str):
        return TypeName(value)
    if _is_factory_callable(value):
        return Factory(value)
    return Instance(value)

"""Domain layer: descriptors, bindings, ports and exceptions."""

from .binding import Binding, Descriptor, Factory, Instance, TypeName, to_descriptor
from .exceptions import (
    ConfigurationError,
    ServiceLocatorError,
    TypeRegistrationError,
    UnknownTypeError,
)
from .ports import ContainerPort

__all__ = [
    'Binding',
    'Descriptor',
    'Factory',
    'Instance',
    'TypeName',
    'to_descriptor',
    'ContainerPort',
    'ServiceLocatorError',
    'UnknownTypeError',
    'TypeRegistrationError',
    'ConfigurationError',
]

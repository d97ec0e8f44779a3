"""Service Locator - Root Package.

A minimal dependency-injection (service-locator) container. Names map either
to bindings, which are resolved lazily through a factory callable or a
symbolic type name, or to pre-built instances.

Key Components:
    - domain: Descriptors, bindings, the container port and exceptions
    - infrastructure: Container, type registry and logging
    - config: Typed configuration, loading and environment overrides
    - bootstrap: Application wiring

Usage:
    >>> from service_locator import Container
    >>> container = Container()
    >>> container.set_shared("clock", lambda: object())
    >>> container.get("clock") is container["clock"]
    True
"""

from service_locator.domain import (
    Binding,
    ConfigurationError,
    ContainerPort,
    Factory,
    Instance,
    ServiceLocatorError,
    TypeName,
    TypeRegistrationError,
    UnknownTypeError,
    to_descriptor,
)
from service_locator.infrastructure.di import Container, get_container, reset_container
from service_locator.infrastructure.logging import get_logger, setup_logging
from service_locator.infrastructure.registry import TypeRegistry

__version__ = "0.1.0"

__all__ = [
    'Container',
    'ContainerPort',
    'get_container',
    'reset_container',
    'TypeRegistry',
    'Binding',
    'Factory',
    'Instance',
    'TypeName',
    'to_descriptor',
    'ServiceLocatorError',
    'UnknownTypeError',
    'TypeRegistrationError',
    'ConfigurationError',
    'get_logger',
    'setup_logging',
]

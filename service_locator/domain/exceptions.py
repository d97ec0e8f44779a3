# service_locator/domain/exceptions.py
from typing import Any, Optional


class ServiceLocatorError(Exception):
    """Base exception for all service locator errors."""
    pass


class UnknownTypeError(ServiceLocatorError, LookupError):
    """Raised when a type name is neither registered nor importable."""
    def __init__(self, type_name: str, reason: Optional[str] = None):
        message = f"Unknown type '{type_name}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.type_name = type_name
        self.reason = reason


class TypeRegistrationError(ServiceLocatorError, ValueError):
    """Raised when a type registration is invalid."""
    def __init__(self, type_name: str, message: str):
        super().__init__(f"Cannot register type '{type_name}': {message}")
        self.type_name = type_name


class ConfigurationError(ServiceLocatorError):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.details = details

"""Container port for service location concerns."""
from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence


class ContainerPort(ABC):
    """Port for service-locator container operations."""

    @abstractmethod
    def get(self, name: str, args: Optional[Sequence[Any]] = None) -> Optional[Any]:
        """Resolve a service by name, or None if it is not registered."""

    @abstractmethod
    def set(self, name: str, value: Any) -> None:
        """Register a transient service."""

    @abstractmethod
    def set_shared(self, name: str, value: Any) -> None:
        """Register a shared service."""

    @abstractmethod
    def has(self, name: str) -> bool:
        """Check if a service is registered or cached."""

    @abstractmethod
    def remove(self, name: str) -> None:
        """Forget a service registration and any cached instance."""

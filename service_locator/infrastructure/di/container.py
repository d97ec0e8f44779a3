"""
Service locator container implementation.

The container maps names to either bindings (a factory or type name plus a
shared flag) or already-built instances. Bindings are resolved lazily on
``get``; shared bindings are cached once they produce a usable result
(see ``Binding.should_cache``).
"""
import threading
import time
from collections.abc import Sequence as SequenceABC
from contextlib import contextmanager, nullcontext
from typing import Any, ContextManager, Dict, Iterator, Optional, Sequence

from service_locator.config.schemas import ContainerConfig
from service_locator.domain.binding import Binding, Instance, to_descriptor
from service_locator.domain.ports import ContainerPort
from service_locator.infrastructure.logging.logger import get_logger
from service_locator.infrastructure.registry.type_registry import TypeRegistry

logger = get_logger(__name__)


@contextmanager
def timed_operation(operation_name: str) -> Iterator[None]:
    """Context manager to time and log an operation."""
    start_time = time.time()
    try:
        yield
    finally:
        elapsed_time = time.time() - start_time
        logger.debug(f"{operation_name} completed in {elapsed_time:.4f}s")


def _normalize_args(args: Optional[Sequence[Any]]) -> tuple:
    if args is None:
        return ()
    if isinstance(args, (str, bytes, bytearray)) or not isinstance(args, SequenceABC):
        raise TypeError(f"args must be a sequence of positional arguments, got {type(args).__name__}")
    return tuple(args)


class Container(ContainerPort):
    """
    Service locator with shared and transient bindings.

    Each name is in one of three states: absent, bound (not yet resolved or
    transient) or cached. Registration and removal always clear both tables
    for the name before anything else happens.

    Supports bracket access as sugar over the core methods::

        container["db"] = make_db        # set
        db = container["db"]             # get
        "db" in container                # has
        del container["db"]              # remove
    """

    def __init__(self,
                 type_registry: Optional[TypeRegistry] = None,
                 config: Optional[ContainerConfig] = None):
        """
        Initialize container.

        Args:
            type_registry: Registry used for TypeName descriptors. A new one is
                           created when omitted.
            config: Container configuration; defaults are used when omitted.
        """
        self._config = config or ContainerConfig()
        self._bindings: Dict[str, Binding] = {}
        self._instances: Dict[str, Any] = {}
        self._type_registry = type_registry or TypeRegistry(
            allow_import_paths=self._config.allow_import_paths
        )
        self._lock: ContextManager[Any] = (
            threading.RLock() if self._config.thread_safe else nullcontext()
        )

        for type_name, import_path in self._config.types.items():
            self._type_registry.register_import_path(type_name, import_path, replace=True)

    @property
    def type_registry(self) -> TypeRegistry:
        return self._type_registry

    @property
    def config(self) -> ContainerConfig:
        return self._config

    def _register(self, name: str, value: Any, shared: bool = False) -> None:
        """
        Register a service, replacing any previous binding or instance.

        Pre-built objects go straight to the instance table whatever the
        shared flag says, since there is nothing left to build.
        """
        descriptor = to_descriptor(value)
        with self._lock:
            self._bindings.pop(name, None)
            self._instances.pop(name, None)

            if isinstance(descriptor, Instance):
                self._instances[name] = descriptor.value
                logger.debug("Registered instance", name=name)
            else:
                self._bindings[name] = Binding(descriptor=descriptor, shared=shared)
                logger.debug(
                    "Registered binding",
                    name=name,
                    kind=type(descriptor).__name__,
                    shared=shared,
                )

    def set(self, name: str, value: Any) -> None:
        """Register a transient service (or a pre-built instance)."""
        self._register(name, value)

    def set_shared(self, name: str, value: Any) -> None:
        """Register a shared service, built once and then cached."""
        self._register(name, value, shared=True)

    def get(self, name: str, args: Optional[Sequence[Any]] = None) -> Optional[Any]:
        """
        Resolve a service by name.

        Args:
            name: Service name
            args: Positional arguments for the factory or constructor. Ignored
                  when a cached instance exists.

        Returns:
            The service, or None when nothing is registered under name.

        Raises:
            Whatever the factory or constructor raises, unchanged.
            TypeError: If args is a string or not a sequence
            UnknownTypeError: If a type name cannot be resolved
        """
        call_args = _normalize_args(args)
        with self._lock:
            if name in self._instances:
                logger.debug("Using cached instance", name=name)
                return self._instances[name]

            binding = self._bindings.get(name)
            if binding is None:
                logger.debug("Service not registered", name=name)
                return None

            timer = timed_operation(f"Resolve {name}") if self._config.timing_enabled else nullcontext()
            with timer:
                obj = self._resolve(name, binding, call_args)

            if binding.shared:
                if binding.should_cache(obj):
                    self._bindings.pop(name, None)
                    self._instances[name] = obj
                    logger.debug("Cached shared instance", name=name)
                else:
                    logger.debug("Shared service resolved to an empty value, not caching", name=name)

            return obj

    def _resolve(self, name: str, binding: Binding, args: Sequence[Any]) -> Any:
        descriptor = binding.descriptor
        try:
            if binding.is_factory:
                return descriptor.function(*args)
            return self._type_registry.create(descriptor.name, args)
        except Exception as e:
            logger.debug("Failed to build service", name=name, error=str(e))
            raise

    def has(self, name: str) -> bool:
        """Check if a service is registered or cached."""
        with self._lock:
            return name in self._instances or name in self._bindings

    def remove(self, name: str) -> None:
        """Remove a service registration and any cached instance."""
        with self._lock:
            self._bindings.pop(name, None)
            self._instances.pop(name, None)
            logger.debug("Removed service", name=name)

    def register_type(self, type_name: str, constructor: Any, replace: bool = False) -> None:
        """Register a constructor for TypeName descriptors."""
        self._type_registry.register_type(type_name, constructor, replace=replace)

    def clear(self) -> None:
        """Clear all registrations and cached instances."""
        with self._lock:
            self._bindings.clear()
            self._instances.clear()
            logger.debug("Cleared all registrations")

    def get_stats(self) -> Dict[str, Any]:
        """Get container statistics."""
        with self._lock:
            shared = sum(1 for binding in self._bindings.values() if binding.shared)
            return {
                "total_bindings": len(self._bindings),
                "shared_bindings": shared,
                "transient_bindings": len(self._bindings) - shared,
                "cached_instances": len(self._instances),
                "registered_types": len(self._type_registry.get_registered_types()),
            }

    def __getitem__(self, name: str) -> Optional[Any]:
        return self.get(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def __delitem__(self, name: str) -> None:
        self.remove(name)

    def __contains__(self, name: str) -> bool:
        return self.has(name)


# Global container instance
_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """
    Get the global container instance.

    The container is built from the global configuration manager on first use.

    Returns:
        Global container instance
    """
    global _container
    if _container is None:
        with _container_lock:
            if _container is None:
                from service_locator.config.manager import get_config_manager

                config = get_config_manager().get_typed(ContainerConfig)
                _container = Container(config=config)
                logger.info("Created global container", thread_safe=config.thread_safe)
    return _container


def reset_container() -> None:
    """Reset the global container instance."""
    global _container
    with _container_lock:
        if _container:
            _container.clear()
        _container = None

import logging

import pytest

from service_locator.config.loader import CONFIG_FILE_ENV, ENVIRONMENT_OVERRIDES
from service_locator.config.manager import reset_config_manager
from service_locator.infrastructure.di.container import Container, reset_container
from service_locator.infrastructure.registry.type_registry import TypeRegistry


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate tests from SERVICE_LOCATOR_* variables and global state."""
    monkeypatch.delenv(CONFIG_FILE_ENV, raising=False)
    for env_name in ENVIRONMENT_OVERRIDES:
        monkeypatch.delenv(env_name, raising=False)
    reset_container()
    reset_config_manager()
    yield
    reset_container()
    reset_config_manager()


@pytest.fixture
def type_registry():
    return TypeRegistry()


@pytest.fixture
def container(type_registry):
    return Container(type_registry=type_registry)


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level changed by setup_logging."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in original_handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in original_handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(original_level)

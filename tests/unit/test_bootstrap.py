"""Tests for application bootstrap."""

import json

import pytest

from service_locator.bootstrap import Application
from service_locator.config.manager import get_config_manager
from service_locator.domain.exceptions import ConfigurationError
from service_locator.infrastructure.di.container import get_container


class TestApplication:
    """Test application wiring."""

    def test_initialize_builds_global_container(self, restore_root_logger):
        app = Application()

        app.initialize()

        assert app.initialized
        assert app.container is get_container()

    def test_container_property_initializes_lazily(self, restore_root_logger):
        app = Application()

        container = app.container

        assert app.initialized
        assert container is get_container()

    def test_config_file_applied(self, restore_root_logger, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({
            "container": {"types": {"Frac": "fractions:Fraction"}},
            "logging": {"level": "WARNING"},
        }), encoding="utf-8")

        with Application(str(config_path)) as app:
            app.container.set_shared("half", "Frac")

            assert app.container.get("half", [1, 2]) == 0.5
            assert restore_root_logger.level == 30

    def test_shutdown_resets_container(self, restore_root_logger):
        app = Application()
        app.container.set("service", object)
        first = app.container

        app.shutdown()

        assert not app.initialized
        assert get_container() is not first
        assert not get_container().has("service")

    def test_invalid_config_raises(self, restore_root_logger, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"logging": {"level": "LOUD"}}), encoding="utf-8")

        with pytest.raises(ConfigurationError):
            Application(str(config_path)).initialize()

    def test_config_path_used_when_global_manager_exists(self, restore_root_logger, tmp_path):
        get_config_manager()
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"container": {"thread_safe": False}}), encoding="utf-8")

        app = Application(str(config_path))

        assert app.container.config.thread_safe is False
        assert get_container().config.thread_safe is True
        assert app.container is not get_container()

    def test_shutdown_with_config_path_leaves_global_container(self, restore_root_logger, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({}), encoding="utf-8")
        global_container = get_container()
        global_container.set("service", object)

        app = Application(str(config_path))
        app.container.set("local", object)
        app.shutdown()

        assert not app.initialized
        assert get_container() is global_container
        assert global_container.has("service")

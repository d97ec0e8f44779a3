"""Tests for structured logging setup."""

import logging
from logging.handlers import RotatingFileHandler

import structlog

from service_locator.config.schemas import LoggingConfig
from service_locator.infrastructure.logging.logger import DetailedFormatter, get_logger, setup_logging


class TestGetLogger:
    """Test logger creation."""

    def test_structlog_configured_on_first_use(self):
        get_logger(__name__)

        assert structlog.is_configured()

    def test_records_routed_through_stdlib(self, caplog):
        caplog.set_level(logging.INFO, logger="tests.logger")

        get_logger("tests.logger").info("Service ready", name="db")

        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.name == "tests.logger"
        assert "event='Service ready'" in record.getMessage()
        assert "name='db'" in record.getMessage()

    def test_level_filtering(self, caplog):
        caplog.set_level(logging.WARNING, logger="tests.logger")

        get_logger("tests.logger").debug("hidden")

        assert caplog.records == []


class TestSetupLogging:
    """Test root logger configuration."""

    def test_stdout_destination(self, restore_root_logger):
        setup_logging(LoggingConfig(level="WARNING", destination="stdout"))

        assert restore_root_logger.level == logging.WARNING
        assert len(restore_root_logger.handlers) == 1
        handler = restore_root_logger.handlers[0]
        assert type(handler) is logging.StreamHandler
        assert isinstance(handler.formatter, DetailedFormatter)

    def test_file_destination_writes_records(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "logs" / "locator.log"
        setup_logging(LoggingConfig(level="DEBUG", destination="file", file_path=str(log_file)))

        get_logger("tests.file").info("Written to file", key="value")
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert isinstance(restore_root_logger.handlers[0], RotatingFileHandler)
        content = log_file.read_text(encoding="utf-8")
        assert "Written to file" in content
        assert "key='value'" in content
        assert " - INFO - tests.file [" in content

    def test_both_destinations(self, restore_root_logger, tmp_path):
        setup_logging(LoggingConfig(destination="both", file_path=str(tmp_path / "both.log")))

        handler_types = {type(handler) for handler in restore_root_logger.handlers}
        assert handler_types == {RotatingFileHandler, logging.StreamHandler}

    def test_rotation_settings(self, restore_root_logger, tmp_path):
        setup_logging(LoggingConfig(
            destination="file",
            file_path=str(tmp_path / "rotate.log"),
            max_size_mb=2,
            backup_count=3,
        ))

        handler = restore_root_logger.handlers[0]
        assert handler.maxBytes == 2 * 1024 * 1024
        assert handler.backupCount == 3

    def test_config_read_from_manager_when_omitted(self, restore_root_logger, monkeypatch):
        monkeypatch.setenv("SERVICE_LOCATOR_LOG_LEVEL", "ERROR")

        setup_logging()

        assert restore_root_logger.level == logging.ERROR

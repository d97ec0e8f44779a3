"""Structured logging built on structlog and the standard logging module."""
import logging
import os
import threading
from logging.handlers import RotatingFileHandler
from typing import Any, List, Optional

import structlog

from service_locator.config.schemas.logging_schema import LogDestination, LoggingConfig

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"

_configure_lock = threading.Lock()


class DetailedFormatter(logging.Formatter):
    """Formatter that adds caller module, function and line to each record."""

    def format(self, record: logging.LogRecord) -> str:
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def _processors() -> List[Any]:
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.KeyValueRenderer(key_order=["event"]),
    ]


def _configure_structlog() -> None:
    structlog.configure(
        processors=_processors(),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger routed through the standard logging module.

    If structlog has not been configured yet, a default configuration is
    installed that adds no handlers, so stdlib levels and handlers decide
    what is emitted.

    Args:
        name: Logger name, usually ``__name__``

    Returns:
        Bound structlog logger
    """
    if not structlog.is_configured():
        with _configure_lock:
            if not structlog.is_configured():
                _configure_structlog()
    return structlog.get_logger(name)


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        config: Logging configuration. If None, it is read from the
                configuration manager.
    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        from service_locator.config.manager import get_config_manager

        config = get_config_manager().get_typed(LoggingConfig)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level))

    handlers: List[logging.Handler] = []

    if config.destination in (LogDestination.FILE, LogDestination.BOTH):
        log_file = os.path.expandvars(config.file_path)
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        )
        file_handler.setFormatter(DetailedFormatter(LOG_FORMAT))
        handlers.append(file_handler)

    if config.destination in (LogDestination.STDOUT, LogDestination.BOTH):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(DetailedFormatter(LOG_FORMAT))
        handlers.append(console_handler)

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for handler in handlers:
        root_logger.addHandler(handler)

    _configure_structlog()

    logger = structlog.get_logger(__name__)
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_destination=config.destination.value,
        log_file=config.file_path,
    )
    return logger

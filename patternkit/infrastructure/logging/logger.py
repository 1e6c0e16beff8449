"""Structured logging built on structlog and the standard logging module.

Importing this module configures structlog to route records through stdlib
logging but installs no handlers; applications call ``setup_logging`` to
decide where records go.
"""
from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, Any, List

import structlog

from patternkit.domain.base.exceptions import ConfigurationError

if TYPE_CHECKING:
    from patternkit.config.schemas.logging_schema import LoggingConfig

# Processors shared by structlog loggers and foreign (plain stdlib) records
_SHARED_PROCESSORS: List[Any] = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def _configure_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for a module."""
    return structlog.get_logger(name)


def setup_logging(config: "LoggingConfig") -> structlog.stdlib.BoundLogger:
    """
    Set up logging handlers for the application.

    Args:
        config: Logging configuration section
    Returns:
        Configured structlog logger instance.
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if config.json_format
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=_SHARED_PROCESSORS,
    )

    handlers: List[logging.Handler] = []
    destination = config.destination.value

    if destination in ("file", "both"):
        log_path = os.path.expandvars(config.file_path)
        log_dir = os.path.dirname(log_path)
        try:
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_path,
                maxBytes=config.max_size_mb * 1024 * 1024,
                backupCount=config.backup_count,
            )
        except OSError as e:
            raise ConfigurationError(
                f"Cannot open log file {log_path}: {e}",
                "LOG_FILE_UNAVAILABLE",
                {"file_path": log_path},
            ) from e
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if destination in ("console", "both"):
        # stderr, so command output on stdout stays machine-readable
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, config.level.value))

    logger = get_logger("patternkit")
    logger.debug(
        "Logging configured",
        log_level=config.level.value,
        log_destination=destination,
    )
    return logger


_configure_structlog()

"""Logging configuration for the catalog domain.

Standard library handlers do the writing (console plus rotating files);
structlog sits on top and renders structured events. Audit lines from the
product handlers and health warnings all flow through here.

    LOG_LEVEL   overrides the level derived from the environment
    LOG_DIR     directory for catalog.log / catalog_error.log (logs)
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog

LOG_FILE_PREFIX = "catalog"
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5

ENVIRONMENT_LOG_LEVELS = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}

# Environments that ship logs to an aggregator instead of a terminal
STRUCTURED_ENVIRONMENTS = ("production", "staging")

QUIET_LOGGERS = ("urllib3", "asyncio", "uvicorn.access")


def get_environment() -> str:
    """Name of the running environment, lower-cased."""
    return (os.getenv("ENV") or os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


def get_log_level() -> str:
    """Get log level based on environment."""
    default = ENVIRONMENT_LOG_LEVELS.get(get_environment(), "INFO")
    return os.getenv("LOG_LEVEL", default).upper()


def get_log_dir() -> Path:
    return Path(os.getenv("LOG_DIR", "logs"))


def _rotating_handler(path: Path, level) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    return handler


def setup_stdlib_logging() -> None:
    """Configure standard library logging."""
    log_level = get_log_level()

    log_dir = get_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = [
        console_handler,
        _rotating_handler(log_dir / f"{LOG_FILE_PREFIX}.log", log_level),
        _rotating_handler(log_dir / f"{LOG_FILE_PREFIX}_error.log", logging.ERROR),
    ]

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _shared_processors() -> list:
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.contextvars.merge_contextvars,
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
    ]


def _renderer(environment: str):
    if environment in STRUCTURED_ENVIRONMENTS:
        return structlog.processors.JSONRenderer()

    return structlog.dev.ConsoleRenderer(
        colors=True,
        exception_formatter=structlog.dev.RichTracebackFormatter(
            show_locals=True,
            max_frames=2,
        ),
    )


def setup_structlog() -> None:
    """Configure structlog for structured logging."""
    structlog.configure(
        processors=[*_shared_processors(), _renderer(get_environment())],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging() -> None:
    """Configure all logging for the application."""
    setup_stdlib_logging()
    setup_structlog()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance."""
    return structlog.get_logger(name)


def add_context(**kwargs: Any) -> None:
    """Add context variables that will be included in all subsequent log messages."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all context variables."""
    structlog.contextvars.clear_contextvars()

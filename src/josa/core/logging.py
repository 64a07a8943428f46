"""Structured logging configuration."""

import logging
import sys

import structlog

from josa.core.config import get_settings
from josa.core.exceptions import ConfigurationError


def setup_logging() -> None:
    """Configure structlog output for josa events.

    The library never calls this on import; applications opt in. Only
    structlog is configured, stdlib logging handlers are left alone.

    Raises:
        ConfigurationError: If the configured log level or format is unknown.
    """
    settings = get_settings()

    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {settings.log_level}")

    if settings.log_format == "json":
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
    elif settings.log_format == "text":
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    else:
        raise ConfigurationError(f"Unknown log format: {settings.log_format}")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)

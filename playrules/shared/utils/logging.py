"""Structured logging configuration using structlog.

The engine only emits events; the embedding app (or ``run.py``) decides where
they go by calling ``configure_logging`` once. Until then structlog's
defaults apply.
"""

import logging
import sys
from typing import TextIO

import structlog

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _resolve_level(level: str) -> int:
    try:
        return _LEVELS[level.upper()]
    except KeyError:
        raise ValueError(
            f"Unknown log level '{level}', expected one of {', '.join(_LEVELS)}"
        ) from None


def configure_logging(
    level: str = "INFO",
    json_format: bool = False,
    service_name: str = "playrules",
    stream: TextIO | None = None,
    cache_loggers: bool = True,
) -> None:
    """
    Configure structured logging for the rules engine.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: If True, output JSON; if False, output colored console format
        service_name: Name bound to every log entry
        stream: Where entries are written (default: stdout)
        cache_loggers: Cache module loggers on first use. Turn off when the
            host reconfigures logging more than once, e.g. between tests.

    Raises:
        ValueError: If ``level`` is not a known level name
    """
    numeric_level = _resolve_level(level)
    stream = stream or sys.stdout

    logging.basicConfig(format="%(message)s", stream=stream, level=numeric_level)

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_format:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=stream.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=cache_loggers,
    )

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(service=service_name)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance, usually ``get_logger(__name__)``."""
    return structlog.get_logger(name)

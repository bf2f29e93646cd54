"""Structured logging setup (structlog events rendered through rich on stderr).

Events are routed to the standard library logging tree, so a library user
who never calls setup_logging() gets the usual stdlib defaults.
"""

from __future__ import annotations

import logging

import structlog
from rich.console import Console
from rich.logging import RichHandler

DEFAULT_LEVEL = "WARNING"


def _configure_structlog(level: int) -> None:
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def setup_logging(level: str = DEFAULT_LEVEL) -> None:
    """Configure structlog and the root logger for terminal output.

    Args:
        level: Log level name, e.g. 'DEBUG' or 'WARNING'.
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        tracebacks_show_locals=numeric_level == logging.DEBUG,
    )
    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    _configure_structlog(numeric_level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance (typically for __name__)."""
    if not structlog.is_configured():
        _configure_structlog(logging.NOTSET)
    return structlog.get_logger(name)

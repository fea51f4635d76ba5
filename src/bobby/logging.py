"""Structured logging configuration for Bobby.

Uses structlog for structured, context-rich logging that supports
both human-readable console output and machine-readable JSON format.
Log output goes to stderr so it never mixes with the task listing.
"""

import logging
import sys
from typing import TYPE_CHECKING

import structlog
from structlog.types import Processor

if TYPE_CHECKING:
    from bobby.config import BobbySettings


def configure_logging(settings: "BobbySettings | None" = None) -> None:
    """Configure structured logging based on settings.

    Args:
        settings: Application settings. If None, uses defaults.
    """
    log_level = logging.WARNING
    log_format = "console"

    if settings is not None:
        log_level = getattr(logging, settings.log_level.upper(), logging.WARNING)
        log_format = settings.log_format

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "json":
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        level=log_level,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    # basicConfig is a no-op once the root logger has handlers.
    logging.getLogger().setLevel(log_level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance.

    Args:
        name: Optional logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name) if name else structlog.get_logger()


def bind_context(**kwargs: object) -> None:
    """Bind context variables to all subsequent log calls in the current context.

    Example:
        bind_context(data_file="~/.bobby/tasks.json")
        logger.info("tasks_loaded")  # Will include data_file

    Args:
        **kwargs: Key-value pairs to bind to logging context
    """
    structlog.contextvars.bind_contextvars(**kwargs)


class Loggers:
    """Pre-configured logger instances for Bobby components."""

    @staticmethod
    def cli() -> structlog.stdlib.BoundLogger:
        """Logger for the REPL and commands."""
        return get_logger("bobby.cli")

    @staticmethod
    def tasks() -> structlog.stdlib.BoundLogger:
        """Logger for the task list."""
        return get_logger("bobby.tasks")

    @staticmethod
    def persistence() -> structlog.stdlib.BoundLogger:
        """Logger for the task file."""
        return get_logger("bobby.persistence")

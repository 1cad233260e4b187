"""
Structured logging configuration using structlog.

Log lines go to stderr so that the JSON views printed by the CLI on
stdout stay machine-readable.
"""

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from structlog.types import Processor

from game_center.config import LoggingConfig, get_settings

_configured = False


def setup_logging(config: LoggingConfig | None = None, *, force: bool = False) -> None:
    """
    Configure structured logging for the browser.

    Args:
        config: Logging section to apply (defaults to the cached settings)
        force: Reconfigure even if logging was already set up
    """
    global _configured
    if _configured and not force:
        return

    config = config or get_settings().logging

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if config.include_timestamp:
        shared_processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if config.format == "json":
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=sys.stderr.isatty(),
            exception_formatter=structlog.dev.plain_traceback,
        )

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(config.level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, config.level),
    )
    _configured = True


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.BoundLogger:
    """
    Get a logger bound to a component.

    Example:
        >>> logger = get_logger(__name__, component="selection")
        >>> logger.info("Opened item", item_id="g1")
    """
    logger = structlog.get_logger(name)
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger

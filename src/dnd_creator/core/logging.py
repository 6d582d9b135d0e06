"""Structured logging for the D&D 5E character rules engine.

The engine logs through structlog: debug events for per-call work
(validation, spellcasting, dice) and info events when the catalog is built.

As a library it stays quiet until the host opts in. Importing this module
filters everything below WARNING, unless structlog was already configured.
Hosts that want the engine's debug and info events call
:func:`configure_logging` (or their own ``structlog.configure``).

Example:
    >>> from dnd_creator.core.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG")
    >>> logger = get_logger(__name__)
    >>> logger.info("Catalog built", classes=12, races=17)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import Processor


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger


APP_NAME = "dnd_creator"


def add_app_context(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Stamp every event with the application name."""
    event_dict["app"] = APP_NAME
    return event_dict


def install_quiet_defaults() -> bool:
    """Silence debug and info events until logging is configured.

    Leaves an existing structlog configuration untouched.

    Returns:
        True if the quiet defaults were installed.
    """
    if structlog.is_configured():
        return False
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING))
    return True


def configure_logging(*, level: str = "INFO", json_format: bool = False) -> None:
    """Configure structlog output for the engine and its host.

    Args:
        level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: If True, render events as JSON lines instead of the
            coloured console format.

    Example:
        >>> configure_logging(level="DEBUG", json_format=False)
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
        structlog.processors.StackInfoRenderer(),
    ]

    renderer: Processor
    if json_format:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        )

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_from_settings() -> None:
    """Configure logging from ``DND_CREATOR_LOG_LEVEL`` and ``DND_CREATOR_JSON_LOGS``."""
    from dnd_creator.core.config import get_settings

    settings = get_settings()
    configure_logging(level=settings.log_level, json_format=settings.json_logs)


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger, typically for ``__name__``."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind values included in every subsequent event of this context.

    Example:
        >>> bind_context(character="Thorin")
        >>> logger.info("Draft validated")  # includes character="Thorin"
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


install_quiet_defaults()


__all__ = [
    "APP_NAME",
    "add_app_context",
    "install_quiet_defaults",
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "bind_context",
    "clear_context",
]

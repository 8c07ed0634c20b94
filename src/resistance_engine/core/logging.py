"""Structured logging for the resistance engine.

Logging is configured once by the host from the application settings.
Engine modules log through ``get_logger(__name__)`` and attach the actor
and damage type they are working on with ``resistance_context``, so every
event from one preparation pass or one hit carries the same keys.

Example:
    >>> from resistance_engine.core.logging import (
    ...     configure_logging, get_logger, resistance_context,
    ... )
    >>> configure_logging()  # level and format from RESISTANCE_ENGINE_* settings
    >>> with resistance_context(actor="Pixie", damage_type="electric"):
    ...     get_logger(__name__).info("Resistance method applied", resistance_level=0)
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from enum import Enum
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import Processor

from resistance_engine.core.config import Settings, get_settings


if TYPE_CHECKING:
    from collections.abc import Iterator

    from structlog.types import EventDict, WrappedLogger


def _app_context(settings: Settings) -> Processor:
    """Build a processor stamping the app name and version onto each event."""
    app = settings.app_name
    version = settings.app_version

    def add_app_context(
        logger: WrappedLogger,
        method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        event_dict.setdefault("app", app)
        event_dict.setdefault("version", version)
        return event_dict

    return add_app_context


def flatten_enums(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Render damage types and resistance levels by their plain value."""
    for key, value in event_dict.items():
        if isinstance(value, Enum):
            event_dict[key] = value.value
    return event_dict


def configure_logging(
    settings: Settings | None = None,
    *,
    level: str | None = None,
    json_format: bool | None = None,
    log_file: str | None = None,
) -> None:
    """Configure structlog from the application settings.

    Debug mode lowers the level to DEBUG. Explicit arguments override
    the settings.

    Args:
        settings: Settings to read; defaults to ``get_settings()``.
        level: Logging level name, overriding the settings.
        json_format: Emit JSON lines, overriding ``settings.log_json``.
        log_file: Append events to this file instead of stdout.
    """
    settings = settings or get_settings()
    if level is None:
        level = "DEBUG" if settings.debug else settings.log_level
    if json_format is None:
        json_format = settings.log_json

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        _app_context(settings),
        flatten_enums,
        structlog.processors.StackInfoRenderer(),
    ]
    if json_format:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=not settings.is_production and log_file is None,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    if log_file:
        logger_factory: Any = structlog.WriteLoggerFactory(
            file=open(log_file, "a", encoding="utf-8")  # noqa: SIM115
        )
    else:
        logger_factory = structlog.PrintLoggerFactory()

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=logger_factory,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a logger, typically with ``__name__``."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables included in all subsequent events."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


@contextmanager
def resistance_context(**kwargs: Any) -> Iterator[None]:
    """Bind actor or damage type keys for the duration of a block.

    Keys already bound by an outer block are restored on exit. None
    values are not bound.
    """
    bound = {key: str(value) for key, value in kwargs.items() if value is not None}
    with structlog.contextvars.bound_contextvars(**bound):
        yield


__all__ = [
    "configure_logging",
    "flatten_enums",
    "get_logger",
    "bind_context",
    "clear_context",
    "resistance_context",
]

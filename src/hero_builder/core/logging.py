"""Structured logging for the hero builder engine.

Logging goes through structlog. The engine itself only emits debug
events (entities created, features flattened) and warnings for broken
feature trees; the host application decides where they end up by
calling ``configure_logging`` once at startup.

Example:
    >>> from hero_builder.core.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG")
    >>> logger = get_logger(__name__)
    >>> logger.debug("Features flattened", declared=3, flattened=7)
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

import structlog
from structlog.types import Processor


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger

    from hero_builder.core.config import Settings


# structlog renders timestamp and level itself
LOG_FORMAT = "%(message)s"


def add_app_context(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Tag every entry with the emitting application.

    Args:
        logger: The wrapped logger instance.
        method_name: Name of the logging method called.
        event_dict: The event dictionary to modify.

    Returns:
        The event dictionary with ``app`` set.
    """
    event_dict.setdefault("app", "hero_builder")
    return event_dict


def build_processors(*, json_format: bool, colors: bool | None = None) -> list[Processor]:
    """Assemble the structlog processor chain.

    Args:
        json_format: Render JSON lines instead of coloured console output.
        colors: Colour console output. Defaults to whether stdout is a
            terminal.

    Returns:
        Processors in application order, ending with a renderer.
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if json_format:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stdout.isatty() if colors is None else colors,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )
    return processors


def configure_logging(
    *,
    level: str | None = None,
    json_format: bool = False,
    log_file: str | None = None,
    settings: Settings | None = None,
) -> None:
    """Configure structlog and the standard library root logger.

    structlog renders each event and hands it to a standard library
    logger, so engine events reach stdout and, when given, ``log_file``.

    Args:
        level: Logging level name. Defaults to ``settings.log_level``,
            or DEBUG when ``settings.debug`` is set.
        json_format: Render JSON lines (for log shipping).
        log_file: Also write every record to this file. Console colours
            are turned off so the file stays plain text.
        settings: Settings to read defaults from; the application
            settings when omitted.
    """
    if level is None:
        if settings is None:
            from hero_builder.core.config import get_settings

            settings = get_settings()
        level = "DEBUG" if settings.debug else settings.log_level

    log_level = getattr(logging, level.upper(), logging.INFO)

    structlog.configure(
        processors=build_processors(json_format=json_format, colors=False if log_file else None),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format=LOG_FORMAT, level=log_level, stream=sys.stdout, force=True)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logging.getLogger().addHandler(file_handler)


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger, typically for ``__name__``."""
    return structlog.get_logger(name)


@contextmanager
def hero_context(hero_id: str) -> Iterator[None]:
    """Tag log entries emitted inside the block with ``hero_id``.

    Example:
        >>> with hero_context(hero.id):
        ...     features = flatten_features(hero.features)
    """
    with structlog.contextvars.bound_contextvars(hero_id=hero_id):
        yield


__all__ = [
    "build_processors",
    "configure_logging",
    "get_logger",
    "hero_context",
]

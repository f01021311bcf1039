"""Structured logging setup using structlog.

Library modules obtain loggers with :func:`get_logger` and emit snake_case
events with key-value context. Until an application configures structlog,
events are handed to the stdlib ``logging`` module, so they follow whatever
handlers and levels the host has set up (by default only warnings and above
reach stderr). Applications that want this package to own the output call
:func:`configure_logging` once at startup:

    >>> from kbobce_model.infrastructure.logging import configure_logging, get_logger
    >>> configure_logging()
    >>> get_logger(__name__).info("enterprise_registered", enterprise_number="0123.456.789")

Level and rendering come from :mod:`kbobce_model.config` (``KBO_LOG_LEVEL``,
``KBO_LOG_JSON``).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from kbobce_model.config import Settings, settings as default_settings


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(settings: Settings | None = None) -> None:
    settings = settings or default_settings
    level = _level(settings.log_level)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=True)

    renderer: Processor
    if settings.log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> Any:
    return structlog.get_logger(name)


def route_to_stdlib() -> None:
    """Hand events to stdlib loggers without touching stdlib handlers or levels."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


if not structlog.is_configured():
    route_to_stdlib()

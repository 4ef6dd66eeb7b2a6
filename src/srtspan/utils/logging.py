"""structlog configuration."""

from __future__ import annotations

import logging

import structlog

from srtspan.utils.config import Settings, get_settings


def setup_logging(settings: Settings | None = None) -> None:
    """Configure structlog from settings.

    Args:
        settings: Settings to use; defaults to the cached environment settings

    Raises:
        ValueError: If the configured log level is unknown
    """
    settings = settings or get_settings()

    level_name = settings.log_level.upper()
    levels = logging.getLevelNamesMapping()
    if level_name not in levels:
        raise ValueError(f"Unknown log level: {settings.log_level}")

    renderer: structlog.typing.Processor
    if settings.log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(levels[level_name]),
        cache_logger_on_first_use=False,
    )

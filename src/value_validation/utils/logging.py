"""Structured logging setup (structlog)."""

from __future__ import annotations

import logging
import sys
from typing import Any, List, Optional

import structlog

from value_validation.config.settings import get_settings


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """
    Configure structlog and the stdlib root logger.

    Falls back to LoggingSettings for any argument left as None.
    fmt is 'json' (JSONRenderer) or 'console' (ConsoleRenderer).
    """
    log_settings = get_settings().logging
    level_name = (level or log_settings.log_level).upper()
    fmt_name = (fmt or log_settings.log_format).lower()
    if fmt_name not in ("json", "console"):
        raise ValueError(f"Unknown log format: {fmt_name}")

    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=numeric_level)
    logging.getLogger().setLevel(numeric_level)

    renderer: Any = structlog.processors.JSONRenderer() if fmt_name == "json" else structlog.dev.ConsoleRenderer()
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        renderer,
    ]
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

"""
Structured logging setup for applications using twotrack.

Library modules only ever call structlog.get_logger(); nothing here runs on
import. Applications call configure_structlog() once at startup, passing a
level explicitly or letting it come from TWOTRACK_LOG_LEVEL.
"""

from __future__ import annotations

import logging

import structlog

from twotrack.config import get_settings


def configure_structlog(log_level: str | None = None) -> None:
    """
    Configure structlog for structured, human-readable console logging.

    An unknown level name falls back to INFO rather than failing.
    """
    level_name = (log_level or get_settings().log_level).upper()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level_name, logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

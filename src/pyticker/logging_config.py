from __future__ import annotations

import logging
import os

import structlog

_TRUTHY = {"1", "true", "yes", "on"}


def _resolve_level(level: str | None) -> int:
    if level is None:
        level = os.getenv("PYTICKER_LOG_LEVEL", "INFO")
    # the mapping already knows WARN and FATAL
    return logging.getLevelNamesMapping().get(level.strip().upper(), logging.INFO)


def _resolve_json(json_logs: bool | None) -> bool:
    if json_logs is not None:
        return json_logs
    return os.getenv("PYTICKER_LOG_JSON", "0").strip().lower() in _TRUTHY


def configure_structlog(level: str | None = None, json_logs: bool | None = None) -> None:
    """Set up structlog for a process driving rate limiters.

    Explicit arguments win; otherwise ``PYTICKER_LOG_LEVEL`` and
    ``PYTICKER_LOG_JSON`` are read, defaulting to INFO on the console renderer.
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if _resolve_json(json_logs)
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=False),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_resolve_level(level)),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

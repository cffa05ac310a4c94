"""Structured logging configuration with a per-request request_id."""

from __future__ import annotations

import uuid
from typing import Any

import structlog

__all__ = [
    "configure_logging",
    "get_logger",
    "new_request_id",
]


def new_request_id() -> str:
    """Generate a request ID and bind it to the current context's log entries."""
    rid = uuid.uuid4().hex
    structlog.contextvars.bind_contextvars(request_id=rid)
    return rid


def configure_logging(*, json_output: bool = True, level: str = "INFO") -> None:
    """Configure structlog for the client.

    Args:
        json_output: True for JSON (production), False for console (dev).
        level: Log level string.
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level.lower()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(**kwargs: Any) -> structlog.BoundLogger:
    """Get a bound logger with optional initial context."""
    return structlog.get_logger(**kwargs)  # type: ignore[no-any-return]

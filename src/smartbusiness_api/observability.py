"""Structured log events for API traffic."""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional

# Attributes every LogRecord already carries; extras must not shadow them
RESERVED_LOG_KEYS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime"}

EVENT_LOGGER = "smartbusiness_api.observability"


def log_event(
    event: str,
    logger: Optional[logging.Logger] = None,
    *,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """Emit ``event`` with ``fields`` attached as record attributes."""
    extra = {k: v for k, v in fields.items() if k not in RESERVED_LOG_KEYS}
    extra["event"] = event
    (logger or logging.getLogger(EVENT_LOGGER)).log(level, event, extra=extra)


def log_api_call(
    *,
    method: str,
    path: str,
    endpoint: Optional[str],
    attempt: int,
    started: float,
    status: Optional[int] = None,
    exc: Optional[BaseException] = None,
) -> None:
    """
    One ``api_call`` event per finished request.
    ``started`` is a time.perf_counter() reading; a failed request reports
    status="exception" plus the exception class name.
    """
    fields: Dict[str, Any] = {
        "method": method,
        "path": path,
        "endpoint": endpoint,
        "attempt": attempt,
        "duration_ms": int((time.perf_counter() - started) * 1000),
        "status": "exception" if exc is not None else status,
    }
    if exc is not None:
        fields["error_type"] = type(exc).__name__
    log_event("api_call", **fields)


__all__ = ["log_event", "log_api_call", "RESERVED_LOG_KEYS", "EVENT_LOGGER"]

"""
Logging context management using contextvars.

Request-scoped values (request id, caller, route) are stored in a context
variable and attached to every log entry by :func:`add_context_processor`,
so operation code never has to pass them around.
"""

from __future__ import annotations

from contextvars import ContextVar
from dataclasses import asdict, dataclass
from typing import Any

import structlog


@dataclass
class LogContext:
    """
    Context attached to all log entries.

    request_id: Correlation id (``X-Request-ID`` for API calls)
    caller: Origin of the call: ``"api"``, ``"cli"`` or ``"sdk"``
    method / path: HTTP request line, when serving the API
    operation: Operation function being executed
    """

    request_id: str | None = None
    caller: str | None = None
    method: str | None = None
    path: str | None = None
    operation: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict."""
        return {k: v for k, v in asdict(self).items() if v is not None}

    def merge(self, **kwargs: Any) -> LogContext:
        """Create new context with merged values."""
        current = asdict(self)
        current.update({k: v for k, v in kwargs.items() if v is not None and k in current})
        return LogContext(**current)


_log_context: ContextVar[LogContext] = ContextVar("log_context")  # noqa: B039


def get_context() -> LogContext:
    """Get the current log context."""
    return _log_context.get(LogContext())


def set_context(
    request_id: str | None = None,
    caller: str | None = None,
    method: str | None = None,
    path: str | None = None,
    operation: str | None = None,
) -> LogContext:
    """
    Set the current log context.

    This replaces the current context. Use bind_context() to add to existing.
    """
    ctx = LogContext(
        request_id=request_id,
        caller=caller,
        method=method,
        path=path,
        operation=operation,
    )
    _log_context.set(ctx)
    return ctx


def bind_context(**kwargs: Any) -> LogContext:
    """Merge values into the current context."""
    updated = get_context().merge(**kwargs)
    _log_context.set(updated)
    return updated


def clear_context() -> None:
    """Clear the current context (reset to empty)."""
    _log_context.set(LogContext())


def add_context_processor(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """
    Structlog processor that adds the request context to every log entry.

    Keys already present on the event win over context values.
    """
    for key, value in get_context().to_dict().items():
        event_dict.setdefault(key, value)
    return event_dict


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger (typically ``get_logger(__name__)``)."""
    return structlog.get_logger(name)

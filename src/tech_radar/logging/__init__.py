"""
Tech Radar Logging - structured, request-aware logging.

Usage:
    from tech_radar.logging import get_logger, configure_logging, bind_context

    # Configure once at startup
    configure_logging()

    # Get a logger
    log = get_logger(__name__)

    # Attach request context to all subsequent logs
    bind_context(request_id="abc-123", caller="api")
    log.info("technology_created", id=7)
"""

from tech_radar.logging.config import configure_logging
from tech_radar.logging.context import (
    LogContext,
    bind_context,
    clear_context,
    get_context,
    get_logger,
    set_context,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "set_context",
    "clear_context",
    "get_context",
    "bind_context",
    "LogContext",
]

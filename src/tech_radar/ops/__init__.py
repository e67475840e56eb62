"""
Operations layer — transport-agnostic business logic for tech-radar.

- All functions accept ``OperationContext`` as first argument
- All functions return ``OperationResult[T]`` (never raise)
- The API routers and CLI commands are thin wrappers over these functions

Usage::

    from tech_radar.core.store import RadarStore
    from tech_radar.ops import OperationContext
    from tech_radar.ops.technologies import list_technologies
    from tech_radar.ops.requests import ListTechnologiesRequest

    ctx = OperationContext(store=RadarStore.with_defaults())
    result = list_technologies(ctx, ListTechnologiesRequest(query="docker"))
    assert result.success
"""

from tech_radar.ops.context import OperationContext
from tech_radar.ops.result import OperationError, OperationResult, PagedResult

__all__ = [
    "OperationContext",
    "OperationError",
    "OperationResult",
    "PagedResult",
]

"""
FastAPI dependency injection — shared singletons and per-request factories.

Usage in routers::

    from tech_radar.api.deps import OpContext

    @router.get("/things")
    def list_things(ctx: OpContext):
        ...

The store lives on ``app.state.store`` (set by :func:`create_app`), so each
app instance owns exactly one store and tests can hand in their own.
"""

from __future__ import annotations

import uuid
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request

from tech_radar.api.settings import RadarAPISettings
from tech_radar.core.store import RadarStore
from tech_radar.ops.context import OperationContext

# ── Settings (singleton) ─────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_settings() -> RadarAPISettings:
    """Cached settings — loaded once per process."""
    return RadarAPISettings()


# ── Store (per-app) ──────────────────────────────────────────────────────


def get_store(request: Request) -> RadarStore:
    """The store owned by the running application."""
    return request.app.state.store


# ── Operation context (per-request) ──────────────────────────────────────


def get_operation_context(
    request: Request,
    store: Annotated[RadarStore, Depends(get_store)],
) -> OperationContext:
    """Build an :class:`OperationContext` from the current request."""
    request_id = getattr(request.state, "request_id", str(uuid.uuid4()))
    return OperationContext(
        store=store,
        request_id=request_id,
        caller="api",
    )


# ── Convenience type aliases ─────────────────────────────────────────────

Settings = Annotated[RadarAPISettings, Depends(get_settings)]
Store = Annotated[RadarStore, Depends(get_store)]
OpContext = Annotated[OperationContext, Depends(get_operation_context)]

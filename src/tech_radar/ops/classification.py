"""
Quadrant and ring operations.

Both radar axes share the same contract: list, get, create and update.
Neither can be deleted, because technologies refer to them by position.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from tech_radar.core.models import Quadrant, QuadrantInput, Ring, RingInput
from tech_radar.logging import get_logger
from tech_radar.ops.context import OperationContext
from tech_radar.ops.requests import ListRequest
from tech_radar.ops.result import OperationResult, PagedResult, not_found, start_timer

logger = get_logger(__name__)

# ------------------------------------------------------------------ #
# Quadrants
# ------------------------------------------------------------------ #


def list_quadrants(ctx: OperationContext, request: ListRequest | None = None) -> PagedResult[Quadrant]:
    """List quadrants in creation (position) order."""
    timer = start_timer()
    request = request or ListRequest()
    return PagedResult.paginate(
        ctx.store.list_quadrants(),
        limit=request.limit,
        offset=request.offset,
        elapsed_ms=timer.elapsed_ms,
    )


def get_quadrant(ctx: OperationContext, quadrant_id: int) -> OperationResult[Quadrant]:
    timer = start_timer()
    quadrant = ctx.store.get_quadrant(quadrant_id)
    if quadrant is None:
        return not_found("Quadrant", quadrant_id, timer.elapsed_ms)
    return OperationResult.ok(quadrant, elapsed_ms=timer.elapsed_ms)


def create_quadrant(ctx: OperationContext, request: QuadrantInput) -> OperationResult[Quadrant]:
    timer = start_timer()
    quadrant = ctx.store.create_quadrant(request)
    logger.info("quadrant_created", id=quadrant.id, name=quadrant.name, caller=ctx.caller)
    return OperationResult.ok(quadrant, elapsed_ms=timer.elapsed_ms)


def update_quadrant(
    ctx: OperationContext,
    quadrant_id: int,
    changes: Mapping[str, Any],
) -> OperationResult[Quadrant]:
    timer = start_timer()
    updated = ctx.store.update_quadrant(quadrant_id, changes)
    if updated is None:
        return not_found("Quadrant", quadrant_id, timer.elapsed_ms)
    logger.info("quadrant_updated", id=quadrant_id, fields=sorted(changes))
    return OperationResult.ok(updated, elapsed_ms=timer.elapsed_ms)


# ------------------------------------------------------------------ #
# Rings
# ------------------------------------------------------------------ #


def list_rings(ctx: OperationContext, request: ListRequest | None = None) -> PagedResult[Ring]:
    """List rings innermost first."""
    timer = start_timer()
    request = request or ListRequest()
    return PagedResult.paginate(
        ctx.store.list_rings(),
        limit=request.limit,
        offset=request.offset,
        elapsed_ms=timer.elapsed_ms,
    )


def get_ring(ctx: OperationContext, ring_id: int) -> OperationResult[Ring]:
    timer = start_timer()
    ring = ctx.store.get_ring(ring_id)
    if ring is None:
        return not_found("Ring", ring_id, timer.elapsed_ms)
    return OperationResult.ok(ring, elapsed_ms=timer.elapsed_ms)


def create_ring(ctx: OperationContext, request: RingInput) -> OperationResult[Ring]:
    timer = start_timer()
    ring = ctx.store.create_ring(request)
    logger.info("ring_created", id=ring.id, name=ring.name, caller=ctx.caller)
    return OperationResult.ok(ring, elapsed_ms=timer.elapsed_ms)


def update_ring(
    ctx: OperationContext,
    ring_id: int,
    changes: Mapping[str, Any],
) -> OperationResult[Ring]:
    timer = start_timer()
    updated = ctx.store.update_ring(ring_id, changes)
    if updated is None:
        return not_found("Ring", ring_id, timer.elapsed_ms)
    logger.info("ring_updated", id=ring_id, fields=sorted(changes))
    return OperationResult.ok(updated, elapsed_ms=timer.elapsed_ms)

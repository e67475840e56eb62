"""Radar view operation."""

from __future__ import annotations

from tech_radar.core.radar import RadarView, build_radar
from tech_radar.ops.context import OperationContext
from tech_radar.ops.result import OperationResult, start_timer


def get_radar(ctx: OperationContext, quadrant: int | None = None) -> OperationResult[RadarView]:
    """Resolved radar view.  Unplaceable technologies come back as warnings."""
    timer = start_timer()
    view = build_radar(ctx.store, quadrant=quadrant)
    warnings = [
        f"technology {b.technology_id} ({b.name}) has quadrant={b.quadrant} ring={b.ring} "
        "outside the defined axes"
        for b in view.unresolved
    ]
    return OperationResult.ok(view, warnings=warnings, elapsed_ms=timer.elapsed_ms)

"""
Radar router — the resolved view the visualization draws.

Endpoints:
    GET /radar   Quadrants, rings and one blip per technology
"""

from __future__ import annotations

from fastapi import APIRouter, Query

from tech_radar.api.deps import OpContext
from tech_radar.api.schemas.common import SuccessResponse
from tech_radar.api.schemas.radar import RadarSchema
from tech_radar.api.utils import _handle_error, _single

router = APIRouter(prefix="/radar")


@router.get("", response_model=SuccessResponse[RadarSchema])
def get_radar(
    ctx: OpContext,
    quadrant: int | None = Query(None, description="Only blips in this quadrant position"),
):
    """Resolved radar.  Technologies outside the defined axes are listed in ``warnings``."""
    from tech_radar.ops.radar import get_radar as _get

    result = _get(ctx, quadrant=quadrant)
    if not result.success:
        return _handle_error(result)
    return _single(result, RadarSchema.from_view)

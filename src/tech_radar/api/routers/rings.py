"""
Rings router.

Endpoints:
    GET   /rings        List rings, innermost first
    POST  /rings        Create a ring (appended as the new outermost)
    GET   /rings/{id}   Get one ring
    PATCH /rings/{id}   Partially update a ring
"""

from __future__ import annotations

from fastapi import APIRouter, Path, Query, Request

from tech_radar.api.deps import OpContext
from tech_radar.api.schemas.common import PagedResponse, SuccessResponse
from tech_radar.api.schemas.radar import AxisCreateRequest, AxisUpdateRequest, RingSchema
from tech_radar.api.utils import _handle_error, _paged, _single

router = APIRouter(prefix="/rings")


@router.get("", response_model=PagedResponse[RingSchema])
def list_rings(
    ctx: OpContext,
    limit: int | None = Query(None, ge=1, le=500),
    offset: int = Query(0, ge=0),
):
    from tech_radar.ops.classification import list_rings as _list
    from tech_radar.ops.requests import ListRequest

    result = _list(ctx, ListRequest(limit=limit, offset=offset))
    if not result.success:
        return _handle_error(result)
    return _paged(result, RingSchema.from_entity)


@router.post("", status_code=201, response_model=SuccessResponse[RingSchema])
def create_ring(ctx: OpContext, body: AxisCreateRequest, request: Request):
    from tech_radar.core.models import RingInput
    from tech_radar.ops.classification import create_ring as _create

    result = _create(ctx, RingInput(**body.model_dump()))
    if not result.success:
        return _handle_error(result, request)
    return _single(result, RingSchema.from_entity)


@router.get("/{ring_id}", response_model=SuccessResponse[RingSchema])
def get_ring(ctx: OpContext, request: Request, ring_id: int = Path(..., description="Ring ID")):
    from tech_radar.ops.classification import get_ring as _get

    result = _get(ctx, ring_id)
    if not result.success:
        return _handle_error(result, request)
    return _single(result, RingSchema.from_entity)


@router.patch("/{ring_id}", response_model=SuccessResponse[RingSchema])
def update_ring(
    ctx: OpContext,
    body: AxisUpdateRequest,
    request: Request,
    ring_id: int = Path(..., description="Ring ID"),
):
    from tech_radar.ops.classification import update_ring as _update

    result = _update(ctx, ring_id, body.model_dump(exclude_unset=True))
    if not result.success:
        return _handle_error(result, request)
    return _single(result, RingSchema.from_entity)

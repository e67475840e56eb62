"""
Quadrants router.

Endpoints:
    GET   /quadrants        List quadrants in position order
    POST  /quadrants        Create a quadrant
    GET   /quadrants/{id}   Get one quadrant
    PATCH /quadrants/{id}   Partially update a quadrant

Quadrants cannot be deleted: technologies refer to them by position.
"""

from __future__ import annotations

from fastapi import APIRouter, Path, Query, Request

from tech_radar.api.deps import OpContext
from tech_radar.api.schemas.common import PagedResponse, SuccessResponse
from tech_radar.api.schemas.radar import AxisCreateRequest, AxisUpdateRequest, QuadrantSchema
from tech_radar.api.utils import _handle_error, _paged, _single

router = APIRouter(prefix="/quadrants")


@router.get("", response_model=PagedResponse[QuadrantSchema])
def list_quadrants(
    ctx: OpContext,
    limit: int | None = Query(None, ge=1, le=500),
    offset: int = Query(0, ge=0),
):
    from tech_radar.ops.classification import list_quadrants as _list
    from tech_radar.ops.requests import ListRequest

    result = _list(ctx, ListRequest(limit=limit, offset=offset))
    if not result.success:
        return _handle_error(result)
    return _paged(result, QuadrantSchema.from_entity)


@router.post("", status_code=201, response_model=SuccessResponse[QuadrantSchema])
def create_quadrant(ctx: OpContext, body: AxisCreateRequest, request: Request):
    from tech_radar.core.models import QuadrantInput
    from tech_radar.ops.classification import create_quadrant as _create

    result = _create(ctx, QuadrantInput(**body.model_dump()))
    if not result.success:
        return _handle_error(result, request)
    return _single(result, QuadrantSchema.from_entity)


@router.get("/{quadrant_id}", response_model=SuccessResponse[QuadrantSchema])
def get_quadrant(ctx: OpContext, request: Request, quadrant_id: int = Path(..., description="Quadrant ID")):
    from tech_radar.ops.classification import get_quadrant as _get

    result = _get(ctx, quadrant_id)
    if not result.success:
        return _handle_error(result, request)
    return _single(result, QuadrantSchema.from_entity)


@router.patch("/{quadrant_id}", response_model=SuccessResponse[QuadrantSchema])
def update_quadrant(
    ctx: OpContext,
    body: AxisUpdateRequest,
    request: Request,
    quadrant_id: int = Path(..., description="Quadrant ID"),
):
    from tech_radar.ops.classification import update_quadrant as _update

    result = _update(ctx, quadrant_id, body.model_dump(exclude_unset=True))
    if not result.success:
        return _handle_error(result, request)
    return _single(result, QuadrantSchema.from_entity)

"""
Technologies router — the radar catalog.

Endpoints:
    GET    /technologies                 List, search (``q``) and filter technologies
    POST   /technologies                 Create a technology
    GET    /technologies/{id}            Get one technology
    PATCH  /technologies/{id}            Partially update a technology
    DELETE /technologies/{id}            Delete a technology and its project links
    GET    /technologies/{id}/projects   Projects that use the technology
"""

from __future__ import annotations

from fastapi import APIRouter, Path, Query, Request

from tech_radar.api.deps import OpContext
from tech_radar.api.schemas.common import PagedResponse, SuccessResponse
from tech_radar.api.schemas.radar import (
    ProjectSchema,
    TechnologyCreateRequest,
    TechnologySchema,
    TechnologyUpdateRequest,
)
from tech_radar.api.utils import _handle_error, _paged, _single

router = APIRouter(prefix="/technologies")


@router.get("", response_model=PagedResponse[TechnologySchema])
def list_technologies(
    ctx: OpContext,
    q: str | None = Query(None, description="Case-insensitive match on name, description or tags"),
    quadrant: int | None = Query(None, description="Quadrant position"),
    ring: int | None = Query(None, description="Ring position"),
    limit: int | None = Query(None, ge=1, le=500, description="Maximum items to return"),
    offset: int = Query(0, ge=0, description="Pagination offset"),
):
    """List technologies.

    A blank ``q`` returns the full catalog in creation order.
    """
    from tech_radar.ops.requests import ListTechnologiesRequest
    from tech_radar.ops.technologies import list_technologies as _list

    result = _list(
        ctx,
        ListTechnologiesRequest(query=q, quadrant=quadrant, ring=ring, limit=limit, offset=offset),
    )
    if not result.success:
        return _handle_error(result)
    return _paged(result, TechnologySchema.from_entity)


@router.post("", status_code=201, response_model=SuccessResponse[TechnologySchema])
def create_technology(ctx: OpContext, body: TechnologyCreateRequest, request: Request):
    """Create a technology.  ``custom_properties`` may be an object or JSON text."""
    from tech_radar.ops.requests import CreateTechnologyRequest
    from tech_radar.ops.technologies import create_technology as _create

    result = _create(ctx, CreateTechnologyRequest(**body.model_dump()))
    if not result.success:
        return _handle_error(result, request)
    return _single(result, TechnologySchema.from_entity)


@router.get("/{technology_id}", response_model=SuccessResponse[TechnologySchema])
def get_technology(ctx: OpContext, request: Request, technology_id: int = Path(..., description="Technology ID")):
    from tech_radar.ops.technologies import get_technology as _get

    result = _get(ctx, technology_id)
    if not result.success:
        return _handle_error(result, request)
    return _single(result, TechnologySchema.from_entity)


@router.patch("/{technology_id}", response_model=SuccessResponse[TechnologySchema])
def update_technology(
    ctx: OpContext,
    body: TechnologyUpdateRequest,
    request: Request,
    technology_id: int = Path(..., description="Technology ID"),
):
    """Apply only the fields present in the body; ``null`` clears optional fields."""
    from tech_radar.ops.technologies import update_technology as _update

    result = _update(ctx, technology_id, body.model_dump(exclude_unset=True))
    if not result.success:
        return _handle_error(result, request)
    return _single(result, TechnologySchema.from_entity)


@router.delete("/{technology_id}", response_model=SuccessResponse[TechnologySchema])
def delete_technology(ctx: OpContext, request: Request, technology_id: int = Path(..., description="Technology ID")):
    from tech_radar.ops.technologies import delete_technology as _delete

    result = _delete(ctx, technology_id)
    if not result.success:
        return _handle_error(result, request)
    return _single(result, TechnologySchema.from_entity)


@router.get("/{technology_id}/projects", response_model=SuccessResponse[list[ProjectSchema]])
def list_technology_projects(
    ctx: OpContext,
    request: Request,
    technology_id: int = Path(..., description="Technology ID"),
):
    from tech_radar.ops.technologies import list_technology_projects as _projects

    result = _projects(ctx, technology_id)
    if not result.success:
        return _handle_error(result, request)
    return _single(result, lambda projects: [ProjectSchema.from_entity(p) for p in projects])

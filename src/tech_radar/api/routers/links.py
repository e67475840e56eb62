"""
Technology-project links router.

Endpoints:
    GET    /technology-project-links        List links (filter by technology_id / project_id)
    POST   /technology-project-links        Link a technology to a project
    GET    /technology-project-links/{id}   Get one link
    PATCH  /technology-project-links/{id}   Partially update a link
    DELETE /technology-project-links/{id}   Delete a link

Links are not checked against existing technologies or projects; a dangling
reference is reported in ``warnings``.
"""

from __future__ import annotations

from fastapi import APIRouter, Path, Query, Request

from tech_radar.api.deps import OpContext
from tech_radar.api.schemas.common import PagedResponse, SuccessResponse
from tech_radar.api.schemas.radar import LinkCreateRequest, LinkSchema, LinkUpdateRequest
from tech_radar.api.utils import _handle_error, _paged, _single

router = APIRouter(prefix="/technology-project-links")


@router.get("", response_model=PagedResponse[LinkSchema])
def list_links(
    ctx: OpContext,
    technology_id: int | None = Query(None, description="Only links for this technology"),
    project_id: int | None = Query(None, description="Only links for this project"),
    limit: int | None = Query(None, ge=1, le=500),
    offset: int = Query(0, ge=0),
):
    from tech_radar.ops.links import list_links as _list
    from tech_radar.ops.requests import ListLinksRequest

    result = _list(
        ctx,
        ListLinksRequest(technology_id=technology_id, project_id=project_id, limit=limit, offset=offset),
    )
    if not result.success:
        return _handle_error(result)
    return _paged(result, LinkSchema.from_entity)


@router.post("", status_code=201, response_model=SuccessResponse[LinkSchema])
def create_link(ctx: OpContext, body: LinkCreateRequest, request: Request):
    from tech_radar.core.models import TechnologyProjectInput
    from tech_radar.ops.links import link_technology_to_project

    result = link_technology_to_project(ctx, TechnologyProjectInput(**body.model_dump()))
    if not result.success:
        return _handle_error(result, request)
    return _single(result, LinkSchema.from_entity)


@router.get("/{link_id}", response_model=SuccessResponse[LinkSchema])
def get_link(ctx: OpContext, request: Request, link_id: int = Path(..., description="Link ID")):
    from tech_radar.ops.links import get_link as _get

    result = _get(ctx, link_id)
    if not result.success:
        return _handle_error(result, request)
    return _single(result, LinkSchema.from_entity)


@router.patch("/{link_id}", response_model=SuccessResponse[LinkSchema])
def update_link(
    ctx: OpContext,
    body: LinkUpdateRequest,
    request: Request,
    link_id: int = Path(..., description="Link ID"),
):
    from tech_radar.ops.links import update_link as _update

    result = _update(ctx, link_id, body.model_dump(exclude_unset=True))
    if not result.success:
        return _handle_error(result, request)
    return _single(result, LinkSchema.from_entity)


@router.delete("/{link_id}", response_model=SuccessResponse[LinkSchema])
def delete_link(ctx: OpContext, request: Request, link_id: int = Path(..., description="Link ID")):
    from tech_radar.ops.links import delete_link as _delete

    result = _delete(ctx, link_id)
    if not result.success:
        return _handle_error(result, request)
    return _single(result, LinkSchema.from_entity)

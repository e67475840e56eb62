"""
Projects router.

Endpoints:
    GET    /projects                    List projects
    POST   /projects                    Create a project
    GET    /projects/{id}               Get one project
    PATCH  /projects/{id}               Partially update a project
    DELETE /projects/{id}               Delete a project and its technology links
    GET    /projects/{id}/technologies  Technologies the project uses
"""

from __future__ import annotations

from fastapi import APIRouter, Path, Query, Request

from tech_radar.api.deps import OpContext
from tech_radar.api.schemas.common import PagedResponse, SuccessResponse
from tech_radar.api.schemas.radar import (
    ProjectCreateRequest,
    ProjectSchema,
    ProjectUpdateRequest,
    TechnologySchema,
)
from tech_radar.api.utils import _handle_error, _paged, _single

router = APIRouter(prefix="/projects")


@router.get("", response_model=PagedResponse[ProjectSchema])
def list_projects(
    ctx: OpContext,
    limit: int | None = Query(None, ge=1, le=500),
    offset: int = Query(0, ge=0),
):
    from tech_radar.ops.projects import list_projects as _list
    from tech_radar.ops.requests import ListRequest

    result = _list(ctx, ListRequest(limit=limit, offset=offset))
    if not result.success:
        return _handle_error(result)
    return _paged(result, ProjectSchema.from_entity)


@router.post("", status_code=201, response_model=SuccessResponse[ProjectSchema])
def create_project(ctx: OpContext, body: ProjectCreateRequest, request: Request):
    from tech_radar.core.models import ProjectInput
    from tech_radar.ops.projects import create_project as _create

    result = _create(ctx, ProjectInput(**body.model_dump()))
    if not result.success:
        return _handle_error(result, request)
    return _single(result, ProjectSchema.from_entity)


@router.get("/{project_id}", response_model=SuccessResponse[ProjectSchema])
def get_project(ctx: OpContext, request: Request, project_id: int = Path(..., description="Project ID")):
    from tech_radar.ops.projects import get_project as _get

    result = _get(ctx, project_id)
    if not result.success:
        return _handle_error(result, request)
    return _single(result, ProjectSchema.from_entity)


@router.patch("/{project_id}", response_model=SuccessResponse[ProjectSchema])
def update_project(
    ctx: OpContext,
    body: ProjectUpdateRequest,
    request: Request,
    project_id: int = Path(..., description="Project ID"),
):
    from tech_radar.ops.projects import update_project as _update

    result = _update(ctx, project_id, body.model_dump(exclude_unset=True))
    if not result.success:
        return _handle_error(result, request)
    return _single(result, ProjectSchema.from_entity)


@router.delete("/{project_id}", response_model=SuccessResponse[ProjectSchema])
def delete_project(ctx: OpContext, request: Request, project_id: int = Path(..., description="Project ID")):
    from tech_radar.ops.projects import delete_project as _delete

    result = _delete(ctx, project_id)
    if not result.success:
        return _handle_error(result, request)
    return _single(result, ProjectSchema.from_entity)


@router.get("/{project_id}/technologies", response_model=SuccessResponse[list[TechnologySchema]])
def list_project_technologies(
    ctx: OpContext,
    request: Request,
    project_id: int = Path(..., description="Project ID"),
):
    from tech_radar.ops.projects import list_project_technologies as _technologies

    result = _technologies(ctx, project_id)
    if not result.success:
        return _handle_error(result, request)
    return _single(result, lambda techs: [TechnologySchema.from_entity(t) for t in techs])

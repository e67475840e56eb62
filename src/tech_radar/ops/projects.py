"""
Project operations.

CRUD for projects plus the technologies linked to a project.  Deleting a
project also removes its technology links.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from tech_radar.core.models import Project, ProjectInput, Technology
from tech_radar.logging import get_logger
from tech_radar.ops.context import OperationContext
from tech_radar.ops.requests import ListRequest
from tech_radar.ops.result import OperationResult, PagedResult, not_found, start_timer

logger = get_logger(__name__)


def list_projects(ctx: OperationContext, request: ListRequest | None = None) -> PagedResult[Project]:
    """List projects in creation order."""
    timer = start_timer()
    request = request or ListRequest()
    return PagedResult.paginate(
        ctx.store.list_projects(),
        limit=request.limit,
        offset=request.offset,
        elapsed_ms=timer.elapsed_ms,
    )


def get_project(ctx: OperationContext, project_id: int) -> OperationResult[Project]:
    """Get a single project by ID."""
    timer = start_timer()
    project = ctx.store.get_project(project_id)
    if project is None:
        return not_found("Project", project_id, timer.elapsed_ms)
    return OperationResult.ok(project, elapsed_ms=timer.elapsed_ms)


def create_project(ctx: OperationContext, request: ProjectInput) -> OperationResult[Project]:
    """Create a project.  ``status`` is free text."""
    timer = start_timer()
    project = ctx.store.create_project(request)
    logger.info("project_created", id=project.id, name=project.name, caller=ctx.caller)
    return OperationResult.ok(project, elapsed_ms=timer.elapsed_ms)


def update_project(
    ctx: OperationContext,
    project_id: int,
    changes: Mapping[str, Any],
) -> OperationResult[Project]:
    """Merge *changes* onto a project."""
    timer = start_timer()
    updated = ctx.store.update_project(project_id, changes)
    if updated is None:
        return not_found("Project", project_id, timer.elapsed_ms)
    logger.info("project_updated", id=project_id, fields=sorted(changes))
    return OperationResult.ok(updated, elapsed_ms=timer.elapsed_ms)


def delete_project(ctx: OperationContext, project_id: int) -> OperationResult[Project]:
    """Delete a project and its technology links."""
    timer = start_timer()
    removed = ctx.store.delete_project(project_id)
    if removed is None:
        return not_found("Project", project_id, timer.elapsed_ms)
    return OperationResult.ok(removed, elapsed_ms=timer.elapsed_ms)


def list_project_technologies(
    ctx: OperationContext,
    project_id: int,
) -> OperationResult[list[Technology]]:
    """Technologies linked to a project."""
    timer = start_timer()
    if ctx.store.get_project(project_id) is None:
        return not_found("Project", project_id, timer.elapsed_ms)
    technologies = ctx.store.technologies_for_project(project_id)
    return OperationResult.ok(technologies, elapsed_ms=timer.elapsed_ms)

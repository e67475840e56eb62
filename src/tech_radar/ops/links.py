"""
Technology-project link operations.

Links are created without checking that the referenced technology or
project exists, and the same pair may be linked more than once.  A warning
is attached to the result when a reference dangles so callers can surface it.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from tech_radar.core.models import TechnologyProject, TechnologyProjectInput
from tech_radar.logging import get_logger
from tech_radar.ops.context import OperationContext
from tech_radar.ops.requests import ListLinksRequest
from tech_radar.ops.result import OperationResult, PagedResult, not_found, start_timer

logger = get_logger(__name__)


def list_links(
    ctx: OperationContext,
    request: ListLinksRequest | None = None,
) -> PagedResult[TechnologyProject]:
    """List links, optionally for one technology and/or project."""
    timer = start_timer()
    request = request or ListLinksRequest()

    links = ctx.store.list_links()
    if request.technology_id is not None:
        links = [link for link in links if link.technology_id == request.technology_id]
    if request.project_id is not None:
        links = [link for link in links if link.project_id == request.project_id]

    return PagedResult.paginate(
        links,
        limit=request.limit,
        offset=request.offset,
        elapsed_ms=timer.elapsed_ms,
    )


def get_link(ctx: OperationContext, link_id: int) -> OperationResult[TechnologyProject]:
    timer = start_timer()
    link = ctx.store.get_link(link_id)
    if link is None:
        return not_found("Link", link_id, timer.elapsed_ms)
    return OperationResult.ok(link, elapsed_ms=timer.elapsed_ms)


def link_technology_to_project(
    ctx: OperationContext,
    request: TechnologyProjectInput,
) -> OperationResult[TechnologyProject]:
    """Create a technology-project link."""
    timer = start_timer()
    link = ctx.store.link_technology_to_project(request)

    warnings = []
    if ctx.store.get_technology(link.technology_id) is None:
        warnings.append(f"technology {link.technology_id} does not exist")
    if ctx.store.get_project(link.project_id) is None:
        warnings.append(f"project {link.project_id} does not exist")

    logger.info(
        "technology_linked",
        id=link.id,
        technology_id=link.technology_id,
        project_id=link.project_id,
        dangling=bool(warnings),
    )
    return OperationResult.ok(link, warnings=warnings, elapsed_ms=timer.elapsed_ms)


def update_link(
    ctx: OperationContext,
    link_id: int,
    changes: Mapping[str, Any],
) -> OperationResult[TechnologyProject]:
    timer = start_timer()
    updated = ctx.store.update_link(link_id, changes)
    if updated is None:
        return not_found("Link", link_id, timer.elapsed_ms)
    return OperationResult.ok(updated, elapsed_ms=timer.elapsed_ms)


def delete_link(ctx: OperationContext, link_id: int) -> OperationResult[TechnologyProject]:
    timer = start_timer()
    removed = ctx.store.delete_link(link_id)
    if removed is None:
        return not_found("Link", link_id, timer.elapsed_ms)
    logger.info("link_deleted", id=link_id)
    return OperationResult.ok(removed, elapsed_ms=timer.elapsed_ms)

"""
Technology operations.

List / search / filter, get, create, update and delete technologies, plus
the projects linked to a technology.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from tech_radar.core.errors import ValidationError
from tech_radar.core.models import Project, Technology, TechnologyInput
from tech_radar.logging import get_logger
from tech_radar.ops.context import OperationContext
from tech_radar.ops.requests import CreateTechnologyRequest, ListTechnologiesRequest
from tech_radar.ops.result import (
    OperationError,
    OperationResult,
    PagedResult,
    not_found,
    start_timer,
)

logger = get_logger(__name__)


def list_technologies(
    ctx: OperationContext,
    request: ListTechnologiesRequest,
) -> PagedResult[Technology]:
    """List technologies, optionally searched and filtered.

    A blank ``query`` means no text filter, so the full list comes back in
    store order.
    """
    timer = start_timer()

    try:
        items = ctx.store.filter_technologies(
            request.query,
            quadrant=request.quadrant,
            ring=request.ring,
        )
        return PagedResult.paginate(
            items,
            limit=request.limit,
            offset=request.offset,
            elapsed_ms=timer.elapsed_ms,
        )
    except Exception as exc:
        logger.exception("op_failed", op="list_technologies", error=str(exc))
        return PagedResult(
            success=False,
            error=_err("INTERNAL", f"Failed to list technologies: {exc}"),
            elapsed_ms=timer.elapsed_ms,
        )


def get_technology(
    ctx: OperationContext,
    technology_id: int,
) -> OperationResult[Technology]:
    """Get a single technology by ID."""
    timer = start_timer()

    technology = ctx.store.get_technology(technology_id)
    if technology is None:
        return _not_found(technology_id, timer.elapsed_ms)
    return OperationResult.ok(technology, elapsed_ms=timer.elapsed_ms)


def create_technology(
    ctx: OperationContext,
    request: CreateTechnologyRequest,
) -> OperationResult[Technology]:
    """Create a technology.  Quadrant and ring positions are stored as given."""
    timer = start_timer()

    try:
        custom = parse_custom_properties(request.custom_properties)
    except ValidationError as exc:
        return OperationResult.fail(
            "INVALID_INPUT",
            exc.message,
            category=exc.category,
            details={"field": exc.field},
            elapsed_ms=timer.elapsed_ms,
        )

    try:
        technology = ctx.store.create_technology(
            TechnologyInput(
                name=request.name,
                description=request.description,
                quadrant=request.quadrant,
                ring=request.ring,
                website=request.website,
                tags=list(request.tags),
                custom_properties=custom,
            )
        )
    except Exception as exc:
        logger.exception("op_failed", op="create_technology", error=str(exc))
        return OperationResult.fail(
            "INTERNAL",
            f"Failed to create technology: {exc}",
            elapsed_ms=timer.elapsed_ms,
        )

    logger.info("technology_created", id=technology.id, name=technology.name, caller=ctx.caller)
    return OperationResult.ok(technology, elapsed_ms=timer.elapsed_ms)


def update_technology(
    ctx: OperationContext,
    technology_id: int,
    changes: Mapping[str, Any],
) -> OperationResult[Technology]:
    """Merge *changes* onto a technology.

    Only keys present in *changes* are written; an explicit ``None`` clears
    the field.
    """
    timer = start_timer()

    changes = dict(changes)
    if "custom_properties" in changes:
        try:
            changes["custom_properties"] = parse_custom_properties(changes["custom_properties"])
        except ValidationError as exc:
            return OperationResult.fail(
                "INVALID_INPUT",
                exc.message,
                category=exc.category,
                details={"field": exc.field},
                elapsed_ms=timer.elapsed_ms,
            )

    updated = ctx.store.update_technology(technology_id, changes)
    if updated is None:
        return _not_found(technology_id, timer.elapsed_ms)

    logger.info("technology_updated", id=technology_id, fields=sorted(changes))
    return OperationResult.ok(updated, elapsed_ms=timer.elapsed_ms)


def delete_technology(
    ctx: OperationContext,
    technology_id: int,
) -> OperationResult[Technology]:
    """Delete a technology and its project links."""
    timer = start_timer()

    removed = ctx.store.delete_technology(technology_id)
    if removed is None:
        return _not_found(technology_id, timer.elapsed_ms)
    return OperationResult.ok(removed, elapsed_ms=timer.elapsed_ms)


def list_technology_projects(
    ctx: OperationContext,
    technology_id: int,
) -> OperationResult[list[Project]]:
    """Projects linked to a technology."""
    timer = start_timer()

    if ctx.store.get_technology(technology_id) is None:
        return _not_found(technology_id, timer.elapsed_ms)
    projects = ctx.store.projects_for_technology(technology_id)
    return OperationResult.ok(projects, elapsed_ms=timer.elapsed_ms)


# ------------------------------------------------------------------ #
# Helpers
# ------------------------------------------------------------------ #


def parse_custom_properties(value: Any) -> Any:
    """Accept custom properties as structured data or as JSON text.

    Structured data must be JSON-encodable.
    """
    if not isinstance(value, str):
        try:
            json.dumps(value)
        except (TypeError, ValueError) as e:
            raise ValidationError(
                f"custom_properties is not JSON-encodable: {e}",
                field="custom_properties",
                cause=e,
            ) from e
        return value
    try:
        return json.loads(value)
    except json.JSONDecodeError as e:
        raise ValidationError(
            f"custom_properties is not valid JSON: {e.msg}",
            field="custom_properties",
            cause=e,
        ) from e


def _not_found(technology_id: int, elapsed_ms: float) -> OperationResult[Any]:
    return not_found("Technology", technology_id, elapsed_ms)


def _err(code: str, message: str) -> OperationError:
    return OperationError(code=code, message=message)

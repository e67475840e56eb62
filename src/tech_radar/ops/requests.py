"""
Typed request objects for operations.

Each dataclass represents the *input* contract for an operation function.
Requests carry transport-agnostic data only: no raw HTTP bodies, no Typer
params.  Creates for quadrants, rings, projects and links take the core
input dataclasses directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# ------------------------------------------------------------------ #
# Technologies
# ------------------------------------------------------------------ #


@dataclass(frozen=True, slots=True)
class ListTechnologiesRequest:
    """Request for :func:`tech_radar.ops.technologies.list_technologies`.

    Attributes:
        query: Free-text search; blank means no text filter.
        quadrant: Only technologies at this quadrant position.
        ring: Only technologies at this ring position.
        limit: Page size, ``None`` for everything.
        offset: Items to skip.
    """

    query: str | None = None
    quadrant: int | None = None
    ring: int | None = None
    limit: int | None = None
    offset: int = 0


@dataclass(frozen=True, slots=True)
class CreateTechnologyRequest:
    """Request for :func:`tech_radar.ops.technologies.create_technology`.

    ``custom_properties`` may be structured data or JSON text.
    """

    name: str
    description: str
    quadrant: int
    ring: int
    website: str | None = None
    tags: list[str] = field(default_factory=list)
    custom_properties: Any | None = None


# ------------------------------------------------------------------ #
# Lists
# ------------------------------------------------------------------ #


@dataclass(frozen=True, slots=True)
class ListRequest:
    """Plain pagination for quadrant, ring and project lists."""

    limit: int | None = None
    offset: int = 0


@dataclass(frozen=True, slots=True)
class ListLinksRequest:
    """Request for :func:`tech_radar.ops.links.list_links`."""

    technology_id: int | None = None
    project_id: int | None = None
    limit: int | None = None
    offset: int = 0

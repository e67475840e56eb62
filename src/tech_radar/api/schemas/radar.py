"""
Entity schemas for the radar API.

Response schemas mirror the core dataclasses, except that a technology's
``custom_properties`` goes over the wire as JSON text.  Update schemas are
partial: only fields present in the request body are applied, and ``null``
is refused for fields every entity must have.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, Field, JsonValue, ValidationInfo, field_validator

from tech_radar.core.models import Project, Quadrant, Ring, Technology, TechnologyProject
from tech_radar.core.radar import RadarView


def _reject_null(value: Any, info: ValidationInfo) -> Any:
    if value is None:
        raise ValueError(f"{info.field_name} cannot be null")
    return value


# ------------------------------------------------------------------ #
# Quadrants & rings
# ------------------------------------------------------------------ #


class QuadrantSchema(BaseModel):
    id: int
    name: str
    description: str
    color: str | None = None

    @classmethod
    def from_entity(cls, q: Quadrant) -> QuadrantSchema:
        return cls(id=q.id, name=q.name, description=q.description, color=q.color)


class RingSchema(BaseModel):
    id: int
    name: str
    description: str
    color: str | None = None

    @classmethod
    def from_entity(cls, r: Ring) -> RingSchema:
        return cls(id=r.id, name=r.name, description=r.description, color=r.color)


class AxisCreateRequest(BaseModel):
    """Body for creating a quadrant or a ring."""

    name: str = Field(..., description="Display name")
    description: str = Field(..., description="What belongs here")
    color: str | None = Field(default=None, description="CSS color, e.g. #5ba300")


class AxisUpdateRequest(BaseModel):
    name: str | None = None
    description: str | None = None
    color: str | None = None

    check_required = field_validator("name", "description")(_reject_null)


# ------------------------------------------------------------------ #
# Technologies
# ------------------------------------------------------------------ #


class TechnologySchema(BaseModel):
    """Technology as returned by the API.

    ``custom_properties`` is JSON text, or ``null`` when unset.
    """

    id: int
    name: str | None
    description: str | None
    quadrant: int | None
    ring: int | None
    website: str | None = None
    tags: list[str] = Field(default_factory=list)
    custom_properties: str | None = None

    @classmethod
    def from_entity(cls, t: Technology) -> TechnologySchema:
        return cls(
            id=t.id,
            name=t.name,
            description=t.description,
            quadrant=t.quadrant,
            ring=t.ring,
            website=t.website,
            tags=list(t.tags or []),
            custom_properties=None if t.custom_properties is None else json.dumps(t.custom_properties),
        )


class TechnologyCreateRequest(BaseModel):
    name: str = Field(..., description="Technology name")
    description: str = Field(..., description="Short description")
    quadrant: int = Field(..., description="Quadrant position (0-based, creation order)")
    ring: int = Field(..., description="Ring position (0 = innermost)")
    website: str | None = Field(default=None, description="Homepage URL")
    tags: list[str] = Field(default_factory=list)
    custom_properties: JsonValue = Field(default=None, description="Object, or JSON text")


class TechnologyUpdateRequest(BaseModel):
    name: str | None = None
    description: str | None = None
    quadrant: int | None = None
    ring: int | None = None
    website: str | None = None
    tags: list[str] | None = None
    custom_properties: JsonValue = None

    check_required = field_validator("name", "description", "quadrant", "ring")(_reject_null)


# ------------------------------------------------------------------ #
# Projects
# ------------------------------------------------------------------ #


class ProjectSchema(BaseModel):
    id: int
    name: str | None
    description: str | None
    status: str | None
    website: str | None = None
    repository_url: str | None = None
    image_url: str | None = None

    @classmethod
    def from_entity(cls, p: Project) -> ProjectSchema:
        return cls(
            id=p.id,
            name=p.name,
            description=p.description,
            status=p.status,
            website=p.website,
            repository_url=p.repository_url,
            image_url=p.image_url,
        )


class ProjectCreateRequest(BaseModel):
    name: str
    description: str
    status: str = Field(..., description="Free-form status, e.g. active, planning")
    website: str | None = None
    repository_url: str | None = None
    image_url: str | None = None


class ProjectUpdateRequest(BaseModel):
    name: str | None = None
    description: str | None = None
    status: str | None = None
    website: str | None = None
    repository_url: str | None = None
    image_url: str | None = None

    check_required = field_validator("name", "description", "status")(_reject_null)


# ------------------------------------------------------------------ #
# Links
# ------------------------------------------------------------------ #


class LinkSchema(BaseModel):
    id: int
    technology_id: int
    project_id: int
    notes: str | None = None

    @classmethod
    def from_entity(cls, link: TechnologyProject) -> LinkSchema:
        return cls(
            id=link.id,
            technology_id=link.technology_id,
            project_id=link.project_id,
            notes=link.notes,
        )


class LinkCreateRequest(BaseModel):
    technology_id: int
    project_id: int
    notes: str | None = None


class LinkUpdateRequest(BaseModel):
    technology_id: int | None = None
    project_id: int | None = None
    notes: str | None = None

    check_required = field_validator("technology_id", "project_id")(_reject_null)


# ------------------------------------------------------------------ #
# Radar
# ------------------------------------------------------------------ #


class RadarAxisSchema(BaseModel):
    position: int
    id: int
    name: str
    color: str


class BlipSchema(BaseModel):
    technology_id: int
    name: str | None
    quadrant: int
    ring: int
    quadrant_name: str | None = None
    ring_name: str | None = None
    color: str
    resolved: bool


class RadarSchema(BaseModel):
    quadrants: list[RadarAxisSchema]
    rings: list[RadarAxisSchema]
    blips: list[BlipSchema]

    @classmethod
    def from_view(cls, view: RadarView) -> RadarSchema:
        return cls(
            quadrants=[RadarAxisSchema(**_axis(q)) for q in view.quadrants],
            rings=[RadarAxisSchema(**_axis(r)) for r in view.rings],
            blips=[
                BlipSchema(
                    technology_id=b.technology_id,
                    name=b.name,
                    quadrant=b.quadrant,
                    ring=b.ring,
                    quadrant_name=b.quadrant_name,
                    ring_name=b.ring_name,
                    color=b.color,
                    resolved=b.resolved,
                )
                for b in view.blips
            ],
        )


def _axis(entry) -> dict[str, Any]:
    return {"position": entry.position, "id": entry.id, "name": entry.name, "color": entry.color}

"""
Radar domain entities and their create inputs.

Entities are frozen dataclasses: the store replaces an entity with a merged
copy on update instead of mutating it in place.  Inputs carry only the fields
a caller supplies on create; optional fields default the same way the stored
entity does.

Tags:
    tech-radar, domain, models, dataclasses

Doc-Types:
    api-reference
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pydantic import JsonValue

# ------------------------------------------------------------------ #
# Entities
# ------------------------------------------------------------------ #


@dataclass(frozen=True, slots=True)
class Quadrant:
    """Domain category axis of the radar (Tools, Platforms, ...)."""

    id: int
    name: str
    description: str
    color: str | None = None


@dataclass(frozen=True, slots=True)
class Ring:
    """Adoption-maturity tier.  Creation order is innermost to outermost."""

    id: int
    name: str
    description: str
    color: str | None = None


@dataclass(frozen=True, slots=True)
class Technology:
    """Catalog entry placed on the radar.

    ``quadrant`` and ``ring`` are positions in the creation order of the
    quadrant / ring collections, not entity ids.  They are never validated.
    """

    id: int
    name: str
    description: str
    quadrant: int
    ring: int
    website: str | None = None
    tags: list[str] = field(default_factory=list)
    custom_properties: JsonValue | None = None


@dataclass(frozen=True, slots=True)
class Project:
    """A project that uses one or more technologies."""

    id: int
    name: str
    description: str
    status: str
    website: str | None = None
    repository_url: str | None = None
    image_url: str | None = None


@dataclass(frozen=True, slots=True)
class TechnologyProject:
    """Many-to-many link between a technology and a project."""

    id: int
    technology_id: int
    project_id: int
    notes: str | None = None


# ------------------------------------------------------------------ #
# Create inputs
# ------------------------------------------------------------------ #


@dataclass(frozen=True, slots=True)
class QuadrantInput:
    name: str
    description: str
    color: str | None = None


@dataclass(frozen=True, slots=True)
class RingInput:
    name: str
    description: str
    color: str | None = None


@dataclass(frozen=True, slots=True)
class TechnologyInput:
    name: str
    description: str
    quadrant: int
    ring: int
    website: str | None = None
    tags: list[str] | None = None
    custom_properties: JsonValue | None = None


@dataclass(frozen=True, slots=True)
class ProjectInput:
    name: str
    description: str
    status: str
    website: str | None = None
    repository_url: str | None = None
    image_url: str | None = None


@dataclass(frozen=True, slots=True)
class TechnologyProjectInput:
    technology_id: int
    project_id: int
    notes: str | None = None

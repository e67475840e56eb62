"""
In-memory radar repository.

:class:`RadarStore` is the single source of truth for quadrants, rings,
technologies, projects and technology-project links.  Each collection is a
keyed mapping plus a monotonically increasing id counter; ids start at 1 and
are never reused, even after a delete.

Manifesto:
    The store is an owned object, not ambient global state.  The API keeps
    one on ``app.state`` and the CLI builds one per invocation, so tests can
    create as many isolated stores as they like.

    A missing id is not an error here.  ``get_*`` / ``update_*`` /
    ``delete_*`` return ``None`` and callers branch on presence.  Input is
    stored as given: unknown quadrant/ring positions, duplicate links and
    dangling link ids are all accepted.

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────┐
        │ RadarStore                                               │
        │   _quadrants     _Collection[Quadrant]                   │
        │   _rings         _Collection[Ring]                       │
        │   _technologies  _Collection[Technology]                 │
        │   _projects      _Collection[Project]                    │
        │   _links         _Collection[TechnologyProject]          │
        │   _lock          RLock (one operation in flight)         │
        └──────────────────────────────────────────────────────────┘

Tags:
    tech-radar, repository, in-memory, store, crud, search

Doc-Types:
    api-reference
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Mapping
from dataclasses import fields, replace
from typing import Any, Generic, TypeVar

from tech_radar.core.models import (
    Project,
    ProjectInput,
    Quadrant,
    QuadrantInput,
    Ring,
    RingInput,
    Technology,
    TechnologyInput,
    TechnologyProject,
    TechnologyProjectInput,
)
from tech_radar.logging import get_logger

logger = get_logger(__name__)

E = TypeVar("E")


class _Collection(Generic[E]):
    """Keyed entity mapping with a never-reused id counter."""

    __slots__ = ("name", "_items", "_next_id", "_mutable")

    def __init__(self, name: str, entity_type: type) -> None:
        self.name = name
        self._items: dict[int, E] = {}
        self._next_id = 1
        self._mutable = frozenset(f.name for f in fields(entity_type) if f.name != "id")

    def __len__(self) -> int:
        return len(self._items)

    def get(self, entity_id: int) -> E | None:
        return self._items.get(entity_id)

    def values(self) -> list[E]:
        # dicts keep insertion order, which is id order
        return list(self._items.values())

    def add(self, build: Callable[[int], E]) -> E:
        entity = build(self._next_id)
        self._items[self._next_id] = entity
        self._next_id += 1
        return entity

    def merge(self, entity_id: int, partial: Mapping[str, Any]) -> E | None:
        current = self._items.get(entity_id)
        if current is None:
            return None

        changes = {k: v for k, v in partial.items() if k in self._mutable}
        ignored = sorted(set(partial) - set(changes))
        if ignored:
            logger.debug("update_fields_ignored", collection=self.name, id=entity_id, fields=ignored)
        if isinstance(changes.get("tags"), list):
            changes["tags"] = list(changes["tags"])

        merged = replace(current, **changes)
        self._items[entity_id] = merged
        return merged

    def remove(self, entity_id: int) -> E | None:
        return self._items.pop(entity_id, None)

    def remove_where(self, predicate: Callable[[E], bool]) -> list[E]:
        doomed = [k for k, v in self._items.items() if predicate(v)]
        return [self._items.pop(k) for k in doomed]


def _dedupe(entities: Iterable[Any]) -> list[Any]:
    seen: set[int] = set()
    out = []
    for entity in entities:
        if entity.id not in seen:
            seen.add(entity.id)
            out.append(entity)
    return out


class RadarStore:
    """Owned in-memory store for every radar collection.

    Every public method holds the store lock for its whole duration, so each
    operation completes before the next one starts and reads always reflect
    the latest completed write.
    """

    def __init__(self, seed_data: Any | None = None) -> None:
        self._lock = threading.RLock()
        self._quadrants: _Collection[Quadrant] = _Collection("quadrants", Quadrant)
        self._rings: _Collection[Ring] = _Collection("rings", Ring)
        self._technologies: _Collection[Technology] = _Collection("technologies", Technology)
        self._projects: _Collection[Project] = _Collection("projects", Project)
        self._links: _Collection[TechnologyProject] = _Collection("links", TechnologyProject)

        if seed_data is not None:
            from tech_radar.core.seed import seed_store

            seed_store(self, seed_data)

    @classmethod
    def with_defaults(cls) -> RadarStore:
        """Build a store populated with the built-in sample catalog."""
        from tech_radar.core.seed import default_seed_data

        return cls(default_seed_data())

    def counts(self) -> dict[str, int]:
        """Number of entities held in each collection."""
        with self._lock:
            return {
                "quadrants": len(self._quadrants),
                "rings": len(self._rings),
                "technologies": len(self._technologies),
                "projects": len(self._projects),
                "links": len(self._links),
            }

    # -- quadrants -------------------------------------------------------------

    def get_quadrant(self, quadrant_id: int) -> Quadrant | None:
        with self._lock:
            return self._quadrants.get(quadrant_id)

    def list_quadrants(self) -> list[Quadrant]:
        with self._lock:
            return self._quadrants.values()

    def create_quadrant(self, data: QuadrantInput) -> Quadrant:
        with self._lock:
            quadrant = self._quadrants.add(
                lambda new_id: Quadrant(
                    id=new_id,
                    name=data.name,
                    description=data.description,
                    color=data.color,
                )
            )
        logger.debug("quadrant_stored", id=quadrant.id, name=quadrant.name)
        return quadrant

    def update_quadrant(self, quadrant_id: int, partial: Mapping[str, Any]) -> Quadrant | None:
        with self._lock:
            return self._quadrants.merge(quadrant_id, partial)

    def quadrant_at(self, position: int) -> Quadrant | None:
        """Resolve a technology's positional quadrant reference."""
        with self._lock:
            quadrants = self._quadrants.values()
        if 0 <= position < len(quadrants):
            return quadrants[position]
        return None

    # -- rings -----------------------------------------------------------------

    def get_ring(self, ring_id: int) -> Ring | None:
        with self._lock:
            return self._rings.get(ring_id)

    def list_rings(self) -> list[Ring]:
        with self._lock:
            return self._rings.values()

    def create_ring(self, data: RingInput) -> Ring:
        with self._lock:
            ring = self._rings.add(
                lambda new_id: Ring(
                    id=new_id,
                    name=data.name,
                    description=data.description,
                    color=data.color,
                )
            )
        logger.debug("ring_stored", id=ring.id, name=ring.name)
        return ring

    def update_ring(self, ring_id: int, partial: Mapping[str, Any]) -> Ring | None:
        with self._lock:
            return self._rings.merge(ring_id, partial)

    def ring_at(self, position: int) -> Ring | None:
        """Resolve a technology's positional ring reference."""
        with self._lock:
            rings = self._rings.values()
        if 0 <= position < len(rings):
            return rings[position]
        return None

    # -- technologies ----------------------------------------------------------

    def get_technology(self, technology_id: int) -> Technology | None:
        with self._lock:
            return self._technologies.get(technology_id)

    def list_technologies(self) -> list[Technology]:
        with self._lock:
            return self._technologies.values()

    def create_technology(self, data: TechnologyInput) -> Technology:
        with self._lock:
            technology = self._technologies.add(
                lambda new_id: Technology(
                    id=new_id,
                    name=data.name,
                    description=data.description,
                    quadrant=data.quadrant,
                    ring=data.ring,
                    website=data.website,
                    tags=list(data.tags or []),
                    custom_properties=data.custom_properties,
                )
            )
        logger.debug("technology_stored", id=technology.id, name=technology.name)
        return technology

    def update_technology(self, technology_id: int, partial: Mapping[str, Any]) -> Technology | None:
        with self._lock:
            return self._technologies.merge(technology_id, partial)

    def delete_technology(self, technology_id: int) -> Technology | None:
        """Remove a technology and every link that references it."""
        with self._lock:
            removed = self._technologies.remove(technology_id)
            if removed is None:
                return None
            links = self._links.remove_where(lambda link: link.technology_id == technology_id)
        logger.info("technology_deleted", id=technology_id, links_removed=len(links))
        return removed

    def search_technologies(self, query: str | None) -> list[Technology]:
        """Case-insensitive substring search over name, description and tags.

        A blank (empty or whitespace-only) query returns every technology.
        """
        technologies = self.list_technologies()
        if query is None or not query.strip():
            return technologies

        needle = query.lower()
        return [t for t in technologies if _matches(t, needle)]

    def filter_technologies(
        self,
        query: str | None = None,
        *,
        quadrant: int | None = None,
        ring: int | None = None,
    ) -> list[Technology]:
        """Search, then narrow to one quadrant and/or ring position."""
        results = self.search_technologies(query)
        if quadrant is not None:
            results = [t for t in results if t.quadrant == quadrant]
        if ring is not None:
            results = [t for t in results if t.ring == ring]
        return results

    # -- projects --------------------------------------------------------------

    def get_project(self, project_id: int) -> Project | None:
        with self._lock:
            return self._projects.get(project_id)

    def list_projects(self) -> list[Project]:
        with self._lock:
            return self._projects.values()

    def create_project(self, data: ProjectInput) -> Project:
        with self._lock:
            project = self._projects.add(
                lambda new_id: Project(
                    id=new_id,
                    name=data.name,
                    description=data.description,
                    status=data.status,
                    website=data.website,
                    repository_url=data.repository_url,
                    image_url=data.image_url,
                )
            )
        logger.debug("project_stored", id=project.id, name=project.name)
        return project

    def update_project(self, project_id: int, partial: Mapping[str, Any]) -> Project | None:
        with self._lock:
            return self._projects.merge(project_id, partial)

    def delete_project(self, project_id: int) -> Project | None:
        """Remove a project and every link that references it."""
        with self._lock:
            removed = self._projects.remove(project_id)
            if removed is None:
                return None
            links = self._links.remove_where(lambda link: link.project_id == project_id)
        logger.info("project_deleted", id=project_id, links_removed=len(links))
        return removed

    # -- technology-project links ----------------------------------------------

    def get_link(self, link_id: int) -> TechnologyProject | None:
        with self._lock:
            return self._links.get(link_id)

    def list_links(self) -> list[TechnologyProject]:
        with self._lock:
            return self._links.values()

    def link_technology_to_project(self, data: TechnologyProjectInput) -> TechnologyProject:
        """Create a link.  Neither referenced id is checked for existence."""
        with self._lock:
            link = self._links.add(
                lambda new_id: TechnologyProject(
                    id=new_id,
                    technology_id=data.technology_id,
                    project_id=data.project_id,
                    notes=data.notes,
                )
            )
        logger.debug(
            "link_stored",
            id=link.id,
            technology_id=link.technology_id,
            project_id=link.project_id,
        )
        return link

    def update_link(self, link_id: int, partial: Mapping[str, Any]) -> TechnologyProject | None:
        with self._lock:
            return self._links.merge(link_id, partial)

    def delete_link(self, link_id: int) -> TechnologyProject | None:
        with self._lock:
            return self._links.remove(link_id)

    def links_for_technology(self, technology_id: int) -> list[TechnologyProject]:
        return [link for link in self.list_links() if link.technology_id == technology_id]

    def links_for_project(self, project_id: int) -> list[TechnologyProject]:
        return [link for link in self.list_links() if link.project_id == project_id]

    def projects_for_technology(self, technology_id: int) -> list[Project]:
        """Projects linked to a technology, in first-link order.

        Dangling links are skipped and repeated links yield one project.
        """
        with self._lock:
            found = (self._projects.get(link.project_id) for link in self.links_for_technology(technology_id))
            return _dedupe(p for p in found if p is not None)

    def technologies_for_project(self, project_id: int) -> list[Technology]:
        """Technologies linked to a project, in first-link order."""
        with self._lock:
            found = (self._technologies.get(link.technology_id) for link in self.links_for_project(project_id))
            return _dedupe(t for t in found if t is not None)


def _matches(technology: Technology, needle: str) -> bool:
    # fields may have been cleared to None by an update
    if needle in (technology.name or "").lower():
        return True
    if needle in (technology.description or "").lower():
        return True
    return any(needle in str(tag).lower() for tag in technology.tags or [])

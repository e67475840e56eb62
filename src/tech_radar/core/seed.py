"""
Seed data for the radar store.

:class:`SeedData` describes a whole catalog: quadrants, rings, technologies,
projects and the links between technologies and projects.  It can come from
:func:`default_seed_data` or from a YAML file::

    quadrants:
      - {name: Techniques, description: Ways of working}
    rings:
      - {name: Adopt, description: Use by default, color: "#5ba300"}
    technologies:
      - name: Docker
        description: Container runtime
        quadrant: Platforms      # name or position
        ring: 0
        tags: [containers]
    projects:
      - {name: Radar Portal, description: Internal radar site, status: active}
    links:
      - {technology: Docker, project: Radar Portal, notes: Dev containers}

:func:`seed_store` loads a catalog in a fixed order: quadrants, rings,
technologies, projects, and only then links.  Links are resolved against the
ids returned by the technology and project creates, so they can never point
at an entity that has not been created yet.

Tags:
    tech-radar, seed, yaml, fixtures, bootstrap

Doc-Types:
    api-reference
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import pydantic
import yaml
from pydantic import BaseModel, Field, JsonValue, model_validator

from tech_radar.core.errors import SeedDataError
from tech_radar.core.models import (
    ProjectInput,
    QuadrantInput,
    RingInput,
    TechnologyInput,
    TechnologyProjectInput,
)
from tech_radar.logging import get_logger

if TYPE_CHECKING:
    from tech_radar.core.store import RadarStore

logger = get_logger(__name__)

# ------------------------------------------------------------------ #
# Seed schema
# ------------------------------------------------------------------ #


class QuadrantSeed(BaseModel):
    name: str
    description: str = ""
    color: str | None = None


class RingSeed(BaseModel):
    name: str
    description: str = ""
    color: str | None = None


class TechnologySeed(BaseModel):
    name: str
    description: str = ""
    quadrant: int | str = Field(description="Quadrant position or name")
    ring: int | str = Field(description="Ring position or name")
    website: str | None = None
    tags: list[str] = Field(default_factory=list)
    custom_properties: JsonValue | None = None


class ProjectSeed(BaseModel):
    name: str
    description: str = ""
    status: str = "active"
    website: str | None = None
    repository_url: str | None = None
    image_url: str | None = None


class LinkSeed(BaseModel):
    technology: str = Field(description="Technology name")
    project: str = Field(description="Project name")
    notes: str | None = None


class SeedData(BaseModel):
    """A complete catalog to load into a :class:`RadarStore`."""

    quadrants: list[QuadrantSeed] = Field(default_factory=list)
    rings: list[RingSeed] = Field(default_factory=list)
    technologies: list[TechnologySeed] = Field(default_factory=list)
    projects: list[ProjectSeed] = Field(default_factory=list)
    links: list[LinkSeed] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_references(self) -> SeedData:
        quadrant_names = {q.name.lower() for q in self.quadrants}
        ring_names = {r.name.lower() for r in self.rings}
        for tech in self.technologies:
            if isinstance(tech.quadrant, str) and tech.quadrant.lower() not in quadrant_names:
                raise ValueError(f"technology '{tech.name}' references unknown quadrant '{tech.quadrant}'")
            if isinstance(tech.ring, str) and tech.ring.lower() not in ring_names:
                raise ValueError(f"technology '{tech.name}' references unknown ring '{tech.ring}'")

        tech_names = {t.name for t in self.technologies}
        project_names = {p.name for p in self.projects}
        for link in self.links:
            if link.technology not in tech_names:
                raise ValueError(f"link references unknown technology '{link.technology}'")
            if link.project not in project_names:
                raise ValueError(f"link references unknown project '{link.project}'")
        return self

    @classmethod
    def from_yaml(cls, yaml_content: str) -> SeedData:
        """Parse and validate YAML content.

        Raises
        ------
        SeedDataError
            If the YAML is unreadable or does not match the schema.
        """
        try:
            data = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise SeedDataError(f"Invalid YAML: {e}", cause=e) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise SeedDataError(f"Expected a mapping, got {type(data).__name__}", field="root")

        try:
            return cls.model_validate(data)
        except pydantic.ValidationError as e:
            raise SeedDataError(f"Invalid seed data: {e}", cause=e) from e

    @classmethod
    def from_yaml_file(cls, path: str | Path) -> SeedData:
        """Load and validate a YAML seed file."""
        path = Path(path)
        if not path.is_file():
            raise SeedDataError(f"Seed file not found: {path}", field="seed_file")

        logger.debug("seed_file_loading", path=str(path))
        try:
            return cls.from_yaml(path.read_text(encoding="utf-8"))
        except SeedDataError as e:
            raise e.with_context(path=str(path))


# ------------------------------------------------------------------ #
# Loading
# ------------------------------------------------------------------ #


def _position(value: int | str, names: list[str], kind: str, owner: str) -> int:
    if isinstance(value, int):
        return value
    lowered = [n.lower() for n in names]
    try:
        return lowered.index(value.lower())
    except ValueError:
        raise SeedDataError(f"{kind} '{value}' for '{owner}' does not exist", field=kind) from None


def seed_store(store: RadarStore, data: SeedData) -> dict[str, int]:
    """Load *data* into *store* in dependency order.

    Returns the number of entities created per collection.
    """
    for q in data.quadrants:
        store.create_quadrant(QuadrantInput(name=q.name, description=q.description, color=q.color))
    for r in data.rings:
        store.create_ring(RingInput(name=r.name, description=r.description, color=r.color))

    # Positions are resolved against the store, which may hold entries
    # created before this seed.
    quadrant_names = [q.name for q in store.list_quadrants()]
    ring_names = [r.name for r in store.list_rings()]

    technology_ids: dict[str, int] = {}
    for t in data.technologies:
        created = store.create_technology(
            TechnologyInput(
                name=t.name,
                description=t.description,
                quadrant=_position(t.quadrant, quadrant_names, "quadrant", t.name),
                ring=_position(t.ring, ring_names, "ring", t.name),
                website=t.website,
                tags=t.tags,
                custom_properties=t.custom_properties,
            )
        )
        technology_ids.setdefault(t.name, created.id)

    project_ids: dict[str, int] = {}
    for p in data.projects:
        created = store.create_project(
            ProjectInput(
                name=p.name,
                description=p.description,
                status=p.status,
                website=p.website,
                repository_url=p.repository_url,
                image_url=p.image_url,
            )
        )
        project_ids.setdefault(p.name, created.id)

    # Every project above has been created and its id is known.
    pending: list[TechnologyProjectInput] = []
    for link in data.links:
        if link.technology not in technology_ids or link.project not in project_ids:
            raise SeedDataError(
                f"link {link.technology!r} -> {link.project!r} references an entity that was not seeded",
                field="links",
            )
        pending.append(
            TechnologyProjectInput(
                technology_id=technology_ids[link.technology],
                project_id=project_ids[link.project],
                notes=link.notes,
            )
        )
    for item in pending:
        store.link_technology_to_project(item)

    created = {
        "quadrants": len(data.quadrants),
        "rings": len(data.rings),
        "technologies": len(data.technologies),
        "projects": len(data.projects),
        "links": len(pending),
    }
    logger.info("store_seeded", **created)
    return created


def load_seed(seed_file: str | Path | None = None) -> SeedData:
    """Seed data from *seed_file*, or the built-in catalog when ``None``."""
    if seed_file:
        return SeedData.from_yaml_file(seed_file)
    return default_seed_data()


# ------------------------------------------------------------------ #
# Built-in catalog
# ------------------------------------------------------------------ #

DEFAULT_QUADRANTS = [
    ("Techniques", "Processes, practices and approaches to building software", "#3b82f6"),
    ("Tools", "Software used to build, test and operate systems", "#10b981"),
    ("Frameworks", "Languages, libraries and application frameworks", "#8b5cf6"),
    ("Platforms", "Runtimes and infrastructure we build on", "#f59e0b"),
]

DEFAULT_RINGS = [
    ("Adopt", "Proven in production; use by default", "#5ba300"),
    ("Trial", "Worth pursuing on projects that can handle the risk", "#009eb0"),
    ("Assess", "Worth exploring to understand the impact", "#c7ba00"),
    ("Hold", "Proceed with caution; do not start new work with it", "#e09b96"),
]

# (name, description, quadrant, ring, website, tags, custom_properties)
DEFAULT_TECHNOLOGIES: list[tuple[str, str, int, int, str | None, list[str], Any]] = [
    (
        "Docker",
        "Container runtime and image format for packaging services",
        3, 0, "https://www.docker.com", ["containers", "devops"], None,
    ),
    (
        "Docker Compose",
        "Declarative multi-container setups for local development",
        1, 0, "https://docs.docker.com/compose/", ["containers", "local-development"], None,
    ),
    (
        "Kubernetes",
        "Container orchestration platform for running services at scale",
        3, 1, "https://kubernetes.io", ["orchestration", "containers"],
        {"owner": "platform-team", "license": "Apache-2.0"},
    ),
    (
        "Terraform",
        "Provision cloud infrastructure from versioned configuration",
        1, 0, "https://www.terraform.io", ["infrastructure-as-code", "cloud"], None,
    ),
    (
        "GitHub Actions",
        "CI/CD workflows defined next to the code",
        1, 0, "https://github.com/features/actions", ["ci", "automation"], None,
    ),
    (
        "Jenkins",
        "Self-hosted automation server for build pipelines",
        1, 3, "https://www.jenkins.io", ["ci"], None,
    ),
    (
        "React",
        "Component-based UI library for web frontends",
        2, 0, "https://react.dev", ["frontend", "javascript"], None,
    ),
    (
        "TypeScript",
        "Typed superset of JavaScript",
        2, 0, "https://www.typescriptlang.org", ["javascript", "types"], None,
    ),
    (
        "FastAPI",
        "Python web framework for typed HTTP APIs",
        2, 1, "https://fastapi.tiangolo.com", ["python", "api"], None,
    ),
    (
        "GraphQL",
        "Query language for client-driven APIs",
        2, 1, "https://graphql.org", ["api"], None,
    ),
    (
        "Svelte",
        "Compiler-based frontend framework",
        2, 2, "https://svelte.dev", ["frontend", "javascript"], None,
    ),
    (
        "PostgreSQL",
        "Relational database with strong extension ecosystem",
        3, 0, "https://www.postgresql.org", ["database", "sql"], None,
    ),
    (
        "Apache Kafka",
        "Distributed event streaming platform",
        3, 1, "https://kafka.apache.org", ["streaming", "messaging"], None,
    ),
    (
        "WebAssembly",
        "Portable binary format for running code in browsers and edge runtimes",
        3, 2, "https://webassembly.org", ["runtime", "frontend"], None,
    ),
    (
        "Trunk-based development",
        "Integrate small changes into a single main branch frequently",
        0, 0, None, ["workflow", "ci"], None,
    ),
    (
        "Micro frontends",
        "Split a web frontend into independently deployable pieces",
        0, 2, None, ["frontend", "architecture"], None,
    ),
    (
        "Long-lived feature branches",
        "Branches kept open for weeks before merging",
        0, 3, None, ["workflow"], None,
    ),
]

# (name, description, status, website, repository_url, image_url)
DEFAULT_PROJECTS: list[tuple[str, str, str, str | None, str | None, str | None]] = [
    (
        "Radar Portal",
        "Internal site that publishes the technology radar",
        "active",
        "https://radar.example.com",
        "https://git.example.com/platform/radar-portal",
        None,
    ),
    (
        "Payments Platform",
        "Card and wallet payment processing services",
        "active",
        None,
        "https://git.example.com/payments/platform",
        None,
    ),
    (
        "Data Lake Migration",
        "Move batch analytics to an event-driven pipeline",
        "planning",
        None,
        None,
        None,
    ),
    (
        "Legacy Billing",
        "Monthly invoicing system scheduled for replacement",
        "maintenance",
        None,
        "https://git.example.com/finance/billing",
        None,
    ),
]

# (technology, project, notes)
DEFAULT_LINKS: list[tuple[str, str, str | None]] = [
    ("React", "Radar Portal", "Radar and list views"),
    ("TypeScript", "Radar Portal", None),
    ("FastAPI", "Radar Portal", "Catalog API"),
    ("Docker Compose", "Radar Portal", "Local development stack"),
    ("Kubernetes", "Payments Platform", "Production clusters"),
    ("PostgreSQL", "Payments Platform", "Ledger storage"),
    ("Terraform", "Payments Platform", None),
    ("Apache Kafka", "Data Lake Migration", "Change data capture"),
    ("Docker", "Data Lake Migration", None),
    ("Jenkins", "Legacy Billing", "Nightly builds"),
    ("PostgreSQL", "Legacy Billing", None),
]


def default_seed_data() -> SeedData:
    """The built-in sample catalog."""
    return SeedData(
        quadrants=[QuadrantSeed(name=n, description=d, color=c) for n, d, c in DEFAULT_QUADRANTS],
        rings=[RingSeed(name=n, description=d, color=c) for n, d, c in DEFAULT_RINGS],
        technologies=[
            TechnologySeed(
                name=name,
                description=description,
                quadrant=quadrant,
                ring=ring,
                website=website,
                tags=list(tags),
                custom_properties=custom,
            )
            for name, description, quadrant, ring, website, tags, custom in DEFAULT_TECHNOLOGIES
        ],
        projects=[
            ProjectSeed(
                name=name,
                description=description,
                status=status,
                website=website,
                repository_url=repo,
                image_url=image,
            )
            for name, description, status, website, repo, image in DEFAULT_PROJECTS
        ],
        links=[LinkSeed(technology=t, project=p, notes=n) for t, p, n in DEFAULT_LINKS],
    )

"""Core radar domain: entities, the in-memory store, seeding and the radar view."""

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
from tech_radar.core.store import RadarStore

__all__ = [
    "Project",
    "ProjectInput",
    "Quadrant",
    "QuadrantInput",
    "RadarStore",
    "Ring",
    "RingInput",
    "Technology",
    "TechnologyInput",
    "TechnologyProject",
    "TechnologyProjectInput",
]

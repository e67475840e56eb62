"""
Shared pytest fixtures for tech-radar tests.

This module provides:
- Empty and seeded :class:`RadarStore` instances (one per test)
- An :class:`OperationContext` over the seeded store
- A FastAPI ``TestClient`` bound to the seeded store
- A small YAML seed file on disk
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from tech_radar.api.app import create_app
from tech_radar.api.settings import RadarAPISettings
from tech_radar.core.models import QuadrantInput, RingInput
from tech_radar.core.store import RadarStore
from tech_radar.logging import configure_logging
from tech_radar.ops.context import OperationContext

QUADRANTS = ["Techniques", "Tools", "Frameworks", "Platforms"]
RINGS = ["Adopt", "Trial", "Assess", "Hold"]

SMALL_SEED_YAML = """\
quadrants:
  - {name: Tools, description: Build and run}
  - {name: Platforms, description: Where it runs, color: "#f59e0b"}
rings:
  - {name: Adopt, description: Use by default}
  - {name: Hold, description: Avoid}
technologies:
  - name: Docker
    description: Container runtime
    quadrant: platforms
    ring: Adopt
    tags: [containers]
  - name: Jenkins
    description: Build server
    quadrant: 0
    ring: 1
projects:
  - {name: Radar Portal, description: Internal radar site}
links:
  - {technology: Docker, project: Radar Portal, notes: Dev containers}
"""


@pytest.fixture(autouse=True, scope="session")
def _quiet_logging():
    configure_logging(level="WARNING", force=True)


@pytest.fixture()
def store() -> RadarStore:
    """An empty store."""
    return RadarStore()


@pytest.fixture()
def axes_store() -> RadarStore:
    """A store holding only the four standard quadrants and rings."""
    s = RadarStore()
    for name in QUADRANTS:
        s.create_quadrant(QuadrantInput(name=name, description=f"{name} quadrant"))
    for name in RINGS:
        s.create_ring(RingInput(name=name, description=f"{name} ring"))
    return s


@pytest.fixture()
def seeded_store() -> RadarStore:
    """A store loaded with the built-in sample catalog."""
    return RadarStore.with_defaults()


@pytest.fixture()
def ctx(seeded_store: RadarStore) -> OperationContext:
    return OperationContext(store=seeded_store, caller="test")


@pytest.fixture()
def settings() -> RadarAPISettings:
    return RadarAPISettings(seed_defaults=False, seed_file=None, log_level="WARNING")


@pytest.fixture()
def client(settings: RadarAPISettings, seeded_store: RadarStore) -> TestClient:
    app = create_app(settings=settings, store=seeded_store)
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture()
def seed_file(tmp_path):
    path = tmp_path / "radar.yaml"
    path.write_text(SMALL_SEED_YAML, encoding="utf-8")
    return path

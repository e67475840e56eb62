"""Tests for the app factory, middleware, health and error handling."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from tech_radar.api.app import build_store, create_app
from tech_radar.api.settings import RadarAPISettings
from tech_radar.core.errors import ConfigError


class TestCreateApp:
    def test_empty_store_without_seeding(self, settings):
        app = create_app(settings=settings)
        assert app.state.store.counts()["technologies"] == 0

    def test_default_seed(self):
        app = create_app(settings=RadarAPISettings(seed_defaults=True, seed_file=None))
        assert app.state.store.counts()["technologies"] == 17

    def test_seed_file_wins(self, seed_file):
        app = create_app(settings=RadarAPISettings(seed_defaults=True, seed_file=str(seed_file)))
        assert app.state.store.counts() == {
            "quadrants": 2,
            "rings": 2,
            "technologies": 2,
            "projects": 1,
            "links": 1,
        }

    def test_missing_seed_file(self, tmp_path):
        with pytest.raises(ConfigError, match="does not exist"):
            build_store(RadarAPISettings(seed_file=str(tmp_path / "nope.yaml")))

    def test_custom_prefix(self, seeded_store):
        app = create_app(settings=RadarAPISettings(api_prefix="/v1", seed_defaults=False), store=seeded_store)
        c = TestClient(app)
        assert c.get("/v1/technologies").status_code == 200
        assert c.get("/api/technologies").status_code == 404

    def test_apps_do_not_share_stores(self, settings):
        a = TestClient(create_app(settings=settings))
        b = TestClient(create_app(settings=settings))
        a.post("/api/quadrants", json={"name": "Q", "description": "d"})
        assert b.get("/api/quadrants").json()["data"] == []

    def test_lifespan(self, settings, seeded_store):
        with TestClient(create_app(settings=settings, store=seeded_store)) as c:
            assert c.get("/health/live").json() == {"status": "alive"}

    def test_openapi_lists_routes(self, client):
        paths = client.get("/api/openapi.json").json()["paths"]
        assert "/api/technologies/{technology_id}" in paths
        assert "/api/technology-project-links" in paths


class TestHealth:
    def test_health_counts(self, client):
        body = client.get("/health").json()
        assert body["status"] == "healthy"
        assert body["service"] == "tech-radar"
        assert body["counts"] == {"quadrants": 4, "rings": 4, "technologies": 17, "projects": 4, "links": 11}


class TestMiddleware:
    def test_request_id_generated(self, client):
        resp = client.get("/api/rings")
        assert resp.headers["X-Request-ID"]

    def test_request_id_echoed(self, client):
        resp = client.get("/api/rings", headers={"X-Request-ID": "req-42"})
        assert resp.headers["X-Request-ID"] == "req-42"

    def test_timing_header(self, client):
        assert float(client.get("/api/rings").headers["X-Process-Time-Ms"]) >= 0

    def test_cors(self, client):
        resp = client.options(
            "/api/technologies",
            headers={"Origin": "http://localhost:3000", "Access-Control-Request-Method": "GET"},
        )
        assert resp.headers["access-control-allow-origin"] == "http://localhost:3000"


class TestUnhandledErrors:
    def test_500_problem_detail(self, client):
        with patch("tech_radar.ops.radar.get_radar", side_effect=RuntimeError("kaboom")):
            resp = client.get("/api/radar")
        assert resp.status_code == 500
        body = resp.json()
        assert body["title"] == "Internal Server Error"
        assert body["detail"] == "An unexpected error occurred."

    def test_debug_shows_detail(self, seeded_store):
        app = create_app(settings=RadarAPISettings(debug=True, seed_defaults=False), store=seeded_store)
        c = TestClient(app, raise_server_exceptions=False)
        with patch("tech_radar.ops.radar.get_radar", side_effect=RuntimeError("kaboom")):
            assert c.get("/api/radar").json()["detail"] == "kaboom"

"""Tests for ``tech_radar.api.settings`` and the settings dependency."""

from __future__ import annotations

from tech_radar.api.deps import get_settings
from tech_radar.api.settings import RadarAPISettings


class TestRadarAPISettings:
    def test_defaults(self, monkeypatch):
        for var in ("RADAR_PORT", "RADAR_API_PREFIX", "RADAR_SEED_FILE", "RADAR_SEED_DEFAULTS", "RADAR_DEBUG"):
            monkeypatch.delenv(var, raising=False)
        s = RadarAPISettings(_env_file=None)
        assert s.port == 5000
        assert s.api_prefix == "/api"
        assert s.seed_defaults is True
        assert s.seed_file is None
        assert s.debug is False

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("RADAR_PORT", "8080")
        monkeypatch.setenv("RADAR_SEED_DEFAULTS", "false")
        monkeypatch.setenv("RADAR_CORS_ORIGINS", '["https://radar.example.com"]')
        s = RadarAPISettings(_env_file=None)
        assert s.port == 8080
        assert s.seed_defaults is False
        assert s.cors_origins == ["https://radar.example.com"]

    def test_unknown_env_ignored(self, monkeypatch):
        monkeypatch.setenv("RADAR_NOT_A_SETTING", "x")
        assert not hasattr(RadarAPISettings(_env_file=None), "not_a_setting")


class TestGetSettings:
    def test_cached(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()

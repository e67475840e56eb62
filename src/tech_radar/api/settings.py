"""
API settings.

All values can be overridden via environment variables prefixed with
``RADAR_`` (e.g. ``RADAR_PORT``, ``RADAR_SEED_FILE``) or a ``.env`` file.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings


class RadarAPISettings(BaseSettings):
    """Settings for the tech-radar REST API.

    Order of precedence (highest → lowest):
        1. Environment variables (``RADAR_API_PREFIX``, etc.)
        2. ``.env`` file
        3. Defaults below
    """

    # ── Server ───────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=5000, description="Bind port")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="console", description="Log format: console or json")

    # ── API ──────────────────────────────────────────────────────────────
    api_prefix: str = Field(default="/api", description="URL prefix for all endpoints")
    api_title: str = Field(default="Tech Radar API", description="OpenAPI title")
    api_version: str = Field(default="0.1.0", description="OpenAPI version string")

    # ── Seeding ──────────────────────────────────────────────────────────
    seed_defaults: bool = Field(default=True, description="Load the built-in sample catalog on startup")
    seed_file: str | None = Field(default=None, description="YAML seed file; overrides the built-in catalog")

    # ── CORS ─────────────────────────────────────────────────────────────
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description="Allowed CORS origins",
    )

    model_config: dict[str, Any] = {
        "env_prefix": "RADAR_",
        "env_file": ".env",
        "extra": "ignore",
    }

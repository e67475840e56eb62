"""
Health endpoints, mounted at the root (no API prefix) for container probes.

    GET /health        Status, version, uptime and store collection counts
    GET /health/live   Liveness probe, always 200
"""

from __future__ import annotations

import time
from datetime import UTC, datetime

from fastapi import APIRouter
from pydantic import BaseModel, Field

from tech_radar.api.deps import Store

_START_TIME = time.monotonic()


class HealthResponse(BaseModel):
    status: str = Field(description="healthy")
    service: str
    version: str
    uptime_s: float
    timestamp: str
    counts: dict[str, int] = Field(default_factory=dict, description="Entities per collection")


def create_health_router(service_name: str, version: str, prefix: str = "/health") -> APIRouter:
    """Build the health router for *service_name*."""
    router = APIRouter(tags=["health"])

    @router.get(prefix, response_model=HealthResponse)
    def health(store: Store) -> HealthResponse:
        return HealthResponse(
            status="healthy",
            service=service_name,
            version=version,
            uptime_s=round(time.monotonic() - _START_TIME, 1),
            timestamp=datetime.now(UTC).isoformat(),
            counts=store.counts(),
        )

    @router.get(f"{prefix}/live")
    def liveness() -> dict[str, str]:
        return {"status": "alive"}

    return router

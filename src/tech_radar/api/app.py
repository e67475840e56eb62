"""
FastAPI application factory.

``create_app()`` is the composition root: it configures logging, builds the
in-memory store, and wires middleware, routers, error handlers and lifespan
events into a single ``FastAPI`` instance.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tech_radar.api.deps import get_settings
from tech_radar.api.middleware.errors import unhandled_exception_handler
from tech_radar.api.middleware.request_id import RequestIDMiddleware
from tech_radar.api.middleware.timing import TimingMiddleware
from tech_radar.api.settings import RadarAPISettings
from tech_radar.core.errors import ConfigError
from tech_radar.core.store import RadarStore
from tech_radar.logging import configure_logging, get_logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan — startup / shutdown hooks."""
    log = get_logger("tech_radar.api")
    log.info("tech_radar_api_starting", version=app.version, **app.state.store.counts())
    yield
    log.info("tech_radar_api_stopping")


def build_store(settings: RadarAPISettings) -> RadarStore:
    """Store seeded according to *settings*.

    ``seed_file`` wins over ``seed_defaults``; with neither the store starts empty.
    A ``seed_file`` that does not exist raises :class:`ConfigError`.
    """
    from tech_radar.core.seed import load_seed

    if settings.seed_file:
        if not Path(settings.seed_file).is_file():
            raise ConfigError(
                f"RADAR_SEED_FILE does not exist: {settings.seed_file}",
                context={"seed_file": settings.seed_file},
            )
        return RadarStore(load_seed(settings.seed_file))
    if settings.seed_defaults:
        return RadarStore(load_seed())
    return RadarStore()


def create_app(
    *,
    settings: RadarAPISettings | None = None,
    store: RadarStore | None = None,
) -> FastAPI:
    """Build and return a fully-configured FastAPI application.

    Parameters
    ----------
    settings : RadarAPISettings | None
        Override settings (useful for testing).  When ``None`` the cached
        singleton from :func:`get_settings` is used.
    store : RadarStore | None
        Use this store instead of building one from *settings*.
    """
    settings = settings or get_settings()
    configure_logging(level=settings.log_level, format=settings.log_format)

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        lifespan=lifespan,
        docs_url=f"{settings.api_prefix}/docs",
        redoc_url=f"{settings.api_prefix}/redoc",
        openapi_url=f"{settings.api_prefix}/openapi.json",
    )

    app.state.settings = settings
    app.state.store = store if store is not None else build_store(settings)
    app.dependency_overrides[get_settings] = lambda: settings

    # ── Middleware (outermost → innermost) ────────────────────────────
    app.add_middleware(TimingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Exception handlers ───────────────────────────────────────────
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # ── Routers ──────────────────────────────────────────────────────
    from tech_radar.api.routers import links, projects, quadrants, radar, rings, technologies
    from tech_radar.api.routers.health import create_health_router

    prefix = settings.api_prefix

    app.include_router(create_health_router("tech-radar", version=settings.api_version))

    app.include_router(technologies.router, prefix=prefix, tags=["technologies"])
    app.include_router(quadrants.router, prefix=prefix, tags=["quadrants"])
    app.include_router(rings.router, prefix=prefix, tags=["rings"])
    app.include_router(projects.router, prefix=prefix, tags=["projects"])
    app.include_router(links.router, prefix=prefix, tags=["links"])
    app.include_router(radar.router, prefix=prefix, tags=["radar"])

    return app

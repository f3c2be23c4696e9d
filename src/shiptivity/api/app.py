"""
shiptivity.api.app

FastAPI app factory for the Shiptivity service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Initialize and dispose shared infrastructure (DB engine, session factory, write lock).
- Optionally seed an empty database at startup.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from shiptivity import __version__
from shiptivity.api.routers.clients import router as clients_router
from shiptivity.api.routers.health import router as health_router
from shiptivity.db.init_db import init_db
from shiptivity.db.seed import load_seed_file, seed_clients
from shiptivity.db.session import create_engine, create_sessionmaker
from shiptivity.observability.logging import configure_logging, get_logger
from shiptivity.observability.middleware import RequestContextMiddleware
from shiptivity.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(
        service_name=settings.service_name, level=settings.log_level, fmt=settings.log_format
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        # Engine, session factory and write lock live on app.state for the app's lifetime;
        # routers reach them through `shiptivity.api.deps`.
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        app.state.write_lock = asyncio.Lock()
        try:
            if settings.env in ("dev", "test"):
                # Prod should use Alembic migrations.
                await init_db(engine)
            if settings.seed_file:
                await seed_clients(app.state.sessionmaker, load_seed_file(settings.seed_file))
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Shiptivity API",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(clients_router)

    return app


# --- Module Notes -----------------------------------------------------------
# App composition stays here; reordering lives in `board`, transactions in `services`.

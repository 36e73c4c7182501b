"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from urllib.parse import urlparse

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from penguin_explorer.config import get_settings
from penguin_explorer.infrastructure.database import Base, engine
from penguin_explorer.application.services import CatalogController
from penguin_explorer.infrastructure.dependencies import (
    build_record_store,
    get_catalog_session_manager,
    get_sse_manager,
)
from penguin_explorer.infrastructure.logging.log_config import setup_logging
from penguin_explorer.infrastructure.notifications import SSENotifier
from penguin_explorer.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


async def _ensure_database_exists() -> None:
    """Create the PostgreSQL database named in DATABASE_URL when it is missing.

    SQLite files are created on first connect, so only postgres URLs are handled.
    """
    settings = get_settings()
    if not settings.database_url.startswith("postgresql://"):
        return

    import asyncpg

    db_name = urlparse(settings.database_url).path.lstrip("/")
    if not db_name:
        return
    maintenance_url = settings.database_url.rsplit("/", 1)[0] + "/postgres"

    try:
        conn = await asyncpg.connect(maintenance_url)
        try:
            exists = await conn.fetchval(
                "SELECT 1 FROM pg_database WHERE datname = $1", db_name
            )
            if not exists:
                # CREATE DATABASE cannot run inside a transaction block
                await conn.execute(f'CREATE DATABASE "{db_name}"')
                logger.info("Created database '%s'", db_name)
        finally:
            await conn.close()
    except (OSError, asyncpg.PostgresError) as exc:
        logger.warning("Could not auto-create database '%s': %s", db_name, exc)


async def _seed_default_penguins() -> None:
    """Populate an empty catalog with the default penguins.

    Uses the same seeding routine as a catalog session, so it is a no-op
    whenever the store already holds records.
    """
    controller = CatalogController(
        build_record_store(),
        SSENotifier(get_sse_manager()),
        session_id="startup",
    )
    created = await controller.seed()
    if created:
        logger.info("Seeded %d default penguins at startup", created)
    else:
        logger.debug("Startup seeding skipped")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — create tables, seed defaults, tear down sessions."""
    settings = get_settings()
    setup_logging()

    # 1. Make sure the database and its tables exist
    await _ensure_database_exists()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # 2. Seed the default penguins into an empty store
    if settings.seed_on_startup:
        await _seed_default_penguins()

    yield

    # Shutdown
    get_catalog_session_manager().close_all()
    await get_sse_manager().shutdown()
    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "penguin_explorer.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )

"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from penguin_explorer.config import Settings, get_settings
from penguin_explorer.application.interfaces import RecordStore
from penguin_explorer.application.services import (
    CatalogSessionManager,
    PenguinService,
    SSEManager,
)
from penguin_explorer.infrastructure.database.session import (
    async_session_factory,
    get_db_session,
)
from penguin_explorer.infrastructure.database.repositories import SQLAlchemyPenguinRepository
from penguin_explorer.infrastructure.notifications import SSENotifier
from penguin_explorer.infrastructure.record_store import HttpRecordStore, ServiceRecordStore


async def get_penguin_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[PenguinService, None]:
    """Provides a PenguinService instance with its repository wired up."""
    repository = SQLAlchemyPenguinRepository(session)
    yield PenguinService(repository)


def build_record_store(settings: Settings | None = None) -> RecordStore:
    """Record store used by catalog sessions.

    A configured RECORD_STORE_URL selects the remote HTTP store; otherwise the
    local database is used in-process.
    """
    settings = settings or get_settings()
    if settings.record_store_url:
        return HttpRecordStore(
            base_url=settings.record_store_url,
            timeout=settings.record_store_timeout,
        )
    return ServiceRecordStore(async_session_factory)


@lru_cache
def get_sse_manager() -> SSEManager:
    """Process-wide SSE broadcaster."""
    return SSEManager()


@lru_cache
def get_catalog_session_manager() -> CatalogSessionManager:
    """Process-wide registry of catalog sessions."""
    return CatalogSessionManager(
        store_factory=build_record_store,
        notifier=SSENotifier(get_sse_manager()),
        max_sessions=get_settings().max_catalog_sessions,
    )

"""In-process record store — serves the catalog straight from the local database."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from penguin_explorer.application.interfaces import RecordStore, StoreResult
from penguin_explorer.application.schemas import PenguinCreate, PenguinUpdate
from penguin_explorer.application.services import PenguinService
from penguin_explorer.domain.entities import Penguin
from penguin_explorer.domain.exceptions import EntityNotFoundError
from penguin_explorer.infrastructure.database.repositories import SQLAlchemyPenguinRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ServiceRecordStore(RecordStore):
    """Implements the RecordStore port on top of PenguinService.

    Every call runs in its own session and transaction, committed on success
    and rolled back when the call raises.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def _run(self, action: Callable[[PenguinService], Awaitable[T]]) -> T:
        async with self._session_factory() as session:
            service = PenguinService(SQLAlchemyPenguinRepository(session))
            try:
                result = await action(service)
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            return result

    async def list(self) -> StoreResult[list[Penguin]]:
        penguins = await self._run(lambda service: service.list_penguins())
        return StoreResult.ok(penguins)

    async def create(self, fields: PenguinCreate) -> StoreResult[Penguin]:
        penguin = await self._run(lambda service: service.create_penguin(fields))
        logger.debug("Created penguin %s (%s)", penguin.id, penguin.species)
        return StoreResult.ok(penguin)

    async def update(self, record_id: str, fields: PenguinUpdate) -> StoreResult[Penguin]:
        try:
            penguin = await self._run(
                lambda service: service.update_penguin(record_id, fields)
            )
        except EntityNotFoundError as e:
            return StoreResult.failed(str(e))
        return StoreResult.ok(penguin)

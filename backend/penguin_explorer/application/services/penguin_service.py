"""Application service (use case) for Penguin operations."""

from penguin_explorer.application.interfaces import PenguinRepository
from penguin_explorer.application.schemas import PenguinCreate, PenguinUpdate
from penguin_explorer.domain.entities import Penguin
from penguin_explorer.domain.exceptions import EntityNotFoundError


class PenguinService:
    """Orchestrates penguin CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: PenguinRepository):
        self._repository = repository

    async def get_penguin(self, penguin_id: str) -> Penguin:
        penguin = await self._repository.get_by_id(penguin_id)
        if penguin is None:
            raise EntityNotFoundError("Penguin", penguin_id)
        return penguin

    async def list_penguins(self) -> list[Penguin]:
        return await self._repository.get_all()

    async def create_penguin(self, data: PenguinCreate) -> Penguin:
        penguin = Penguin(**data.model_dump())
        return await self._repository.create(penguin)

    async def update_penguin(self, penguin_id: str, data: PenguinUpdate) -> Penguin:
        penguin = await self.get_penguin(penguin_id)
        penguin.update(**data.changes())
        return await self._repository.update(penguin)

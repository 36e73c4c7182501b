"""Concrete repository implementation for Penguin backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from penguin_explorer.application.interfaces import PenguinRepository
from penguin_explorer.domain.entities import EDITABLE_FIELDS, Penguin
from penguin_explorer.infrastructure.database.models import PenguinModel


class SQLAlchemyPenguinRepository(PenguinRepository):
    """Implements the PenguinRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: PenguinModel) -> Penguin:
        """Map ORM model → domain entity."""
        return Penguin(
            id=model.id,
            species=model.species,
            habitat=model.habitat,
            height=model.height,
            diet=model.diet,
            fun_fact=model.fun_fact,
            image_url=model.image_url,
            is_favorite=model.is_favorite,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Penguin) -> PenguinModel:
        """Map domain entity → ORM model (for creation)."""
        return PenguinModel(
            id=entity.id,
            species=entity.species,
            habitat=entity.habitat,
            height=entity.height,
            diet=entity.diet,
            fun_fact=entity.fun_fact,
            image_url=entity.image_url,
            is_favorite=entity.is_favorite,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def get_by_id(self, penguin_id: str) -> Penguin | None:
        result = await self._session.get(PenguinModel, penguin_id)
        return self._to_entity(result) if result else None

    async def get_all(self) -> list[Penguin]:
        stmt = select(PenguinModel).order_by(
            PenguinModel.created_at.asc(), PenguinModel.id.asc()
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, penguin: Penguin) -> Penguin:
        model = self._to_model(penguin)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, penguin: Penguin) -> Penguin:
        model = await self._session.get(PenguinModel, penguin.id)
        if model is None:
            raise ValueError(f"Penguin {penguin.id} not found in database")
        for name in EDITABLE_FIELDS:
            setattr(model, name, getattr(penguin, name))
        model.updated_at = penguin.updated_at
        await self._session.flush()
        return self._to_entity(model)

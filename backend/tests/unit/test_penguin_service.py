"""Unit tests for the PenguinService."""

import pytest

from penguin_explorer.application.schemas import PenguinCreate, PenguinUpdate
from penguin_explorer.application.services import PenguinService
from penguin_explorer.domain.entities import Penguin
from penguin_explorer.domain.exceptions import EntityNotFoundError
from tests.fakes import FakePenguinRepository


def _create(species: str = "Macaroni Penguin") -> PenguinCreate:
    return PenguinCreate(
        species=species,
        habitat="Subantarctic",
        height="70 cm",
        diet="Krill",
        fun_fact="Named for their yellow crests.",
    )


@pytest.fixture
def service() -> PenguinService:
    return PenguinService(FakePenguinRepository())


@pytest.mark.asyncio
async def test_create_penguin_assigns_id(service: PenguinService):
    penguin = await service.create_penguin(_create())
    assert penguin.id
    assert penguin.species == "Macaroni Penguin"
    assert penguin.is_favorite is False
    assert penguin.image_url is None


@pytest.mark.asyncio
async def test_created_ids_are_unique(service: PenguinService):
    first = await service.create_penguin(_create("A"))
    second = await service.create_penguin(_create("B"))
    assert first.id != second.id


@pytest.mark.asyncio
async def test_get_penguin_not_found(service: PenguinService):
    with pytest.raises(EntityNotFoundError):
        await service.get_penguin("nope")


@pytest.mark.asyncio
async def test_list_penguins(service: PenguinService):
    await service.create_penguin(_create("A"))
    await service.create_penguin(_create("B"))
    penguins = await service.list_penguins()
    assert [p.species for p in penguins] == ["A", "B"]


@pytest.mark.asyncio
async def test_update_penguin_is_partial(service: PenguinService):
    created = await service.create_penguin(_create())
    updated = await service.update_penguin(created.id, PenguinUpdate(is_favorite=True))
    assert updated.id == created.id
    assert updated.is_favorite is True
    assert updated.habitat == "Subantarctic"


@pytest.mark.asyncio
async def test_update_can_clear_image(service: PenguinService):
    created = await service.create_penguin(_create().model_copy(update={"image_url": "🐧"}))
    updated = await service.update_penguin(created.id, PenguinUpdate(image_url=None))
    assert updated.image_url is None


@pytest.mark.asyncio
async def test_update_ignores_null_required_fields(service: PenguinService):
    created = await service.create_penguin(_create())
    updated = await service.update_penguin(created.id, PenguinUpdate(species=None, diet="Fish"))
    assert updated.species == "Macaroni Penguin"
    assert updated.diet == "Fish"


@pytest.mark.asyncio
async def test_update_unknown_penguin(service: PenguinService):
    with pytest.raises(EntityNotFoundError):
        await service.update_penguin("nope", PenguinUpdate(diet="Fish"))


def test_create_rejects_empty_required_fields():
    with pytest.raises(ValueError):
        PenguinCreate(species="", habitat="x", height="x", diet="x", fun_fact="x")


def test_entity_update_rejects_unknown_fields():
    penguin = Penguin(species="A", habitat="B", height="C", diet="D", fun_fact="E")
    with pytest.raises(ValueError):
        penguin.update(id="other")

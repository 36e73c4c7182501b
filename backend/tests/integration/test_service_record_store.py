"""Integration tests for ServiceRecordStore against an in-memory SQLite database."""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from penguin_explorer.application.schemas import PenguinCreate, PenguinUpdate
from penguin_explorer.application.services import CatalogController
from penguin_explorer.infrastructure.database import Base
from penguin_explorer.infrastructure.record_store import ServiceRecordStore
from tests.fakes import FakeNotifier


@pytest_asyncio.fixture
async def store():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    yield ServiceRecordStore(factory)
    await engine.dispose()


def _fields(species: str = "Macaroni Penguin") -> PenguinCreate:
    return PenguinCreate(
        species=species,
        habitat="Subantarctic",
        height="70 cm",
        diet="Krill",
        fun_fact="Named for their yellow crest feathers.",
    )


@pytest.mark.asyncio
async def test_list_empty(store: ServiceRecordStore):
    result = await store.list()

    assert result.success is True
    assert result.data == []


@pytest.mark.asyncio
async def test_create_then_list(store: ServiceRecordStore):
    created = await store.create(_fields())
    listed = await store.list()

    assert created.success is True
    assert created.data.id
    assert created.data.is_favorite is False
    assert [p.id for p in listed.data] == [created.data.id]
    assert listed.data[0].species == "Macaroni Penguin"


@pytest.mark.asyncio
async def test_update_persists_changes(store: ServiceRecordStore):
    created = (await store.create(_fields())).data

    result = await store.update(created.id, PenguinUpdate(is_favorite=True, height="71 cm"))
    stored = (await store.list()).data[0]

    assert result.success is True
    assert stored.is_favorite is True
    assert stored.height == "71 cm"
    assert stored.species == "Macaroni Penguin"


@pytest.mark.asyncio
async def test_update_unknown_id_fails(store: ServiceRecordStore):
    result = await store.update("missing", PenguinUpdate(diet="Fish"))

    assert result.success is False
    assert "missing" in result.error
    assert (await store.list()).data == []


@pytest.mark.asyncio
async def test_controller_seeds_database_once(store: ServiceRecordStore):
    notifier = FakeNotifier()

    first = CatalogController(store, notifier)
    await first.initialize()
    second = CatalogController(store, notifier)
    await second.initialize()

    assert [r.species for r in second.state.records] == [
        "Emperor Penguin",
        "King Penguin",
        "Adelie Penguin",
    ]
    assert len((await store.list()).data) == 3

"""Tests for the /catalog session endpoints, driven end to end over HTTP."""

import pytest
from httpx import ASGITransport, AsyncClient

from penguin_explorer.application.services import CatalogSessionManager
from penguin_explorer.domain.entities import NotificationLevel
from penguin_explorer.infrastructure.dependencies import get_catalog_session_manager
from penguin_explorer.main import app
from tests.fakes import FakeNotifier, FakeRecordStore

FORM = {
    "species": "Galapagos Penguin",
    "habitat": "Galapagos Islands",
    "height": "49 cm",
    "diet": "Small fish",
    "fun_fact": "The only penguin found north of the equator.",
    "image_url": "",
    "is_favorite": True,
}


@pytest.fixture
def store() -> FakeRecordStore:
    return FakeRecordStore()


@pytest.fixture
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture
def client(store: FakeRecordStore, notifier: FakeNotifier):
    manager = CatalogSessionManager(store_factory=lambda: store, notifier=notifier)
    app.dependency_overrides[get_catalog_session_manager] = lambda: manager
    yield AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
    app.dependency_overrides.pop(get_catalog_session_manager, None)


async def _open(client: AsyncClient) -> dict:
    response = await client.post("/api/v1/catalog/sessions")
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_open_session_seeds_and_renders(client: AsyncClient):
    async with client:
        view = await _open(client)

    assert view["session_id"]
    assert view["is_loading"] is False
    assert view["show_empty_state"] is False
    assert [c["species"] for c in view["records"]] == [
        "Emperor Penguin",
        "King Penguin",
        "Adelie Penguin",
    ]
    assert view["records"][1]["image"] == "👑🐧"
    assert view["modal"]["open"] is False
    assert view["confirm_dialog"] is None


@pytest.mark.asyncio
async def test_second_session_does_not_reseed(client: AsyncClient, store: FakeRecordStore):
    async with client:
        await _open(client)
        view = await _open(client)

    assert len(view["records"]) == 3
    assert len(store.penguins) == 3


@pytest.mark.asyncio
async def test_toggle_favorite(client: AsyncClient, notifier: FakeNotifier):
    async with client:
        view = await _open(client)
        sid, rid = view["session_id"], view["records"][0]["id"]
        response = await client.post(f"/api/v1/catalog/sessions/{sid}/records/{rid}/favorite")

    assert response.status_code == 200
    card = next(c for c in response.json()["records"] if c["id"] == rid)
    assert card["is_favorite"] is True
    assert notifier.messages[-1] == (
        NotificationLevel.SUCCESS,
        "Emperor Penguin added to favorites!",
    )


@pytest.mark.asyncio
async def test_add_penguin_through_form(client: AsyncClient):
    async with client:
        view = await _open(client)
        sid = view["session_id"]
        opened = (await client.post(f"/api/v1/catalog/sessions/{sid}/form")).json()
        submitted = await client.post(f"/api/v1/catalog/sessions/{sid}/form/submit", json=FORM)

    assert opened["modal"]["open"] is True
    assert opened["modal"]["title"] == "Add New Penguin"
    result = submitted.json()
    assert len(result["records"]) == 4
    added = result["records"][-1]
    assert added["species"] == "Galapagos Penguin"
    assert added["is_favorite"] is True
    # empty image string renders the default glyph
    assert added["image"] == "🐧"
    assert result["modal"]["open"] is False


@pytest.mark.asyncio
async def test_edit_penguin_through_form(client: AsyncClient):
    async with client:
        view = await _open(client)
        sid, rid = view["session_id"], view["records"][2]["id"]
        opened = (await client.post(f"/api/v1/catalog/sessions/{sid}/form/{rid}")).json()
        values = {**opened["modal"]["values"], "height": "70 cm"}
        submitted = (
            await client.post(f"/api/v1/catalog/sessions/{sid}/form/submit", json=values)
        ).json()

    assert opened["modal"]["title"] == "Edit Penguin"
    assert opened["modal"]["editing_id"] == rid
    assert len(submitted["records"]) == 3
    edited = next(c for c in submitted["records"] if c["id"] == rid)
    assert edited["height"] == "70 cm"
    assert edited["species"] == "Adelie Penguin"


@pytest.mark.asyncio
async def test_invalid_form_is_rejected_before_the_controller(
    client: AsyncClient, store: FakeRecordStore
):
    async with client:
        view = await _open(client)
        sid = view["session_id"]
        response = await client.post(
            f"/api/v1/catalog/sessions/{sid}/form/submit", json={**FORM, "species": ""}
        )

    assert response.status_code == 422
    assert len(store.penguins) == 3


@pytest.mark.asyncio
async def test_failed_submit_keeps_modal_open(
    client: AsyncClient, store: FakeRecordStore, notifier: FakeNotifier
):
    async with client:
        view = await _open(client)
        sid = view["session_id"]
        await client.post(f"/api/v1/catalog/sessions/{sid}/form")
        store.failures["create"] = "raise"
        result = (
            await client.post(f"/api/v1/catalog/sessions/{sid}/form/submit", json=FORM)
        ).json()

    assert result["modal"]["open"] is True
    assert result["modal"]["values"]["species"] == "Galapagos Penguin"
    assert len(result["records"]) == 3
    assert notifier.messages[-1] == (NotificationLevel.ERROR, "Failed to save penguin")


@pytest.mark.asyncio
async def test_delete_flow_is_a_no_op(
    client: AsyncClient, store: FakeRecordStore, notifier: FakeNotifier
):
    async with client:
        view = await _open(client)
        sid, rid = view["session_id"], view["records"][0]["id"]
        asked = (await client.post(f"/api/v1/catalog/sessions/{sid}/records/{rid}/delete")).json()
        confirmed = (await client.post(f"/api/v1/catalog/sessions/{sid}/delete/confirm")).json()
        again = await client.post(f"/api/v1/catalog/sessions/{sid}/delete/confirm")

    assert asked["confirm_dialog"]["content"] == "Are you sure you want to delete Emperor Penguin?"
    assert confirmed["confirm_dialog"] is None
    assert len(confirmed["records"]) == 3
    assert len(store.penguins) == 3
    assert notifier.messages[-1] == (
        NotificationLevel.INFO,
        "Delete functionality not implemented in entity system",
    )
    assert again.status_code == 409


@pytest.mark.asyncio
async def test_cancel_delete_and_form(client: AsyncClient):
    async with client:
        view = await _open(client)
        sid, rid = view["session_id"], view["records"][0]["id"]
        await client.post(f"/api/v1/catalog/sessions/{sid}/records/{rid}/delete")
        cancelled = (await client.delete(f"/api/v1/catalog/sessions/{sid}/delete")).json()
        await client.post(f"/api/v1/catalog/sessions/{sid}/form/{rid}")
        closed = (await client.delete(f"/api/v1/catalog/sessions/{sid}/form")).json()

    assert cancelled["confirm_dialog"] is None
    assert closed["modal"]["open"] is False
    assert closed["modal"]["editing_id"] is None


@pytest.mark.asyncio
async def test_unknown_session_and_record(client: AsyncClient):
    async with client:
        missing_session = await client.get("/api/v1/catalog/sessions/nope")
        view = await _open(client)
        sid = view["session_id"]
        missing_record = await client.post(
            f"/api/v1/catalog/sessions/{sid}/records/nope/favorite"
        )

    assert missing_session.status_code == 404
    assert missing_record.status_code == 404


@pytest.mark.asyncio
async def test_close_session(client: AsyncClient):
    async with client:
        view = await _open(client)
        sid = view["session_id"]
        closed = await client.delete(f"/api/v1/catalog/sessions/{sid}")
        after = await client.get(f"/api/v1/catalog/sessions/{sid}")

    assert closed.status_code == 204
    assert after.status_code == 404

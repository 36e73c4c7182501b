"""Catalog sessions API controller — UI actions, view state, and SSE notifications."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import StreamingResponse

from penguin_explorer.application.schemas import CatalogView, PenguinForm
from penguin_explorer.application.services import (
    CatalogController,
    CatalogSessionManager,
    SSEManager,
)
from penguin_explorer.config import get_settings
from penguin_explorer.domain.exceptions import EntityNotFoundError
from penguin_explorer.infrastructure.dependencies import (
    get_catalog_session_manager,
    get_sse_manager,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/catalog", tags=["Catalog"])


# ── Helpers ──────────────────────────────────────────────────────────


def _view(controller: CatalogController) -> CatalogView:
    return CatalogView.from_state(
        controller.session_id, controller.state, get_settings().default_image
    )


def _session(manager: CatalogSessionManager, session_id: str) -> CatalogController:
    try:
        return manager.get_session(session_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


def _record(controller: CatalogController, record_id: str):
    try:
        return controller.get_record(record_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


# ── Sessions ─────────────────────────────────────────────────────────


@router.post("/sessions", response_model=CatalogView, status_code=status.HTTP_201_CREATED)
async def open_session(
    manager: CatalogSessionManager = Depends(get_catalog_session_manager),
) -> CatalogView:
    """Start a catalog session: load records and seed defaults if the store is empty."""
    controller = await manager.open_session()
    return _view(controller)


@router.get("/sessions/{session_id}", response_model=CatalogView)
async def get_session(
    session_id: str,
    manager: CatalogSessionManager = Depends(get_catalog_session_manager),
) -> CatalogView:
    """Return the current view state of a session."""
    return _view(_session(manager, session_id))


@router.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def close_session(
    session_id: str,
    manager: CatalogSessionManager = Depends(get_catalog_session_manager),
) -> None:
    """Tear down a session and discard its state."""
    try:
        manager.close_session(session_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/sessions/{session_id}/reload", response_model=CatalogView)
async def reload_session(
    session_id: str,
    manager: CatalogSessionManager = Depends(get_catalog_session_manager),
) -> CatalogView:
    """Re-fetch the full record list."""
    controller = _session(manager, session_id)
    await controller.reload()
    return _view(controller)


# ── Record actions ───────────────────────────────────────────────────


@router.post("/sessions/{session_id}/records/{record_id}/favorite", response_model=CatalogView)
async def toggle_favorite(
    session_id: str,
    record_id: str,
    manager: CatalogSessionManager = Depends(get_catalog_session_manager),
) -> CatalogView:
    """Flip the favorite flag of a record."""
    controller = _session(manager, session_id)
    await controller.toggle_favorite(_record(controller, record_id))
    return _view(controller)


@router.post("/sessions/{session_id}/records/{record_id}/delete", response_model=CatalogView)
async def request_delete(
    session_id: str,
    record_id: str,
    manager: CatalogSessionManager = Depends(get_catalog_session_manager),
) -> CatalogView:
    """Open the delete confirmation dialog for a record."""
    controller = _session(manager, session_id)
    controller.request_delete(_record(controller, record_id))
    return _view(controller)


@router.post("/sessions/{session_id}/delete/confirm", response_model=CatalogView)
async def confirm_delete(
    session_id: str,
    manager: CatalogSessionManager = Depends(get_catalog_session_manager),
) -> CatalogView:
    """Confirm the pending delete. The record is kept; the user is told why."""
    controller = _session(manager, session_id)
    if not await controller.confirm_delete():
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="No delete is awaiting confirmation",
        )
    return _view(controller)


@router.delete("/sessions/{session_id}/delete", response_model=CatalogView)
async def cancel_delete(
    session_id: str,
    manager: CatalogSessionManager = Depends(get_catalog_session_manager),
) -> CatalogView:
    """Dismiss the delete confirmation dialog."""
    controller = _session(manager, session_id)
    controller.cancel_delete()
    return _view(controller)


# ── Add / edit form ──────────────────────────────────────────────────


@router.post("/sessions/{session_id}/form", response_model=CatalogView)
async def open_create_form(
    session_id: str,
    manager: CatalogSessionManager = Depends(get_catalog_session_manager),
) -> CatalogView:
    """Open an empty form for a new penguin."""
    controller = _session(manager, session_id)
    controller.open_create_form()
    return _view(controller)


@router.post("/sessions/{session_id}/form/submit", response_model=CatalogView)
async def submit_form(
    session_id: str,
    form: PenguinForm,
    manager: CatalogSessionManager = Depends(get_catalog_session_manager),
) -> CatalogView:
    """Save the form. On failure the modal stays open; see the notification stream."""
    controller = _session(manager, session_id)
    await controller.submit(form)
    return _view(controller)


@router.post("/sessions/{session_id}/form/{record_id}", response_model=CatalogView)
async def open_edit_form(
    session_id: str,
    record_id: str,
    manager: CatalogSessionManager = Depends(get_catalog_session_manager),
) -> CatalogView:
    """Open the form pre-filled with a record's current values."""
    controller = _session(manager, session_id)
    controller.open_edit_form(_record(controller, record_id))
    return _view(controller)


@router.delete("/sessions/{session_id}/form", response_model=CatalogView)
async def cancel_form(
    session_id: str,
    manager: CatalogSessionManager = Depends(get_catalog_session_manager),
) -> CatalogView:
    """Close the form without saving."""
    controller = _session(manager, session_id)
    controller.cancel_form()
    return _view(controller)


# ── SSE Stream ───────────────────────────────────────────────────────


@router.get("/events")
async def notification_stream(
    session_id: str | None = Query(None, description="Only events for this session"),
    sse: SSEManager = Depends(get_sse_manager),
) -> StreamingResponse:
    """SSE endpoint for catalog notifications.

    Clients connect via EventSource and receive 'notification' events
    (success / error / info) produced by their session's actions.
    """
    return StreamingResponse(
        sse.subscribe(session_id),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )

"""Penguin record endpoints — list, read, create, update.

There is no DELETE route; records are never removed.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from penguin_explorer.application.schemas import (
    PenguinCreate,
    PenguinEnvelope,
    PenguinListEnvelope,
    PenguinResponse,
    PenguinUpdate,
)
from penguin_explorer.application.services import PenguinService
from penguin_explorer.domain.exceptions import EntityNotFoundError
from penguin_explorer.infrastructure.dependencies import get_penguin_service

router = APIRouter(prefix="/penguins", tags=["Penguins"])


@router.get("", response_model=PenguinListEnvelope)
async def list_penguins(
    service: PenguinService = Depends(get_penguin_service),
) -> PenguinListEnvelope:
    """Retrieve every penguin in creation order."""
    penguins = await service.list_penguins()
    return PenguinListEnvelope(
        data=[PenguinResponse.model_validate(p, from_attributes=True) for p in penguins]
    )


@router.get("/{penguin_id}", response_model=PenguinEnvelope)
async def get_penguin(
    penguin_id: str,
    service: PenguinService = Depends(get_penguin_service),
) -> PenguinEnvelope:
    """Retrieve a single penguin by ID."""
    try:
        penguin = await service.get_penguin(penguin_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return PenguinEnvelope(data=PenguinResponse.model_validate(penguin, from_attributes=True))


@router.post("", response_model=PenguinEnvelope, status_code=status.HTTP_201_CREATED)
async def create_penguin(
    data: PenguinCreate,
    service: PenguinService = Depends(get_penguin_service),
) -> PenguinEnvelope:
    """Create a new penguin; the id is assigned here."""
    penguin = await service.create_penguin(data)
    return PenguinEnvelope(data=PenguinResponse.model_validate(penguin, from_attributes=True))


@router.put("/{penguin_id}", response_model=PenguinEnvelope)
async def update_penguin(
    penguin_id: str,
    data: PenguinUpdate,
    service: PenguinService = Depends(get_penguin_service),
) -> PenguinEnvelope:
    """Apply a partial update to an existing penguin."""
    try:
        penguin = await service.update_penguin(penguin_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return PenguinEnvelope(data=PenguinResponse.model_validate(penguin, from_attributes=True))

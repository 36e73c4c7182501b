"""Record store port — the list/create/update contract the catalog depends on.

Any backend satisfying this contract is interchangeable: the local database
(``ServiceRecordStore``) or a remote Penguin Explorer API
(``HttpRecordStore``). Failure may be reported either through
``StoreResult.success`` or by raising; callers treat both the same way.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

from penguin_explorer.application.schemas.penguin import PenguinCreate, PenguinUpdate
from penguin_explorer.domain.entities import Penguin

T = TypeVar("T")


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    """Outcome of a record store call."""

    success: bool
    data: T | None = None
    error: str | None = None

    @classmethod
    def ok(cls, data: T) -> "StoreResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def failed(cls, error: str) -> "StoreResult[T]":
        return cls(success=False, error=error)


class RecordStore(ABC):
    """Port for the catalog's entity storage. No delete operation exists."""

    @abstractmethod
    async def list(self) -> StoreResult[list[Penguin]]:
        """Fetch all records. An empty store is a successful empty list."""
        ...

    @abstractmethod
    async def create(self, fields: PenguinCreate) -> StoreResult[Penguin]:
        """Persist a new record; the store assigns its id."""
        ...

    @abstractmethod
    async def update(self, record_id: str, fields: PenguinUpdate) -> StoreResult[Penguin]:
        """Persist changes to an existing record; fails if the id is unknown."""
        ...

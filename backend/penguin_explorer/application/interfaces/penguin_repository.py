"""Abstract repository interface (port) for Penguin persistence."""

from abc import ABC, abstractmethod

from penguin_explorer.domain.entities import Penguin


class PenguinRepository(ABC):
    """Port for penguin persistence — implemented in the infrastructure layer.

    There is intentionally no delete operation.
    """

    @abstractmethod
    async def get_by_id(self, penguin_id: str) -> Penguin | None:
        """Retrieve a single penguin by its UUID."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Penguin]:
        """Retrieve every penguin in creation order."""
        ...

    @abstractmethod
    async def create(self, penguin: Penguin) -> Penguin:
        """Persist a new penguin and return it."""
        ...

    @abstractmethod
    async def update(self, penguin: Penguin) -> Penguin:
        """Update an existing penguin."""
        ...

"""Abstract notifier interface (port) for user-visible status messages."""

from abc import ABC, abstractmethod

from penguin_explorer.domain.entities import Notification


class Notifier(ABC):
    """Delivers notifications from a catalog session to its user."""

    @abstractmethod
    async def notify(self, session_id: str, notification: Notification) -> None:
        """Deliver a single notification. Must not raise for delivery problems."""
        ...

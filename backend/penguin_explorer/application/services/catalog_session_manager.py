"""Catalog session manager — one CatalogController per connected UI."""

import logging
from collections import OrderedDict
from collections.abc import Callable

from penguin_explorer.application.interfaces import Notifier, RecordStore
from penguin_explorer.application.services.catalog_controller import CatalogController
from penguin_explorer.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class CatalogSessionManager:
    """Creates, looks up, and tears down catalog sessions.

    Each session owns its own controller and state; nothing is shared between
    sessions except the record store behind them. At most ``max_sessions``
    are kept: opening one more evicts the least recently used session, so
    tabs that close without ending their session cannot grow the registry.
    """

    def __init__(
        self,
        store_factory: Callable[[], RecordStore],
        notifier: Notifier,
        *,
        max_sessions: int = 100,
    ):
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self._store_factory = store_factory
        self._notifier = notifier
        self._max_sessions = max_sessions
        # least recently used first
        self._sessions: OrderedDict[str, CatalogController] = OrderedDict()

    async def open_session(self) -> CatalogController:
        """Start a session and run its initial load (and seeding if empty)."""
        controller = CatalogController(self._store_factory(), self._notifier)
        self._sessions[controller.session_id] = controller
        self._evict_overflow()
        logger.info("Opened catalog session %s", controller.session_id)
        await controller.initialize()
        return controller

    def get_session(self, session_id: str) -> CatalogController:
        controller = self._sessions.get(session_id)
        if controller is None:
            raise EntityNotFoundError("CatalogSession", session_id)
        self._sessions.move_to_end(session_id)
        return controller

    def close_session(self, session_id: str) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise EntityNotFoundError("CatalogSession", session_id)
        logger.info("Closed catalog session %s", session_id)

    def close_all(self) -> None:
        self._sessions.clear()

    def _evict_overflow(self) -> None:
        while len(self._sessions) > self._max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            logger.info("Evicted idle catalog session %s", evicted)

    @property
    def session_count(self) -> int:
        return len(self._sessions)

"""Notifier adapter that pushes catalog notifications to SSE clients."""

import logging

from penguin_explorer.application.interfaces import Notifier
from penguin_explorer.application.services import SSEManager
from penguin_explorer.domain.entities import Notification, NotificationLevel

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    NotificationLevel.SUCCESS: logging.INFO,
    NotificationLevel.INFO: logging.INFO,
    NotificationLevel.ERROR: logging.WARNING,
}


class SSENotifier(Notifier):
    """Broadcasts each notification as a ``notification`` SSE event."""

    def __init__(self, sse_manager: SSEManager):
        self._sse = sse_manager

    async def notify(self, session_id: str, notification: Notification) -> None:
        logger.log(
            _LOG_LEVELS[notification.level],
            "[%s] %s: %s",
            session_id,
            notification.level.value,
            notification.message,
        )
        await self._sse.broadcast(
            "notification",
            {
                "session_id": session_id,
                "level": notification.level.value,
                "message": notification.message,
                "created_at": notification.created_at.isoformat(),
            },
            session_id=session_id,
        )

"""SSE Manager — in-process event broadcaster for catalog notifications."""

import asyncio
import json
import logging
from collections.abc import AsyncGenerator
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

_QUEUE_SIZE = 100


@dataclass(eq=False)
class _Subscriber:
    session_id: str | None
    queue: asyncio.Queue[str | None] = field(
        default_factory=lambda: asyncio.Queue(maxsize=_QUEUE_SIZE)
    )

    def wants(self, session_id: str | None) -> bool:
        return self.session_id is None or session_id is None or self.session_id == session_id


class SSEManager:
    """Manages SSE client connections and broadcasts catalog events.

    Each connected client gets its own bounded asyncio.Queue and may restrict
    itself to a single catalog session. Clients consume events via an async
    generator.
    """

    def __init__(self) -> None:
        self._subscribers: list[_Subscriber] = []

    async def subscribe(self, session_id: str | None = None) -> AsyncGenerator[str, None]:
        """Subscribe to SSE events. Yields formatted SSE strings.

        The generator automatically unsubscribes when the client disconnects.
        """
        subscriber = _Subscriber(session_id=session_id)
        self._subscribers.append(subscriber)
        try:
            while True:
                event = await subscriber.queue.get()
                if event is None:
                    break
                yield event
        finally:
            if subscriber in self._subscribers:
                self._subscribers.remove(subscriber)

    async def broadcast(
        self, event_type: str, data: dict[str, Any], *, session_id: str | None = None
    ) -> None:
        """Broadcast an SSE event to every client interested in ``session_id``."""
        sse_message = f"event: {event_type}\ndata: {json.dumps(data, ensure_ascii=False)}\n\n"
        dead: list[_Subscriber] = []

        for subscriber in self._subscribers:
            if not subscriber.wants(session_id):
                continue
            try:
                subscriber.queue.put_nowait(sse_message)
            except asyncio.QueueFull:
                dead.append(subscriber)
                logger.warning("SSE client queue full — disconnecting")

        for subscriber in dead:
            self._disconnect(subscriber)

    async def shutdown(self) -> None:
        """Disconnect all connected clients."""
        for subscriber in list(self._subscribers):
            self._disconnect(subscriber)

    def _disconnect(self, subscriber: _Subscriber) -> None:
        # Drop one pending event if needed so the sentinel always fits.
        if subscriber.queue.full():
            subscriber.queue.get_nowait()
        subscriber.queue.put_nowait(None)
        if subscriber in self._subscribers:
            self._subscribers.remove(subscriber)

    @property
    def client_count(self) -> int:
        return len(self._subscribers)

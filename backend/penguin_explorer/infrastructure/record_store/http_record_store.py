"""Remote record store — implements the RecordStore port over HTTP.

Talks to the ``/api/v1/penguins`` endpoints of another Penguin Explorer
instance using httpx. Responses use the ``{"success": ..., "data": ...}``
envelope; non-2xx responses become failed results, while transport errors
are raised as ``RecordStoreError``.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from penguin_explorer.application.interfaces import RecordStore, StoreResult
from penguin_explorer.application.schemas import (
    PenguinCreate,
    PenguinResponse,
    PenguinUpdate,
)
from penguin_explorer.domain.entities import Penguin
from penguin_explorer.domain.exceptions import RecordStoreError

logger = logging.getLogger(__name__)


class HttpRecordStore(RecordStore):
    """Infrastructure adapter — connects to a remote penguins API."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client

    @property
    def _collection_url(self) -> str:
        return f"{self._base_url}/api/v1/penguins"

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def _request(
        self, operation: str, method: str, url: str, payload: dict | None = None
    ) -> tuple[httpx.Response, Any]:
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.request(method, url, json=payload)
        except httpx.HTTPError as e:
            raise RecordStoreError(operation, f"{type(e).__name__}: {e}") from e
        finally:
            if should_close:
                await client.aclose()

        try:
            body = response.json()
        except ValueError:
            body = None
        return response, body

    @staticmethod
    def _failure(response: httpx.Response, body: Any) -> str:
        detail = body.get("detail") if isinstance(body, dict) else None
        return f"HTTP {response.status_code}: {detail or response.reason_phrase}"

    @staticmethod
    def _to_entity(data: dict) -> Penguin:
        dto = PenguinResponse.model_validate(data)
        return Penguin(**dto.model_dump())

    def _unwrap(self, response: httpx.Response, body: Any) -> tuple[bool, Any, str | None]:
        """Split a response into (success, data, error)."""
        if not response.is_success:
            return False, None, self._failure(response, body)
        if not isinstance(body, dict) or not body.get("success", False):
            return False, None, f"Unsuccessful response: {body!r}"
        return True, body.get("data"), None

    async def list(self) -> StoreResult[list[Penguin]]:
        response, body = await self._request("list", "GET", self._collection_url)
        ok, data, error = self._unwrap(response, body)
        if not ok:
            logger.warning("Remote list failed: %s", error)
            return StoreResult.failed(error or "list failed")
        return StoreResult.ok([self._to_entity(item) for item in data or []])

    async def create(self, fields: PenguinCreate) -> StoreResult[Penguin]:
        response, body = await self._request(
            "create", "POST", self._collection_url, fields.model_dump()
        )
        ok, data, error = self._unwrap(response, body)
        if not ok:
            logger.warning("Remote create failed: %s", error)
            return StoreResult.failed(error or "create failed")
        return StoreResult.ok(self._to_entity(data))

    async def update(self, record_id: str, fields: PenguinUpdate) -> StoreResult[Penguin]:
        response, body = await self._request(
            "update",
            "PUT",
            f"{self._collection_url}/{record_id}",
            fields.model_dump(exclude_unset=True),
        )
        ok, data, error = self._unwrap(response, body)
        if not ok:
            logger.warning("Remote update of %s failed: %s", record_id, error)
            return StoreResult.failed(error or "update failed")
        return StoreResult.ok(self._to_entity(data))

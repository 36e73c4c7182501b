"""Catalog controller — loading, seeding, and mutating penguin records for one UI session.

The controller owns a single ``CatalogState``. Every successful mutation is
followed by a full reload from the record store instead of patching the local
list, so the displayed snapshot never drifts from the backend. Store failures
are caught where the call is made, logged, and reported to the user as a
notification; nothing is retried.
"""

import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any
from uuid import uuid4

from penguin_explorer.application.interfaces import Notifier, RecordStore, StoreResult
from penguin_explorer.application.schemas import PenguinCreate, PenguinForm, PenguinUpdate
from penguin_explorer.application.services.default_penguins import DEFAULT_PENGUINS
from penguin_explorer.domain.entities import (
    CatalogState,
    Notification,
    NotificationLevel,
    Penguin,
)
from penguin_explorer.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

DELETE_NOT_IMPLEMENTED = "Delete functionality not implemented in entity system"


class CatalogController:
    """Drives the penguin catalog UI. Depends on the record store and notifier ports."""

    def __init__(
        self,
        store: RecordStore,
        notifier: Notifier,
        *,
        session_id: str | None = None,
        defaults: Sequence[PenguinCreate] = DEFAULT_PENGUINS,
    ):
        self._store = store
        self._notifier = notifier
        self._defaults = tuple(defaults)
        self.session_id = session_id or str(uuid4())
        self.state = CatalogState()

    # ── Loading ──────────────────────────────────────────────────────

    async def initialize(self) -> None:
        """Load the current records, then seed defaults if the store is empty.

        Reload and seed each list the store on their own; nothing coordinates
        the two calls.
        """
        await self.reload()
        await self.seed()

    async def reload(self) -> bool:
        """Replace ``records`` with a fresh snapshot from the store."""
        self.state.is_loading = True
        try:
            result = await self._call("list", self._store.list)
            if result is None:
                return False
            self.state.records = tuple(result.data or ())
            logger.debug(
                "Session %s reloaded %d penguin(s)", self.session_id, len(self.state.records)
            )
            return True
        finally:
            self.state.is_loading = False

    async def seed(self) -> int:
        """Create the default penguins when the store holds none.

        Defaults are created one at a time, in order. Returns the number of
        records created; a failed create stops seeding without a reload.
        """
        result = await self._call("list", self._store.list)
        if result is None:
            logger.warning("Skipping seeding — could not list penguins")
            return 0
        if result.data:
            logger.debug("Store already has %d penguin(s); not seeding", len(result.data))
            return 0

        created = 0
        for fields in self._defaults:
            if await self._call("create", self._store.create, fields) is None:
                logger.error(
                    "Seeding aborted after %d of %d default penguins",
                    created,
                    len(self._defaults),
                )
                return created
            created += 1

        logger.info("Seeded %d default penguins", created)
        await self.reload()
        return created

    # ── Mutations ────────────────────────────────────────────────────

    async def toggle_favorite(self, record: Penguin) -> bool:
        """Flip ``is_favorite`` on a record and report the change."""
        was_favorite = record.is_favorite
        fields = PenguinUpdate(**{**record.editable_values(), "is_favorite": not was_favorite})

        result = await self._call("update", self._store.update, record.id, fields)
        if result is None:
            await self._notify(NotificationLevel.ERROR, "Failed to update favorite")
            return False

        await self.reload()
        change = "removed from" if was_favorite else "added to"
        await self._notify(NotificationLevel.SUCCESS, f"{record.species} {change} favorites!")
        return True

    async def submit(self, form: PenguinForm) -> bool:
        """Save the form — update when editing, create otherwise.

        On failure the modal stays open with the submitted values so the user
        can retry or cancel.
        """
        values = form.model_dump()
        self.state.form_values = dict(values)
        editing = self.state.editing_record

        if editing is not None:
            result = await self._call(
                "update", self._store.update, editing.id, PenguinUpdate(**values)
            )
        else:
            result = await self._call("create", self._store.create, PenguinCreate(**values))

        if result is None:
            await self._notify(NotificationLevel.ERROR, "Failed to save penguin")
            return False

        self._close_form()
        verb = "updated" if editing is not None else "added"
        await self._notify(NotificationLevel.SUCCESS, f"Penguin {verb} successfully!")
        await self.reload()
        return True

    # ── Form & dialogs ───────────────────────────────────────────────

    def open_create_form(self) -> None:
        self.state.editing_record = None
        self.state.reset_form()
        self.state.is_modal_open = True

    def open_edit_form(self, record: Penguin) -> None:
        self.state.editing_record = record
        self.state.form_values = record.editable_values()
        self.state.is_modal_open = True

    def cancel_form(self) -> None:
        self._close_form()

    def request_delete(self, record: Penguin) -> None:
        """Ask the user to confirm deleting ``record``."""
        self.state.pending_delete = record

    async def confirm_delete(self) -> bool:
        """Close the confirmation and tell the user delete has no effect.

        Deletion is not supported by the record store, so no store call is
        made. Returns False when no delete was pending.
        """
        record = self.state.pending_delete
        if record is None:
            return False
        self.state.pending_delete = None
        logger.info("Delete requested for %s (%s); not supported", record.species, record.id)
        await self._notify(NotificationLevel.INFO, DELETE_NOT_IMPLEMENTED)
        return True

    def cancel_delete(self) -> None:
        self.state.pending_delete = None

    def get_record(self, record_id: str) -> Penguin:
        """Look up a record in the current snapshot."""
        record = self.state.find_record(record_id)
        if record is None:
            raise EntityNotFoundError("Penguin", record_id)
        return record

    # ── Helpers ──────────────────────────────────────────────────────

    def _close_form(self) -> None:
        self.state.is_modal_open = False
        self.state.editing_record = None
        self.state.reset_form()

    async def _call(
        self,
        operation: str,
        func: Callable[..., Awaitable[StoreResult[Any]]],
        *args: Any,
    ) -> StoreResult[Any] | None:
        """Run one store call. Returns None for both failure styles."""
        try:
            result = await func(*args)
        except Exception:
            logger.exception("Record store %s failed (session %s)", operation, self.session_id)
            return None
        if not result.success:
            logger.error(
                "Record store %s failed (session %s): %s",
                operation,
                self.session_id,
                result.error,
            )
            return None
        return result

    async def _notify(self, level: NotificationLevel, message: str) -> None:
        await self._notifier.notify(self.session_id, Notification(level=level, message=message))

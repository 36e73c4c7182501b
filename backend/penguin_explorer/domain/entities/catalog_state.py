"""Domain entity holding the state of one catalog UI session."""

from dataclasses import dataclass, field
from typing import Any

from penguin_explorer.domain.entities.penguin import Penguin


def default_form_values() -> dict[str, Any]:
    """Initial contents of an empty add/edit form."""
    return {"is_favorite": False}


@dataclass
class CatalogState:
    """Everything the presentation layer renders from.

    ``records`` is an immutable snapshot. It is only ever replaced as a whole,
    so a reader sees either the previous list or the new one.
    """

    records: tuple[Penguin, ...] = ()
    is_loading: bool = False
    is_modal_open: bool = False
    editing_record: Penguin | None = None
    form_values: dict[str, Any] = field(default_factory=default_form_values)
    pending_delete: Penguin | None = None

    @property
    def is_editing(self) -> bool:
        return self.editing_record is not None

    @property
    def show_empty_state(self) -> bool:
        """True when the "no records" placeholder should be visible."""
        return not self.records and not self.is_loading

    def find_record(self, record_id: str) -> Penguin | None:
        return next((r for r in self.records if r.id == record_id), None)

    def reset_form(self) -> None:
        self.form_values = default_form_values()

"""Pydantic view models for the catalog UI session.

The presentation layer renders exclusively from ``CatalogView``: the card
grid, the empty-state placeholder, the add/edit modal, and the delete
confirmation dialog.
"""

from typing import Any

from pydantic import BaseModel

from penguin_explorer.domain.entities import CatalogState, Penguin


class PenguinCard(BaseModel):
    """One card in the grid."""

    id: str
    species: str
    habitat: str
    height: str
    diet: str
    fun_fact: str
    image: str
    is_favorite: bool

    @classmethod
    def from_entity(cls, penguin: Penguin, default_image: str) -> "PenguinCard":
        return cls(
            id=penguin.id,
            species=penguin.species,
            habitat=penguin.habitat,
            height=penguin.height,
            diet=penguin.diet,
            fun_fact=penguin.fun_fact,
            image=penguin.image_url or default_image,
            is_favorite=penguin.is_favorite,
        )


class ModalView(BaseModel):
    """State of the add/edit modal."""

    open: bool
    title: str
    submit_label: str
    editing_id: str | None = None
    values: dict[str, Any]


class ConfirmDialogView(BaseModel):
    """Delete confirmation dialog."""

    record_id: str
    title: str
    content: str


class CatalogView(BaseModel):
    """Full view model for one catalog session."""

    session_id: str
    is_loading: bool
    show_empty_state: bool
    records: list[PenguinCard]
    modal: ModalView
    confirm_dialog: ConfirmDialogView | None = None

    @classmethod
    def from_state(
        cls, session_id: str, state: CatalogState, default_image: str = "🐧"
    ) -> "CatalogView":
        dialog = None
        if state.pending_delete is not None:
            dialog = ConfirmDialogView(
                record_id=state.pending_delete.id,
                title="Delete Penguin",
                content=f"Are you sure you want to delete {state.pending_delete.species}?",
            )
        return cls(
            session_id=session_id,
            is_loading=state.is_loading,
            show_empty_state=state.show_empty_state,
            records=[PenguinCard.from_entity(r, default_image) for r in state.records],
            modal=ModalView(
                open=state.is_modal_open,
                title="Edit Penguin" if state.is_editing else "Add New Penguin",
                submit_label="Update Penguin" if state.is_editing else "Add Penguin",
                editing_id=state.editing_record.id if state.is_editing else None,
                values=dict(state.form_values),
            ),
            confirm_dialog=dialog,
        )

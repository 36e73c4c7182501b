from .penguin import (
    PenguinCreate,
    PenguinForm,
    PenguinUpdate,
    PenguinResponse,
    PenguinEnvelope,
    PenguinListEnvelope,
)
from .catalog import CatalogView, ConfirmDialogView, ModalView, PenguinCard

__all__ = [
    "PenguinCreate",
    "PenguinForm",
    "PenguinUpdate",
    "PenguinResponse",
    "PenguinEnvelope",
    "PenguinListEnvelope",
    "CatalogView",
    "ConfirmDialogView",
    "ModalView",
    "PenguinCard",
]

from .penguin_repository import PenguinRepository
from .record_store import RecordStore, StoreResult
from .notifier import Notifier

__all__ = [
    "PenguinRepository",
    "RecordStore",
    "StoreResult",
    "Notifier",
]

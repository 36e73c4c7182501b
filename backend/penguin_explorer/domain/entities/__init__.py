from .penguin import Penguin, EDITABLE_FIELDS
from .notification import Notification, NotificationLevel
from .catalog_state import CatalogState, default_form_values

__all__ = [
    "Penguin",
    "EDITABLE_FIELDS",
    "Notification",
    "NotificationLevel",
    "CatalogState",
    "default_form_values",
]

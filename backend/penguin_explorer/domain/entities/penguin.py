"""Domain entity — pure Python business object for a penguin catalog entry."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

# Fields a caller may change after creation; ``id`` and timestamps are excluded.
EDITABLE_FIELDS = (
    "species",
    "habitat",
    "height",
    "diet",
    "fun_fact",
    "image_url",
    "is_favorite",
)


@dataclass
class Penguin:
    """Core domain entity representing one penguin species card.

    ``id`` is assigned once on creation and never changes. ``image_url`` holds
    either an emoji glyph or a URL and may be absent.
    """

    species: str
    habitat: str
    height: str
    diet: str
    fun_fact: str
    image_url: str | None = None
    is_favorite: bool = False
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, **changes: Any) -> None:
        """Apply a partial set of field changes and refresh updated_at."""
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValueError(f"Cannot update field(s): {', '.join(sorted(unknown))}")
        for name, value in changes.items():
            setattr(self, name, value)
        self.updated_at = datetime.now(timezone.utc)

    def editable_values(self) -> dict[str, Any]:
        """Return the editable fields as a plain dict (form pre-fill / full update)."""
        return {name: getattr(self, name) for name in EDITABLE_FIELDS}

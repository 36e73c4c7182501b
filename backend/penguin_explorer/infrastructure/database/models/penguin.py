"""SQLAlchemy ORM model for the Penguin entity."""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from penguin_explorer.infrastructure.database.base import Base


class PenguinModel(Base):
    """ORM model — maps to the 'penguins' table."""

    __tablename__ = "penguins"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    species: Mapped[str] = mapped_column(String(255), nullable=False)
    habitat: Mapped[str] = mapped_column(String(255), nullable=False)
    height: Mapped[str] = mapped_column(String(100), nullable=False)
    diet: Mapped[str] = mapped_column(String(255), nullable=False)
    fun_fact: Mapped[str] = mapped_column(Text, nullable=False)
    image_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    is_favorite: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_penguins_created", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<PenguinModel(id={self.id}, species='{self.species}')>"

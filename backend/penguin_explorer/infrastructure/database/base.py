"""SQLAlchemy declarative base shared by the catalog's ORM models."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models; ``metadata`` drives create_all."""

    pass

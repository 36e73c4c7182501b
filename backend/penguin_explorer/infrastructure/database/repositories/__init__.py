from .penguin_repository import SQLAlchemyPenguinRepository

__all__ = [
    "SQLAlchemyPenguinRepository",
]

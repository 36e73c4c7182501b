from .penguin import PenguinModel

__all__ = [
    "PenguinModel",
]

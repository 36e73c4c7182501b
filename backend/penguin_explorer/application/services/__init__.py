from .penguin_service import PenguinService
from .catalog_controller import CatalogController
from .catalog_session_manager import CatalogSessionManager
from .default_penguins import DEFAULT_PENGUINS
from .sse_manager import SSEManager

__all__ = [
    "PenguinService",
    "CatalogController",
    "CatalogSessionManager",
    "DEFAULT_PENGUINS",
    "SSEManager",
]

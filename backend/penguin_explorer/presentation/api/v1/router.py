"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from penguin_explorer.presentation.api.v1.endpoints.health import router as health_router
from penguin_explorer.presentation.api.v1.endpoints.penguins import router as penguins_router
from penguin_explorer.presentation.api.v1.catalog_sessions_controller import (
    router as catalog_router,
)

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(penguins_router)
router.include_router(catalog_router)

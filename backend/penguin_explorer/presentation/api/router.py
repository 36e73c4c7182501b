"""Top-level API router — mounts the versioned penguin and catalog APIs."""

from fastapi import APIRouter

from penguin_explorer.presentation.api.v1.router import router as v1_router

router = APIRouter(prefix="/api")
router.include_router(v1_router)

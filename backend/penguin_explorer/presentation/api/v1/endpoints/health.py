"""Health check endpoint — no database access, always available."""

from fastapi import APIRouter

from penguin_explorer.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Returns the application status and which record store sessions use."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "record_store": "http" if settings.record_store_url else "database",
    }

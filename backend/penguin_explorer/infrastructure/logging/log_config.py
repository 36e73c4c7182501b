"""Logging setup for the catalog backend.

Each noisy library (SQLAlchemy, httpx, uvicorn) and the catalog's own
session/record-store code gets its own level from Settings, so SQL echo can
be silenced while catalog diagnostics stay at DEBUG.

Usage:
    from penguin_explorer.infrastructure.logging.log_config import setup_logging
    setup_logging()   # once, from the FastAPI lifespan
"""

import logging
import sys

from penguin_explorer.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s — %(message)s"

# Settings field → logger names it controls
LOGGER_CATEGORIES: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite"),
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_catalog": (
        "penguin_explorer.application.services.catalog_controller",
        "penguin_explorer.application.services.catalog_session_manager",
        "penguin_explorer.infrastructure.record_store",
        "penguin_explorer.infrastructure.notifications",
    ),
}


def setup_logging(settings: Settings | None = None) -> dict[str, int]:
    """Apply root and per-category levels; returns the level set per logger name."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(parse_level(settings.log_level))
    # uvicorn installs its own handler; scripts and tests may not have one
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    applied: dict[str, int] = {}
    for field, names in LOGGER_CATEGORIES.items():
        level = parse_level(getattr(settings, field))
        for name in names:
            logging.getLogger(name).setLevel(level)
            applied[name] = level

    categories = " ".join(
        f"{field.removeprefix('log_level_')}={getattr(settings, field)}"
        for field in LOGGER_CATEGORIES
    )
    logging.getLogger(__name__).debug(
        "Logging configured: root=%s %s", settings.log_level, categories
    )
    return applied


def parse_level(raw: str) -> int:
    """Level name → logging constant. Unknown names fall back to INFO."""
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO

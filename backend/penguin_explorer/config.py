import logging
from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Penguin Explorer API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./penguins.db"
    cors_origins: list[str] = ["http://localhost:5173"]

    # Catalog behaviour
    seed_on_startup: bool = True
    default_image: str = "🐧"
    max_catalog_sessions: int = 100          # oldest idle session is evicted beyond this

    # Remote record store — leave empty to use the local database
    record_store_url: str = ""
    record_store_timeout: float = 10.0

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_catalog: str = "INFO"          # CatalogController + record stores

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Normalise the remote store URL and warn about unusable values."""
        url = self.record_store_url.strip()
        if url and not url.startswith(("http://", "https://")):
            _config_logger.warning(
                "Ignoring RECORD_STORE_URL %r — expected an http(s) URL", url
            )
            url = ""
        object.__setattr__(self, "record_store_url", url.rstrip("/"))


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()

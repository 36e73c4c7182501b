"""Unit tests for application settings configuration."""

from pathlib import Path

from penguin_explorer.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_record_store_url_is_normalised():
    settings = Settings(record_store_url=" http://catalog.local:8020/ ")
    assert settings.record_store_url == "http://catalog.local:8020"


def test_record_store_url_must_be_http():
    settings = Settings(record_store_url="ftp://catalog.local")
    assert settings.record_store_url == ""


def test_catalog_defaults():
    settings = Settings()
    assert settings.default_image == "🐧"
    assert settings.seed_on_startup is True
    assert settings.max_catalog_sessions == 100


def test_database_urls_use_async_drivers():
    from penguin_explorer.infrastructure.database.session import engine_options, to_async_url

    assert to_async_url("sqlite:///./penguins.db") == "sqlite+aiosqlite:///./penguins.db"
    assert to_async_url("postgresql://u:p@db/penguins") == "postgresql+asyncpg://u:p@db/penguins"
    assert to_async_url("sqlite+aiosqlite:///:memory:") == "sqlite+aiosqlite:///:memory:"
    assert "connect_args" in engine_options("sqlite+aiosqlite:///x.db")
    assert engine_options("postgresql+asyncpg://db/p") == {"pool_pre_ping": True}

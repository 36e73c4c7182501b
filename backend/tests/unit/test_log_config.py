"""Unit tests for per-category logging setup."""

import logging

from penguin_explorer.config import Settings
from penguin_explorer.infrastructure.logging.log_config import parse_level, setup_logging


def test_parse_level():
    assert parse_level("debug") == logging.DEBUG
    assert parse_level(" WARNING ") == logging.WARNING
    assert parse_level("chatty") == logging.INFO


def test_category_levels_applied():
    settings = Settings(log_level_sql="ERROR", log_level_catalog="DEBUG")

    applied = setup_logging(settings)

    assert applied["sqlalchemy.engine"] == logging.ERROR
    assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
    assert logging.getLogger("penguin_explorer.infrastructure.record_store").level == logging.DEBUG
    assert logging.getLogger().handlers

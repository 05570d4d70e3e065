import os
from collections.abc import Generator
from typing import Any

import psycopg
import pytest

from smartdocs.config.settings import Settings
from smartdocs.database.connection import close_pool, ensure_schema, get_connection, init_pool


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "smartdocs_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        ensure_schema()
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def clean_tables(db_conn: psycopg.Connection[Any]) -> Generator[None, None, None]:
    """Empty the documents and folders tables before and after a test."""

    def _truncate() -> None:
        db_conn.execute("TRUNCATE documents, folders")
        db_conn.commit()

    _truncate()
    yield
    _truncate()

"""
Shared fixtures for integration tests.

Provides the full application running on the in-memory backend, and a
PostgreSQL connection pool that skips its tests when no database is reachable.
"""

from collections.abc import Generator

import psycopg
import pytest
from fastapi.testclient import TestClient
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import run_migrations
from src.api.main import app
from src.config.settings import get_settings


@pytest.fixture
def memory_client(monkeypatch: pytest.MonkeyPatch) -> Generator[TestClient, None, None]:
    """Full application with in-memory storage; runs the lifespan."""
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    monkeypatch.setenv("BCRYPT_COST", "4")
    monkeypatch.setenv("SEED_SAMPLE_PRODUCTS", "false")
    get_settings.cache_clear()
    with TestClient(app) as client:
        yield client
    get_settings.cache_clear()


@pytest.fixture
def seeded_client(monkeypatch: pytest.MonkeyPatch) -> Generator[TestClient, None, None]:
    """Full application with in-memory storage and the sample catalog."""
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    monkeypatch.setenv("BCRYPT_COST", "4")
    monkeypatch.setenv("SEED_SAMPLE_PRODUCTS", "true")
    get_settings.cache_clear()
    with TestClient(app) as client:
        yield client
    get_settings.cache_clear()


@pytest.fixture(scope="module")
def pool() -> Generator[ConnectionPool, None, None]:
    """Create connection pool for PostgreSQL integration tests."""
    settings = get_settings()
    try:
        with psycopg.connect(settings.database_url, connect_timeout=2):
            pass
    except psycopg.OperationalError as e:
        pytest.skip(f"PostgreSQL not available: {e}")

    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=1,
        max_size=10,
        open=True,
    )
    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture
def clean_database(pool: ConnectionPool) -> Generator[None, None, None]:
    """Empty the users and products tables before each test."""
    with pool.connection() as conn:
        conn.execute("TRUNCATE users, products RESTART IDENTITY")
        conn.commit()
    yield

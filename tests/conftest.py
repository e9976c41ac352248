"""Pytest configuration.

This configuration ensures:
1. Test settings are in the environment before any src module is imported
2. Integration tests get a fresh in-memory database per test
3. API tests get a fresh app database and a capturing email service
4. Cached singletons never leak between tests
"""

import asyncio
import os

# Settings are read once at import time, so the test environment must be
# in place before the first `src` import below.
os.environ["ENVIRONMENT"] = "testing"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key-that-is-at-least-32-characters"
os.environ["AUTO_CREATE_TABLES"] = "true"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from src.core.container import (  # noqa: E402
    get_database,
    get_email_service,
    get_event_bus,
    get_logger,
)
from src.infrastructure.email import StubEmailService  # noqa: E402
from src.infrastructure.persistence.database import Database  # noqa: E402


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if asyncio.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)


# =============================================================================
# Database fixtures
# =============================================================================


@pytest_asyncio.fixture
async def test_database():
    """Provide a fresh in-memory database with all tables created.

    Each test gets its own engine, so no data persists between tests.
    """
    database = Database(database_url="sqlite+aiosqlite:///:memory:")
    await database.create_all()

    yield database

    await database.close()


# =============================================================================
# API fixtures
# =============================================================================


@pytest.fixture
def email_service() -> StubEmailService:
    """Capturing email service; sent codes are readable from `.sent`."""
    return StubEmailService(logger=get_logger(), expires_in_seconds=300)


@pytest.fixture
def client(email_service):
    """TestClient over the real app with a fresh database.

    Entering the client runs the lifespan, which creates the tables on the
    in-memory database; leaving it disposes the engine and drops the data.
    """
    from src.main import app

    app.dependency_overrides[get_email_service] = lambda: email_service

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    get_database.cache_clear()
    get_event_bus.cache_clear()

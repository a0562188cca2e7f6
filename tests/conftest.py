# ==============================================================================
# CONFTEST - Pytest Fixtures and Configuration
# ==============================================================================
# Shared fixtures for all tests
# ==============================================================================

from __future__ import annotations

import os
from typing import AsyncGenerator
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set test environment before importing app
TEST_DB_PATH = "./test_access_admin.db"

os.environ["ENVIRONMENT"] = "development"
os.environ["DEBUG"] = "false"
os.environ["DATABASE_PROVIDER"] = "sqlite"
os.environ["SQLITE_URL"] = f"sqlite+aiosqlite:///{TEST_DB_PATH}"
os.environ["LOG_LEVEL"] = "WARNING"


def _remove_test_db() -> None:
    if os.path.exists(TEST_DB_PATH):
        try:
            os.remove(TEST_DB_PATH)
        except (PermissionError, OSError):
            pass


# ==============================================================================
# DATABASE FIXTURES
# ==============================================================================

@pytest_asyncio.fixture
async def adapter():
    """Connected SQLite adapter on a fresh database file."""
    from access_admin.database.factory import DatabaseFactory
    from access_admin.database.form_provider import form_provider_selector

    DatabaseFactory.reset()
    form_provider_selector.reset()
    _remove_test_db()

    db_adapter = await DatabaseFactory.initialize()

    yield db_adapter

    await DatabaseFactory.shutdown()
    DatabaseFactory.reset()
    form_provider_selector.reset()
    _remove_test_db()


# ==============================================================================
# HTTP CLIENT FIXTURES
# ==============================================================================

@pytest_asyncio.fixture
async def client(adapter) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API testing."""
    # Import app after environment is set
    from access_admin.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        timeout=30.0,
    ) as async_client:
        yield async_client


# ==============================================================================
# HELPER FIXTURES
# ==============================================================================

@pytest.fixture
def sample_rol_data() -> dict:
    """Generate sample role data with PascalCase keys."""
    return {
        "Role": f"Admin {uuid4().hex[:6]}",
        "Description": "Full access",
    }


@pytest.fixture
def sample_user_data() -> dict:
    """Generate sample user account data."""
    return {
        "userName": f"user_{uuid4().hex[:8]}",
        "password": "SecurePass123!",
        "email": f"user_{uuid4().hex[:8]}@example.com",
    }


@pytest.fixture
def sample_form_data() -> dict:
    """Generate sample form data."""
    return {
        "name": f"Form {uuid4().hex[:6]}",
        "description": "User administration screen",
    }


@pytest_asyncio.fixture
async def create_entity(client: AsyncClient):
    """
    Factory posting an entity and returning the created body.

    Example:
        >>> rol = await create_entity("Rol", {"role": "Admin"})
    """

    async def _create(entity: str, payload: dict) -> dict:
        response = await client.post(f"/api/{entity}", json=payload)
        assert response.status_code == 201, f"Failed to create {entity}: {response.text}"
        return response.json()

    return _create

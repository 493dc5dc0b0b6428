"""
Shared fixtures for API tests.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from usermanagement.core.database import get_db
from usermanagement.main import app
from usermanagement.modules.roles.models import Role


@pytest.fixture
def mock_db():
    """Create a mock database session."""
    db = AsyncMock()
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    db.flush = AsyncMock()
    db.refresh = AsyncMock()
    db.execute = AsyncMock()
    db.add = MagicMock()
    return db


@pytest.fixture
def client(mock_db):
    """
    Test client with the database dependency replaced by mock_db.

    The lifespan is not run, so no real database connection is made.
    """

    async def override_get_db():
        yield mock_db

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def default_role():
    """The USER role offered by default on the sign-up form."""
    return Role(id="00000000-0000-0000-0000-000000000003", name="USER", description="ROLE USER")


@pytest.fixture
def admin_role():
    """The ADMIN role."""
    return Role(id="00000000-0000-0000-0000-000000000001", name="ADMIN", description="ROLE ADMIN")

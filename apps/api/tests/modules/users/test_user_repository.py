"""
Unit tests for the user repository.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from usermanagement.modules.users.models import User
from usermanagement.modules.users.repository import UserRepository


def _result_with(value):
    result = MagicMock()
    result.scalar_one_or_none.return_value = value
    return result


class TestCreate:
    """Tests for UserRepository.create."""

    @pytest.mark.asyncio
    async def test_create_adds_flushes_and_refreshes(self, mock_db, default_role):
        user = await UserRepository.create(
            mock_db,
            first_name="John",
            last_name="Doe",
            email="john.doe@test.com",
            username="johndoe",
            password_hash="hashed",
            roles=[default_role],
        )

        assert isinstance(user, User)
        assert user.username == "johndoe"
        assert user.password_hash == "hashed"
        assert user.roles == [default_role]
        assert user.role_names == ["USER"]
        assert user.full_name == "John Doe"

        mock_db.add.assert_called_once_with(user)
        mock_db.flush.assert_awaited_once()
        mock_db.refresh.assert_awaited_once_with(user)
        # The caller owns the transaction
        mock_db.commit.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_without_roles(self, mock_db):
        user = await UserRepository.create(
            mock_db,
            first_name="Jane",
            last_name="Doe",
            email="jane@test.com",
            username="janedoe",
            password_hash="hashed",
        )

        assert user.roles == []
        assert user.is_active is True


class TestLookups:
    """Tests for the lookup helpers."""

    @pytest.mark.asyncio
    async def test_get_by_username_found(self, mock_db, created_user):
        mock_db.execute = AsyncMock(return_value=_result_with(created_user))

        result = await UserRepository.get_by_username(mock_db, "johndoe")

        assert result is created_user
        mock_db.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_get_by_email_not_found(self, mock_db):
        mock_db.execute = AsyncMock(return_value=_result_with(None))

        result = await UserRepository.get_by_email(mock_db, "nobody@test.com")

        assert result is None

    @pytest.mark.asyncio
    async def test_username_exists(self, mock_db, created_user):
        mock_db.execute = AsyncMock(return_value=_result_with(created_user))
        assert await UserRepository.username_exists(mock_db, "johndoe") is True

        mock_db.execute = AsyncMock(return_value=_result_with(None))
        assert await UserRepository.username_exists(mock_db, "someoneelse") is False

    @pytest.mark.asyncio
    async def test_email_exists(self, mock_db, created_user):
        mock_db.execute = AsyncMock(return_value=_result_with(created_user))
        assert await UserRepository.email_exists(mock_db, "JOHN.DOE@test.com") is True

        mock_db.execute = AsyncMock(return_value=_result_with(None))
        assert await UserRepository.email_exists(mock_db, "free@test.com") is False

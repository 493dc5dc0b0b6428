"""
Unit tests for the role repository.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from usermanagement.modules.roles import DEFAULT_ROLES, USER_ROLE
from usermanagement.modules.roles.repository import RoleRepository


class TestFindAll:
    """Tests for RoleRepository.find_all."""

    @pytest.mark.asyncio
    async def test_returns_every_role(self, mock_db, admin_role, default_role):
        result = MagicMock()
        result.scalars.return_value.all.return_value = [admin_role, default_role]
        mock_db.execute = AsyncMock(return_value=result)

        roles = await RoleRepository.find_all(mock_db)

        assert roles == [admin_role, default_role]
        mock_db.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_returns_empty_list_when_no_roles(self, mock_db):
        result = MagicMock()
        result.scalars.return_value.all.return_value = []
        mock_db.execute = AsyncMock(return_value=result)

        roles = await RoleRepository.find_all(mock_db)

        assert roles == []


class TestFindByName:
    """Tests for RoleRepository.find_by_name."""

    @pytest.mark.asyncio
    async def test_found(self, mock_db, default_role):
        result = MagicMock()
        result.scalar_one_or_none.return_value = default_role
        mock_db.execute = AsyncMock(return_value=result)

        role = await RoleRepository.find_by_name(mock_db, "USER")

        assert role is default_role

    @pytest.mark.asyncio
    async def test_not_found(self, mock_db):
        result = MagicMock()
        result.scalar_one_or_none.return_value = None
        mock_db.execute = AsyncMock(return_value=result)

        assert await RoleRepository.find_by_name(mock_db, "GHOST") is None


class TestDefaultRoles:
    """Tests for the seeded role list."""

    def test_user_role_is_seeded(self):
        names = [name for name, _ in DEFAULT_ROLES]
        assert USER_ROLE in names

    def test_role_names_are_unique(self):
        names = [name for name, _ in DEFAULT_ROLES]
        assert len(names) == len(set(names))

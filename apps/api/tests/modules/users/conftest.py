"""
Fixtures for users module tests.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from usermanagement.modules.users.models import User
from usermanagement.modules.users.schemas import UserForm


@pytest.fixture
def valid_form_data():
    """Form-encoded fields of a valid sign-up."""
    return {
        "first_name": "John",
        "last_name": "Doe",
        "email": "john.doe@test.com",
        "username": "johndoe",
        "password": "password",
        "confirm_password": "password",
    }


@pytest.fixture
def boundary_form_data():
    """Valid sign-up with names at the length limits."""
    return {
        "first_name": "Jo",  # min length 2
        "last_name": "Loooooooooooooo",  # 15 chars
        "email": "a@b.com",
        "username": "user123",
        "password": "pwd",
        "confirm_password": "pwd",
    }


@pytest.fixture
def valid_user_form(valid_form_data):
    """Validated sign-up form."""
    return UserForm.model_validate(valid_form_data)


@pytest.fixture
def created_user(default_role):
    """User returned by a successful sign-up."""
    user = MagicMock(spec=User)
    user.id = "00000000-0000-0000-0000-0000000000a1"
    user.first_name = "John"
    user.last_name = "Doe"
    user.email = "john.doe@test.com"
    user.username = "johndoe"
    user.password_hash = "$2b$12$hashed"
    user.roles = [default_role]
    user.role_names = ["USER"]
    return user


@pytest.fixture
def mock_role_repository(default_role):
    """Patch the role lookup used by the sign-up router."""
    with patch("usermanagement.modules.users.router.RoleRepository") as mock_repo:
        mock_repo.find_all = AsyncMock(return_value=[])
        mock_repo.find_by_name = AsyncMock(return_value=default_role)
        yield mock_repo


@pytest.fixture
def mock_service(created_user):
    """Patch the user service used by the sign-up router."""
    with patch("usermanagement.modules.users.router.service") as mock_svc:
        mock_svc.create_user = AsyncMock(return_value=created_user)
        yield mock_svc

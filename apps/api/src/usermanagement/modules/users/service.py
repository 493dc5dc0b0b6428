"""
User Service Layer

Business logic for creating users from the sign-up form.

Checks, in order:
1. Username is not taken
2. Email is not registered
3. Password is set and matches confirm password
4. Requested role exists

Any failed check raises FieldValidationError naming the offending form
field. On success the password is hashed, the user is stored with the
requested role and the transaction is committed.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from usermanagement.core.security import hash_password
from usermanagement.modules.roles.repository import RoleRepository
from usermanagement.modules.users.models import User
from usermanagement.modules.users.repository import UserRepository
from usermanagement.modules.users.schemas import UserForm

logger = logging.getLogger(__name__)


class UserServiceError(Exception):
    """Base exception for user service errors."""

    def __init__(self, message: str, error_code: str, status_code: int = 400):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        super().__init__(message)


class FieldValidationError(UserServiceError):
    """Raised when a value is rejected by a business rule tied to a form field."""

    def __init__(self, message: str, field_name: str):
        self.field_name = field_name
        super().__init__(
            message=message,
            error_code="FIELD_VALIDATION_ERROR",
            status_code=422,
        )


async def _check_username_available(db: AsyncSession, username: str) -> None:
    """
    Ensure no user already has this username.

    Raises:
        FieldValidationError: If the username is taken
    """
    if await UserRepository.username_exists(db, username):
        logger.warning(f"Sign-up rejected, username taken: {username}")
        raise FieldValidationError("Username not available", "username")


async def _check_email_available(db: AsyncSession, email: str) -> None:
    """
    Ensure no user already has this email.

    Raises:
        FieldValidationError: If the email is registered
    """
    if await UserRepository.email_exists(db, email):
        logger.warning(f"Sign-up rejected, email registered: {email}")
        raise FieldValidationError("Email not available", "email")


def _check_passwords_match(user_form: UserForm) -> None:
    """Ensure a password is set and confirm password matches it."""
    if not user_form.password:
        raise FieldValidationError("Password is required", "password")
    if user_form.password != user_form.confirm_password:
        raise FieldValidationError(
            "Password and confirm password do not match", "confirm_password"
        )


async def create_user(db: AsyncSession, user_form: UserForm) -> User:
    """
    Create a user from a validated sign-up form.

    Args:
        db: Database session
        user_form: The submitted form

    Returns:
        The created User

    Raises:
        FieldValidationError: If a business rule rejects a field
    """
    await _check_username_available(db, user_form.username)
    await _check_email_available(db, user_form.email)
    _check_passwords_match(user_form)

    role = await RoleRepository.find_by_name(db, user_form.role)
    if role is None:
        logger.warning(f"Sign-up rejected, unknown role: {user_form.role}")
        raise FieldValidationError("Role not available", "role")

    user = await UserRepository.create(
        db,
        first_name=user_form.first_name,
        last_name=user_form.last_name,
        email=user_form.email,
        username=user_form.username,
        password_hash=hash_password(user_form.password),
        roles=[role],
    )
    await db.commit()

    logger.info(f"User signed up: id={user.id}, username={user.username}")
    return user

"""
User Repository

Database operations for user management.
"""

import logging
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from usermanagement.modules.roles.models import Role
from usermanagement.modules.users.models import User

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for user database operations."""

    @staticmethod
    async def create(
        db: AsyncSession,
        *,
        first_name: str,
        last_name: str,
        email: str,
        username: str,
        password_hash: str,
        roles: list[Role] | None = None,
        is_active: bool = True,
    ) -> User:
        """
        Create a new user record.

        The caller owns the transaction; this only flushes.

        Args:
            db: Database session
            first_name: User's first name
            last_name: User's last name
            email: User's email address (unique)
            username: User's login name (unique)
            password_hash: Hashed password
            roles: Roles assigned to the user
            is_active: Whether user is active

        Returns:
            Created User instance
        """
        user = User(
            first_name=first_name,
            last_name=last_name,
            email=email,
            username=username,
            password_hash=password_hash,
            roles=list(roles or []),
            is_active=is_active,
        )

        db.add(user)
        await db.flush()
        await db.refresh(user)

        logger.info(f"Created user: {user.id} - {user.username} ({', '.join(user.role_names)})")
        return user

    @staticmethod
    async def get_by_username(db: AsyncSession, username: str) -> User | None:
        """
        Get a user by username.

        Args:
            db: Database session
            username: Login name

        Returns:
            User instance or None if not found
        """
        result = await db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    @staticmethod
    async def get_by_email(db: AsyncSession, email: str) -> User | None:
        """
        Get a user by email address, ignoring case.

        Args:
            db: Database session
            email: Email address

        Returns:
            User instance or None if not found
        """
        result = await db.execute(select(User).where(func.lower(User.email) == email.lower()))
        return result.scalar_one_or_none()

    @staticmethod
    async def username_exists(db: AsyncSession, username: str) -> bool:
        """Check if a username is already taken."""
        user = await UserRepository.get_by_username(db, username)
        return user is not None

    @staticmethod
    async def email_exists(db: AsyncSession, email: str) -> bool:
        """
        Check if an email address is already registered.

        Args:
            db: Database session
            email: Email address to check

        Returns:
            True if email exists, False otherwise
        """
        user = await UserRepository.get_by_email(db, email)
        return user is not None

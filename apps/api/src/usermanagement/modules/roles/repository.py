"""
Role Repository

Read access to the seeded roles.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from usermanagement.modules.roles.models import Role


class RoleRepository:
    """Repository for role lookups."""

    @staticmethod
    async def find_all(db: AsyncSession) -> list[Role]:
        """
        Get every role, ordered by name.

        Args:
            db: Database session

        Returns:
            List of Role instances (possibly empty)
        """
        result = await db.execute(select(Role).order_by(Role.name))
        return list(result.scalars().all())

    @staticmethod
    async def find_by_name(db: AsyncSession, name: str) -> Role | None:
        """
        Get a role by its exact name.

        Args:
            db: Database session
            name: Role name, e.g. "USER"

        Returns:
            Role instance or None if not found
        """
        result = await db.execute(select(Role).where(Role.name == name))
        return result.scalar_one_or_none()

"""
Seed Default Roles

Creates the roles offered on the sign-up form (USER, ADMIN) if they
don't exist yet. The initial migration seeds them too; run this against
a database created without migrations.

Usage:
    cd apps/api
    python scripts/seed_roles.py
"""

import asyncio
import sys
from pathlib import Path

# Add the src directory to the path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from usermanagement.core.config import settings
from usermanagement.modules.roles.models import DEFAULT_ROLES, Role
from usermanagement.modules.roles.repository import RoleRepository


async def seed_roles() -> None:
    """Create each default role that is missing."""

    engine = create_async_engine(settings.database_url, echo=False)
    async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with async_session() as db:
        for name, description in DEFAULT_ROLES:
            existing_role = await RoleRepository.find_by_name(db, name)

            if existing_role:
                print(f"Role already exists: {name}")
                print(f"  ID: {existing_role.id}")
                continue

            role = Role(name=name, description=description)
            db.add(role)
            await db.flush()
            await db.refresh(role)

            print(f"Role created: {name}")
            print(f"  Description: {description}")
            print(f"  ID: {role.id}")

        await db.commit()

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed_roles())

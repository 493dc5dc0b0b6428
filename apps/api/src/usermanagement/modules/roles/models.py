"""
Role Models

Authorization groupings assigned to users at sign-up.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from usermanagement.modules.shared import BaseModel

# Seeded role names
USER_ROLE = "USER"
ADMIN_ROLE = "ADMIN"

DEFAULT_ROLES = [
    (USER_ROLE, "ROLE USER"),
    (ADMIN_ROLE, "ROLE ADMIN"),
]


class Role(BaseModel):
    """
    Role model.

    Roles are seeded ahead of time (migration or seed script) and are
    read-only from the sign-up flow.
    """

    __tablename__ = "roles"

    name: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        index=True,
        nullable=False,
    )
    description: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Role(id={self.id}, name={self.name})>"

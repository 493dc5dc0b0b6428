"""
User Models

Database models for registered users and their role assignments.
"""

from sqlalchemy import Boolean, Column, ForeignKey, String, Table, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from usermanagement.core.database import Base
from usermanagement.modules.roles.models import Role
from usermanagement.modules.shared import BaseModel

# Many-to-many link between users and roles
# ON DELETE CASCADE: removing a user or role removes its assignments
user_roles = Table(
    "user_roles",
    Base.metadata,
    Column(
        "user_id",
        UUID(as_uuid=False),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "role_id",
        UUID(as_uuid=False),
        ForeignKey("roles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class User(BaseModel):
    """
    User model created by the sign-up flow.

    Username and email are unique. Only the password hash is stored.
    """

    __tablename__ = "users"

    # Profile fields
    first_name: Mapped[str] = mapped_column(
        String(15),
        nullable=False,
    )
    last_name: Mapped[str] = mapped_column(
        String(15),
        nullable=False,
    )

    # Identity fields
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
    )
    username: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        index=True,
        nullable=False,
    )
    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # Account status
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        nullable=False,
    )

    # Relationships
    roles: Mapped[list[Role]] = relationship(
        Role,
        secondary=user_roles,
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username}, email={self.email})>"

    @property
    def full_name(self) -> str:
        """Return user's full name."""
        return f"{self.first_name} {self.last_name}"

    @property
    def role_names(self) -> list[str]:
        """Return the names of the user's roles."""
        return [role.name for role in self.roles]

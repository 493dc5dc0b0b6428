"""
Roles module - Assignable roles and their lookup.
"""

from usermanagement.modules.roles.models import ADMIN_ROLE, DEFAULT_ROLES, USER_ROLE, Role
from usermanagement.modules.roles.repository import RoleRepository

__all__ = ["Role", "RoleRepository", "USER_ROLE", "ADMIN_ROLE", "DEFAULT_ROLES"]

"""
Users module - Sign-up flow and user management.

Endpoints (see router.py):
- GET /signup - Render the sign-up form
- POST /signup - Validate the form and create the user
"""

from usermanagement.modules.users.models import User
from usermanagement.modules.users.repository import UserRepository

__all__ = ["User", "UserRepository"]

"""
Core module - Configuration, database, security, templates and logging.
"""

from usermanagement.core.config import get_settings, settings
from usermanagement.core.database import Base, close_db, get_db, init_db
from usermanagement.core.logging import configure_logging
from usermanagement.core.security import hash_password, verify_password
from usermanagement.core.templates import INDEX_VIEW, SIGNUP_VIEW, render, templates

__all__ = [
    # Config
    "settings",
    "get_settings",
    # Database
    "Base",
    "get_db",
    "init_db",
    "close_db",
    # Logging
    "configure_logging",
    # Security
    "hash_password",
    "verify_password",
    # Templates
    "templates",
    "render",
    "INDEX_VIEW",
    "SIGNUP_VIEW",
]

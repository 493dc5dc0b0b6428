"""
Security Utilities

Password hashing with bcrypt. Plain passwords are never stored or logged.
"""

import bcrypt

from usermanagement.core.config import settings

# bcrypt ignores input beyond 72 bytes
BCRYPT_MAX_BYTES = 72


def _to_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """
    Hash a plain text password.

    Args:
        password: The plain text password

    Returns:
        The bcrypt hash, including salt and cost factor
    """
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(_to_bytes(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Check a plain text password against a stored hash.

    Args:
        password: The plain text password to check
        password_hash: The stored bcrypt hash

    Returns:
        True if the password matches, False otherwise
    """
    try:
        return bcrypt.checkpw(_to_bytes(password), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed hash
        return False

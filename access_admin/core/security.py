# ==============================================================================
# SECURITY MODULE - Password Hashing
# ==============================================================================
# Stored user passwords are hashed with passlib; plaintext never persists
# ==============================================================================

from __future__ import annotations

from passlib.context import CryptContext

from access_admin.core.settings import settings


pwd_context = CryptContext(
    schemes=[settings.PASSWORD_HASH_SCHEME],
    deprecated="auto",
)


def hash_password(password: str) -> str:
    """
    Hash a plaintext password.

    Args:
        password: Plaintext password to hash

    Returns:
        Hashed password string safe for storage

    Example:
        >>> hashed = hash_password("my_secure_password")
        >>> verify_password("my_secure_password", hashed)
        True
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plaintext password against its stored hash."""
    return pwd_context.verify(plain_password, hashed_password)

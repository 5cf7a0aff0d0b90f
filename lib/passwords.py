# =============================================================================
# lib/passwords.py - Password Hashing
# =============================================================================
# bcrypt helpers for storing and verifying user passwords.
# Plain-text passwords only ever exist in request bodies; the database
# stores the hash produced here.
# =============================================================================

import bcrypt

from app.config import settings


def hash_password(password: str, rounds: int | None = None) -> str:
    """
    Hash a password with a fresh salt.

    Args:
        password: Plain-text password
        rounds: bcrypt cost factor (defaults to settings.BCRYPT_ROUNDS)

    Returns:
        The bcrypt hash as a str, suitable for a text column
    """
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str | None) -> bool:
    """Check a plain-text password against a stored hash."""
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value isn't a bcrypt hash
        return False

"""
Password hashing with bcrypt.

Passwords are hashed on the client before they ever leave the process.
"""

from typing import Optional

import bcrypt

from shoplist.shared.config import get_settings

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """Hash a plaintext password, returning the bcrypt string."""
    if rounds is None:
        rounds = get_settings().password_hash_rounds
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(_password_bytes(password), hashed_password.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False

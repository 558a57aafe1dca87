"""Password hashing with bcrypt."""

import bcrypt

from .config import settings

# bcrypt only considers the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int | None = None) -> str:
    """
    Hash a plaintext password with a fresh salt.

    Args:
        password: Plaintext password
        rounds: bcrypt cost factor, defaults to ``settings.bcrypt_rounds``

    Returns:
        str: Encoded bcrypt hash including salt and cost
    """
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Check a plaintext password against a stored hash in constant time."""
    try:
        return bcrypt.checkpw(_encode(password), hashed.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False

"""Password hashing and verification for stored user credentials."""

import bcrypt

from league.core.config import settings

# bcrypt only looks at the first 72 bytes of its input.
BCRYPT_MAX_BYTES = 72

USER_ROLES = ("user", "admin", "coach")
DEFAULT_ROLE = "user"


def _password_bytes(plain_password: str) -> bytes:
    return plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(plain_password: str, rounds: int | None = None) -> str:
    """
    Hash a plain-text password for storage. Do not store plain passwords.

    The result is a self-describing bcrypt string ($2b$<cost>$<salt><digest>) with
    a fresh random salt per call, so hashing the same password twice differs.
    Raises ValueError for an empty password; callers validate presence first.
    """
    if not plain_password:
        raise ValueError("Password must be non-empty")
    cost = rounds if rounds is not None else settings.BCRYPT_ROUNDS
    return bcrypt.hashpw(_password_bytes(plain_password), bcrypt.gensalt(rounds=cost)).decode(
        "utf-8"
    )


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash. Malformed hashes verify as False."""
    if not plain_password or not hashed:
        return False
    try:
        return bcrypt.checkpw(_password_bytes(plain_password), hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False

"""
Password hashing and verification.

bcrypt salts every hash itself; the work factor comes from
``Settings.bcrypt_rounds``.
"""

import bcrypt

from coursemart.core.errors import HashingError

DEFAULT_ROUNDS = 10


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    try:
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=rounds)).decode()
    except (ValueError, TypeError) as exc:
        raise HashingError("FailedToHashPassword") from exc


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except (ValueError, TypeError) as exc:
        raise HashingError() from exc

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum

import jwt

from coursemart.core.config import Settings
from coursemart.core.errors import InvalidOrExpiredToken


class Role(str, Enum):
    ADMIN = "admin"
    USER = "user"


@dataclass(frozen=True)
class TokenClaims:
    username: str
    role: Role
    issued_at: datetime
    expires_at: datetime


def create_access_token(username: str, role: Role, settings: Settings, now: datetime | None = None) -> str:
    issued_at = now or datetime.now(timezone.utc)
    expire = issued_at + timedelta(seconds=settings.jwt_expires_seconds)
    payload = {"sub": username, "role": Role(role).value, "iat": issued_at, "exp": expire}
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings, now: datetime | None = None) -> TokenClaims:
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "role", "iat", "exp"], "verify_exp": False, "verify_iat": False},
        )
        claims = TokenClaims(
            username=payload["sub"],
            role=Role(payload["role"]),
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
    except (jwt.PyJWTError, ValueError, TypeError) as exc:
        raise InvalidOrExpiredToken() from exc

    # A token stops verifying at exactly exp, not one second later.
    current = now or datetime.now(timezone.utc)
    if current >= claims.expires_at:
        raise InvalidOrExpiredToken()
    return claims

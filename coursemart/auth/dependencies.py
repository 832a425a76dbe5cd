import logging

from fastapi import Depends, Header, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from coursemart.auth import tokens
from coursemart.auth.tokens import Role, TokenClaims
from coursemart.core.config import Settings, get_settings
from coursemart.core.errors import InvalidOrExpiredToken, MissingAuthHeader, MissingCredentials, RoleMismatch

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def require_role(role: Role):
    """Build a dependency that only admits requests bearing a valid ``role`` token."""

    def verify_token(
        request: Request,
        credentials: HTTPAuthorizationCredentials | None = Depends(security),
        settings: Settings = Depends(get_settings),
    ) -> TokenClaims:
        if not request.headers.get('authorization'):
            raise MissingAuthHeader()
        # Present but not a usable bearer credential, e.g. "Basic abc".
        if credentials is None:
            raise InvalidOrExpiredToken()

        claims = tokens.decode_access_token(credentials.credentials, settings)
        if claims.role != role:
            logger.warning("Rejected %s token for %r on %s route", claims.role.value, claims.username, role.value)
            raise RoleMismatch()

        request.state.claims = claims
        return claims

    return verify_token


require_admin = require_role(Role.ADMIN)
require_user = require_role(Role.USER)


def login_credentials(
    username: str | None = Header(None),
    password: str | None = Header(None),
) -> tuple[str, str]:
    if not username or password is None:
        raise MissingCredentials()
    return username, password

from types import SimpleNamespace

import pytest
from fastapi.security import HTTPAuthorizationCredentials

from coursemart.auth.dependencies import login_credentials, require_admin, require_user
from coursemart.auth.tokens import Role, create_access_token
from coursemart.core.errors import (
    InvalidOrExpiredToken,
    MissingAuthHeader,
    MissingCredentials,
    RoleMismatch,
)


def _request(authorization: str | None = None):
    headers = {'authorization': authorization} if authorization is not None else {}
    return SimpleNamespace(state=SimpleNamespace(), headers=headers)


def _bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme='Bearer', credentials=token)


def test_gate_rejects_missing_authorization_header(settings) -> None:
    with pytest.raises(MissingAuthHeader) as exception_info:
        require_admin(_request(), credentials=None, settings=settings)

    assert exception_info.value.status_code == 401


def test_gate_rejects_non_bearer_authorization_header(settings) -> None:
    with pytest.raises(InvalidOrExpiredToken) as exception_info:
        require_admin(_request('Basic abc'), credentials=None, settings=settings)

    assert exception_info.value.status_code == 403
    assert exception_info.value.message == 'Invalid/WrongToken'


def test_gate_rejects_invalid_token(settings) -> None:
    with pytest.raises(InvalidOrExpiredToken) as exception_info:
        require_user(_request('Bearer garbage'), credentials=_bearer('garbage'), settings=settings)

    assert exception_info.value.status_code == 403


def test_admin_token_fails_user_gate(settings) -> None:
    token = create_access_token('alice', Role.ADMIN, settings)

    with pytest.raises(RoleMismatch) as exception_info:
        require_user(_request(f'Bearer {token}'), credentials=_bearer(token), settings=settings)

    assert exception_info.value.status_code == 403


def test_user_token_fails_admin_gate(settings) -> None:
    token = create_access_token('bob', Role.USER, settings)

    with pytest.raises(RoleMismatch):
        require_admin(_request(f'Bearer {token}'), credentials=_bearer(token), settings=settings)


def test_gate_attaches_claims_to_request(settings) -> None:
    token = create_access_token('bob', Role.USER, settings)
    request = _request(f'Bearer {token}')

    claims = require_user(request, credentials=_bearer(token), settings=settings)

    assert claims.username == 'bob'
    assert claims.role is Role.USER
    assert request.state.claims == claims


def test_login_credentials_reads_headers() -> None:
    assert login_credentials(username='alice', password='pw123') == ('alice', 'pw123')


@pytest.mark.parametrize(('username', 'password'), [(None, 'pw123'), ('alice', None), ('', 'pw123')])
def test_login_credentials_requires_both_headers(username, password) -> None:
    with pytest.raises(MissingCredentials):
        login_credentials(username=username, password=password)

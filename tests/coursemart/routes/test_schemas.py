import pytest
from pydantic import ValidationError

from coursemart.routes.schemas import CourseRequest, SignupRequest


def test_signup_request_accepts_credentials() -> None:
    request = SignupRequest(username='alice', password='pw123')

    assert request.username == 'alice'
    assert request.password == 'pw123'


@pytest.mark.parametrize(
    ('payload', 'field'),
    [
        ({'username': '', 'password': 'pw123'}, 'username'),
        ({'username': 'alice', 'password': ''}, 'password'),
        ({'password': 'pw123'}, 'username'),
        ({'username': 'alice'}, 'password'),
    ],
)
def test_signup_request_rejects_empty_or_missing_fields(payload: dict, field: str) -> None:
    with pytest.raises(ValidationError) as exception_info:
        SignupRequest(**payload)

    assert [error['loc'] for error in exception_info.value.errors()] == [(field,)]


def test_course_request_keeps_only_supplied_fields() -> None:
    request = CourseRequest.model_validate({'title': 'Go Basics', 'imageLink': 'https://img/go.png'})

    assert request.to_fields() == {'title': 'Go Basics', 'image_link': 'https://img/go.png'}

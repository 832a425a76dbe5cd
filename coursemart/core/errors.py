class CourseMarketError(Exception):
    """Base class for failures surfaced to API callers as a status and message."""

    status_code = 500
    message = "InternalError"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class AlreadyExists(CourseMarketError):
    status_code = 403
    message = "Already exists"


class HashingError(CourseMarketError):
    status_code = 500
    message = "HashingError"


class UnknownUser(CourseMarketError):
    status_code = 403
    message = "WrongUsername"


class WrongPassword(CourseMarketError):
    status_code = 403
    message = "WrongPassword"


class MissingCredentials(CourseMarketError):
    status_code = 401
    message = "CredentialsNotFound"


class MissingAuthHeader(CourseMarketError):
    status_code = 401
    message = "AuthHeaderNotFound"


class InvalidOrExpiredToken(CourseMarketError):
    status_code = 403
    message = "Invalid/WrongToken"


class RoleMismatch(CourseMarketError):
    status_code = 403
    message = "AccessForbidden"


class CourseNotFound(CourseMarketError):
    status_code = 404
    message = "Course not found"


class UserNotFound(CourseMarketError):
    status_code = 404
    message = "User not found"

"""
Error taxonomy for the API.

Every failure a client can see is one of these. The app renders them as
`{"message": ...}` with the matching status code.
"""

from __future__ import annotations


class ApiError(Exception):
    """Base class for errors that map directly to an HTTP response."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_response(self) -> dict[str, str]:
        return {"message": self.message}


class ValidationError(ApiError):
    """Client input incomplete or malformed."""

    status_code = 400
    default_message = "Invalid request"


class Unauthenticated(ApiError):
    """Missing, invalid or expired credential, or unknown subject."""

    status_code = 401
    default_message = "Not authorized"


class Forbidden(ApiError):
    """Authenticated, but not allowed to touch this resource."""

    status_code = 403
    default_message = "Forbidden"


class NotFound(ApiError):
    status_code = 404
    default_message = "Not found"


class InternalError(ApiError):
    """Unexpected fault. The underlying message is passed through."""

    status_code = 500

"""Domain errors raised by the service layer.

Services never raise ``HTTPException`` directly; every business-rule failure is
one of the classes below and is translated into a JSON response by the handlers
registered in :mod:`stackit.main`.
"""

from __future__ import annotations

from fastapi import status


class StackItError(Exception):
    """Base class for all StackIt domain errors.

    Attributes:
        message: Human readable explanation surfaced to API clients.
        code: Stable machine readable error code.
    """

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_code: str = "error"

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code


class NotFoundError(StackItError):
    """A referenced question, answer or notification does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_code = "not_found"


class ForbiddenError(StackItError):
    """The principal is authenticated but not allowed to do this."""

    status_code = status.HTTP_403_FORBIDDEN
    default_code = "forbidden"


class ValidationError(StackItError):
    """Input passed the schema layer but violates a business rule."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_code = "validation_error"


class ConflictError(StackItError):
    """A uniqueness rule was violated."""

    status_code = status.HTTP_409_CONFLICT
    default_code = "conflict"


class UnauthorizedError(StackItError):
    """Credentials were missing or wrong."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_code = "unauthorized"


class UnavailableError(StackItError):
    """The backing store could not be reached."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_code = "unavailable"

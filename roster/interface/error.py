"""Interface layer errors."""

from fastapi import HTTPException, status

from roster.domain.error import (
    BusinessRuleViolationError,
    DomainError,
    ExistenceLookupError,
    InvalidVerificationCodeError,
    NotFoundError,
    NotificationError,
    ValidationError,
    VerificationCodeError,
)


class InterfaceError(Exception):
    """Base interface error."""

    pass


class AuthenticationError(InterfaceError):
    """Caller could not be identified from the request."""

    pass


class PermissionDeniedError(InterfaceError):
    """Caller is identified but not allowed to use the route."""

    pass


# Checked in order, first match wins
_STATUS_BY_ERROR: list[tuple[type[Exception], int]] = [
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (PermissionDeniedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ExistenceLookupError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (InvalidVerificationCodeError, status.HTTP_401_UNAUTHORIZED),
    (VerificationCodeError, status.HTTP_502_BAD_GATEWAY),
    (NotificationError, status.HTTP_502_BAD_GATEWAY),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (BusinessRuleViolationError, status.HTTP_400_BAD_REQUEST),
]


def status_for(error: Exception) -> int:
    """HTTP status code for an error raised by a route or use case.

    Args:
        error: Interface or domain error

    Returns:
        Status code, 500 for anything not mapped
    """
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def to_http_exception(error: InterfaceError | DomainError) -> HTTPException:
    """Convert an interface or domain error to an HTTPException."""
    return HTTPException(status_code=status_for(error), detail=str(error))

"""Caller identification from the auth cookie."""

from roster.domain.service import JWTService
from roster.domain.value import UserType
from roster.interface.error import AuthenticationError, PermissionDeniedError
from roster.util.jwt import JWTError, TokenPayload

AUTH_COOKIE = "auth_token"


def authenticate(
    jwt_service: JWTService,
    auth_token: str | None,
    *allowed: UserType,
) -> TokenPayload:
    """Identify the caller and check its account kind.

    Args:
        jwt_service: JWT service
        auth_token: Value of the auth cookie, if any
        *allowed: Account kinds allowed to call the route (any if empty)

    Returns:
        Decoded token payload

    Raises:
        AuthenticationError: If the cookie is missing or invalid
        PermissionDeniedError: If the account kind is not allowed
    """
    if not auth_token:
        raise AuthenticationError("Not authenticated")

    try:
        payload = jwt_service.verify_token(auth_token)
    except JWTError as e:
        raise AuthenticationError(str(e)) from e

    if allowed and payload.user_type not in {t.value for t in allowed}:
        raise PermissionDeniedError(
            f"Not allowed for {payload.user_type} accounts"
        )

    return payload

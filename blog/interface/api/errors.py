"""Mapping of domain errors and authentication to HTTP responses."""

import logfire
from fastapi import HTTPException, status

from blog.domain.error import (
    DomainError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from blog.domain.service import JWTService
from blog.domain.value import UserId


def http_error(error: DomainError) -> HTTPException:
    """Translate a domain error into the matching HTTP exception.

    Args:
        error: Domain error raised by a use case

    Returns:
        HTTPException to raise from the route
    """
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, PermissionDeniedError):
        logfire.warn("Permission denied", error=str(error))
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(error))
    if isinstance(error, ValidationError):
        return HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(error)
        )
    # Business rule violations (e.g. an invalid parent comment)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


def require_user(jwt_service: JWTService, auth_token: str | None, action: str) -> UserId:
    """Resolve the authenticated user or fail with 401.

    Args:
        jwt_service: JWT service for token verification
        auth_token: JWT token from cookie
        action: What the user is trying to do, for the error message

    Returns:
        Authenticated user ID

    Raises:
        HTTPException: If the token is missing or invalid
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user_id

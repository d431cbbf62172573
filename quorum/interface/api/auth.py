"""Resolving the current user from the auth cookie."""

from uuid import UUID

from fastapi import HTTPException, status

from quorum.domain.service import JWTService


def optional_user_id(jwt_service: JWTService, auth_token: str | None) -> UUID | None:
    """Current user ID, or None for anonymous or invalid tokens."""
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        return None
    try:
        return UUID(user_id)
    except ValueError:
        return None


def require_user_id(
    jwt_service: JWTService, auth_token: str | None, action: str
) -> UUID:
    """Current user ID.

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    user_id = optional_user_id(jwt_service, auth_token)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user_id

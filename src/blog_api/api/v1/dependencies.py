"""Shared API dependencies for authentication and common functionality."""

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.orm import Session

from blog_api.core import security
from blog_api.db.session import get_db
from blog_api.models import User, UserRole
from blog_api.models.user import role_rank

# HTTP Bearer scheme for JWT authentication; missing headers are reported as 401 below.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def _credentials_error(detail: str = "Could not validate credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    db: SessionDep,
) -> User:
    """Get the current authenticated user from JWT token.

    Args:
        credentials: HTTP Bearer token credentials
        db: Database session

    Returns:
        User object for the authenticated user

    Raises:
        HTTPException: 401 if the token is missing, invalid or the user is
            unknown; 403 if the account is banned
    """
    if credentials is None or not credentials.credentials:
        raise _credentials_error("Not authenticated")

    try:
        payload = security.decode_token(credentials.credentials, security.ACCESS_TOKEN_TYPE)
        user_id = int(payload["sub"])
    except (JWTError, ValueError) as err:
        raise _credentials_error() from err

    user = db.get(User, user_id)
    if user is None:
        raise _credentials_error("User not found")
    if user.is_banned:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account is banned",
        )
    return user


# Type alias for current user dependency
CurrentUserDep = Annotated[User, Depends(get_current_user)]


def require_admin_level(level: UserRole) -> Callable[[User], User]:
    """Build a dependency admitting users whose role is at least ``level``."""
    required = role_rank(level)

    def _check(current_user: CurrentUserDep) -> User:
        if role_rank(current_user.role) < max(required, 1):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="You have no rights!",
            )
        return current_user

    return _check


AdminLevelOneDep = Annotated[User, Depends(require_admin_level(UserRole.ADMIN_LEVEL_ONE))]
AdminLevelTwoDep = Annotated[User, Depends(require_admin_level(UserRole.ADMIN_LEVEL_TWO))]

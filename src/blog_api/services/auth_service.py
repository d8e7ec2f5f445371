"""Authentication: credential checks and token issuance."""
from __future__ import annotations

import logging

from jose import JWTError
from sqlalchemy.orm import Session

from blog_api.core import security
from blog_api.models import User
from blog_api.schemas.auth import AuthResponse, RegisterRequest, TokenPair
from blog_api.schemas.user import UserResponse

from .errors import ForbiddenError, NotFoundError, UnauthorizedError
from .user_service import UserService

logger = logging.getLogger(__name__)


def issue_tokens(user: User) -> TokenPair:
    """Sign an access and a refresh token from the same payload."""
    claims = {"email": user.email}
    return TokenPair(
        access_token=security.create_access_token(user.id, claims),
        refresh_token=security.create_refresh_token(user.id, claims),
    )


class AuthService:
    """Login, registration and token refresh."""

    def __init__(self, db: Session, users: UserService | None = None) -> None:
        self.db = db
        self.users = users or UserService(db)

    @staticmethod
    def _respond(user: User) -> AuthResponse:
        return AuthResponse(
            tokens=issue_tokens(user),
            user=UserResponse.model_validate(user),
        )

    def login(self, email: str, password: str) -> AuthResponse:
        """Authenticate by email and password.

        Raises:
            UnauthorizedError: If the email is unknown or the password is wrong.
            ForbiddenError: If the account is banned.
        """
        user = self.users.find_by_email(email)
        if user is None:
            raise UnauthorizedError("User not found")
        if not security.verify_password(password, user.password_hash):
            raise UnauthorizedError("Invalid password")
        if user.is_banned:
            raise ForbiddenError("Account is banned")
        logger.info("User %d logged in", user.id)
        return self._respond(user)

    def register(self, data: RegisterRequest) -> AuthResponse:
        """Create an account and log it in.

        Raises:
            ConflictError: If the email is already registered.
        """
        user = self.users.create_user(
            data.email,
            data.password,
            first_name=data.first_name,
            last_name=data.last_name,
        )
        return self._respond(user)

    def refresh(self, refresh_token: str) -> TokenPair:
        """Exchange a valid refresh token for a fresh token pair.

        Raises:
            UnauthorizedError: If the token is invalid, expired, not a refresh
                token, or its subject no longer exists.
        """
        try:
            payload = security.decode_token(refresh_token, security.REFRESH_TOKEN_TYPE)
            user_id = int(payload["sub"])
        except (JWTError, ValueError) as err:
            raise UnauthorizedError("Invalid token") from err

        try:
            user = self.users.get_user(user_id)
        except NotFoundError:
            raise UnauthorizedError("Invalid token") from None
        if user.is_banned:
            raise ForbiddenError("Account is banned")
        return issue_tokens(user)

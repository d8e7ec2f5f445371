"""Password hashing and JWT helpers."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
from jose import JWTError, jwt

from blog_api.core.settings import settings

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


def hash_password(password: str) -> str:
    """Return a bcrypt hash of ``password`` suitable for storage."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check ``password`` against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash.
        return False


def create_token(
    subject: int | str,
    token_type: str,
    expires_delta: timedelta,
    extra_claims: dict[str, Any] | None = None,
) -> str:
    """Create a signed JWT for ``subject`` with a ``type`` claim."""
    to_encode: dict[str, Any] = {"sub": str(subject), "type": token_type}
    if extra_claims:
        to_encode.update(extra_claims)
    to_encode["exp"] = datetime.now(UTC) + expires_delta
    encoded_jwt: str = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt


def create_access_token(subject: int | str, extra_claims: dict[str, Any] | None = None) -> str:
    """Create a short-lived access token."""
    return create_token(
        subject,
        ACCESS_TOKEN_TYPE,
        timedelta(minutes=settings.access_token_expire_minutes),
        extra_claims,
    )


def create_refresh_token(subject: int | str, extra_claims: dict[str, Any] | None = None) -> str:
    """Create a long-lived refresh token."""
    return create_token(
        subject,
        REFRESH_TOKEN_TYPE,
        timedelta(minutes=settings.refresh_token_expire_minutes),
        extra_claims,
    )


def decode_token(token: str, expected_type: str) -> dict[str, Any]:
    """Verify signature, expiry and type of ``token`` and return its claims.

    Raises:
        JWTError: If the token is malformed, expired, badly signed or of the
            wrong type.
    """
    payload: dict[str, Any] = jwt.decode(
        token,
        settings.secret_key,
        algorithms=[settings.jwt_algorithm],
    )
    if payload.get("type") != expected_type:
        raise JWTError(f"Expected a {expected_type} token")
    if payload.get("sub") is None:
        raise JWTError("Token has no subject")
    return payload

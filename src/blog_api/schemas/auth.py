"""Authentication request and response schemas."""

from pydantic import BaseModel, EmailStr, Field

from .user import UserResponse


class LoginRequest(BaseModel):
    """Credentials submitted to log in."""

    email: EmailStr
    password: str = Field(..., min_length=6, description="Plain-text password")


class RegisterRequest(LoginRequest):
    """New account details; profile fields fall back to model defaults."""

    first_name: str | None = Field(None, min_length=1, max_length=100)
    last_name: str | None = Field(None, min_length=1, max_length=100)


class RefreshRequest(BaseModel):
    """Refresh token exchanged for a new token pair."""

    refresh_token: str = Field(..., min_length=1)


class TokenPair(BaseModel):
    """Access and refresh tokens issued together."""

    access_token: str = Field(..., description="JWT access token")
    refresh_token: str = Field(..., description="JWT refresh token")
    token_type: str = Field("bearer", description="Token type (always 'bearer')")


class AuthResponse(BaseModel):
    """Tokens plus the authenticated user's profile."""

    tokens: TokenPair
    user: UserResponse

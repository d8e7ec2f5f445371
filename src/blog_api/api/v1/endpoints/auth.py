# src/blog_api/api/v1/endpoints/auth.py
"""Authentication endpoints for the Blog API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status

from blog_api.api.v1.dependencies import SessionDep
from blog_api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RefreshRequest,
    RegisterRequest,
    TokenPair,
)
from blog_api.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["authentication"])


def get_auth_service(db: SessionDep) -> AuthService:
    return AuthService(db)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


@router.post(
    "/register",
    summary="Register a new account",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthResponse,
)
async def register_user(payload: RegisterRequest, auth: AuthServiceDep) -> AuthResponse:
    """Create an account and return its first token pair."""
    return auth.register(payload)


@router.post(
    "/login",
    summary="Authenticate with email and password",
    status_code=status.HTTP_200_OK,
    response_model=AuthResponse,
)
async def login_user(payload: LoginRequest, auth: AuthServiceDep) -> AuthResponse:
    """Authenticate and return a token pair together with the profile."""
    return auth.login(payload.email, payload.password)


@router.post(
    "/refresh-token",
    summary="Exchange a refresh token for new tokens",
    status_code=status.HTTP_200_OK,
    response_model=TokenPair,
)
async def refresh_tokens(payload: RefreshRequest, auth: AuthServiceDep) -> TokenPair:
    """Re-issue both tokens from a valid refresh token."""
    return auth.refresh(payload.refresh_token)

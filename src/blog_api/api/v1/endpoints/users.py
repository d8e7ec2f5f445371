"""User profile, subscription and administration endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from blog_api.api.v1.dependencies import (
    AdminLevelOneDep,
    AdminLevelTwoDep,
    CurrentUserDep,
    SessionDep,
)
from blog_api.models import User
from blog_api.schemas.user import (
    SubscriptionResponse,
    UserProfileResponse,
    UserResponse,
    UserUpdate,
)
from blog_api.services.user_service import UserService

router = APIRouter(prefix="/user", tags=["users"])


def get_user_service(db: SessionDep) -> UserService:
    return UserService(db)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]


@router.get("/", response_model=list[UserResponse])
async def list_users(
    users: UserServiceDep,
    search: str | None = Query(None, description="Match against first or last name"),
    limit: int | None = Query(None, ge=1, le=100),
) -> list[User]:
    """List users, optionally filtered by name."""
    return list(users.list_users(search, limit))


@router.get("/by-id/{user_id}", response_model=UserProfileResponse)
async def get_user(user_id: int, users: UserServiceDep) -> User:
    """Return a public profile."""
    return users.get_user(user_id)


@router.get("/info-profile", response_model=UserProfileResponse)
async def get_own_profile(current_user: CurrentUserDep) -> User:
    """Return the authenticated user's profile."""
    return current_user


@router.post("/toggle-subscribe/{author_id}", response_model=SubscriptionResponse)
async def toggle_subscription(
    author_id: int,
    current_user: CurrentUserDep,
    users: UserServiceDep,
) -> SubscriptionResponse:
    """Follow or unfollow another user."""
    subscribed = users.toggle_subscription(current_user.id, author_id)
    return SubscriptionResponse(author_id=author_id, subscribed=subscribed)


@router.put("/update-profile", response_model=UserResponse)
async def update_profile(
    payload: UserUpdate,
    current_user: CurrentUserDep,
    users: UserServiceDep,
) -> User:
    """Partially update the authenticated user's profile."""
    return users.update_profile(current_user.id, payload)


@router.delete("/delete-profile", status_code=status.HTTP_204_NO_CONTENT)
async def delete_profile(current_user: CurrentUserDep, users: UserServiceDep) -> None:
    """Delete the authenticated user's account and content."""
    users.delete_user(current_user.id)


@router.patch("/toggle-banned/{user_id}", response_model=UserResponse)
async def toggle_banned(user_id: int, admin: AdminLevelOneDep, users: UserServiceDep) -> User:
    """Ban or unban a user ranked below the acting admin."""
    return users.toggle_banned(user_id, admin.id)


@router.patch("/toggle-admin-level-one/{user_id}", response_model=UserResponse)
async def toggle_admin(user_id: int, admin: AdminLevelTwoDep, users: UserServiceDep) -> User:
    """Promote a user to admin-level-one or demote them (admin-level-two only)."""
    return users.toggle_admin(user_id)

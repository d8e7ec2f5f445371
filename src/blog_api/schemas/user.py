"""User-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class SocialLinks(BaseModel):
    """Optional links to the user's social media profiles."""

    facebook: str | None = None
    twitter: str | None = None
    instagram: str | None = None
    youtube: str | None = None


class UserBrief(BaseModel):
    """Minimal author card embedded in posts and comments."""

    id: int
    first_name: str
    last_name: str
    avatar: str

    model_config = ConfigDict(from_attributes=True)


class UserResponse(BaseModel):
    """Public profile of a user."""

    id: int
    email: EmailStr
    role: str
    first_name: str
    last_name: str
    middle_name: str | None = None
    job_title: str
    description: str
    avatar: str
    social: SocialLinks = Field(default_factory=SocialLinks)
    activity_status: str
    status_updated_at: datetime | None = None
    status_comment: str | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserProfileResponse(UserResponse):
    """Profile including subscription graph."""

    subscriptions: list[UserBrief] = Field(default_factory=list)
    subscribers: list[UserBrief] = Field(default_factory=list)


class UserUpdate(BaseModel):
    """Partial profile update; unset fields are left untouched."""

    first_name: str | None = Field(None, min_length=1, max_length=100)
    last_name: str | None = Field(None, min_length=1, max_length=100)
    middle_name: str | None = Field(None, max_length=100)
    job_title: str | None = Field(None, max_length=200)
    description: str | None = None
    avatar: str | None = None
    social: SocialLinks | None = None


class SubscriptionResponse(BaseModel):
    """Result of toggling a subscription."""

    author_id: int
    subscribed: bool

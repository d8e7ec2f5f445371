# src/blog_api/schemas/post.py
"""Post-related Pydantic schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .user import UserBrief


class PostCreate(BaseModel):
    """Schema for creating a new post."""

    title: str = Field(..., min_length=1, max_length=300)
    content: str = Field(..., min_length=1)
    cover: str = Field(..., min_length=1, description="Cover image URL")
    tag: str = Field(..., min_length=1, description="Name of an existing tag")


class PostUpdate(BaseModel):
    """Schema for a partial post update."""

    id: int
    title: str | None = Field(None, min_length=1, max_length=300)
    content: str | None = Field(None, min_length=1)
    cover: str | None = Field(None, min_length=1)
    tag: str | None = Field(None, min_length=1)


class PostTag(BaseModel):
    """Tag reference embedded in a post."""

    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class PostResponse(BaseModel):
    """Schema for post information returned by the API."""

    id: int
    title: str
    content: str
    cover: str
    created_at: datetime
    view_count: int
    tag: PostTag | None = None
    author: UserBrief
    likes: list[int] = Field(default_factory=list, description="IDs of liking users")
    dislikes: list[int] = Field(default_factory=list, description="IDs of disliking users")
    favorites: list[int] = Field(default_factory=list, description="IDs of users who saved it")

    @model_validator(mode="before")
    @classmethod
    def _flatten_reactions(cls, data: object) -> object:
        if not isinstance(data, dict):
            extracted: dict[str, object | None] = {}
            for field_name in cls.model_fields:
                extracted[field_name] = getattr(data, field_name, None)
            data = extracted

        for field_name in ("likes", "dislikes", "favorites"):
            users = data.get(field_name)
            if users is None:
                data[field_name] = []
            else:
                data[field_name] = [getattr(user, "id", user) for user in users]

        return data

    model_config = ConfigDict(from_attributes=True)


class ReactionResponse(BaseModel):
    """New state of a toggled reaction."""

    post_id: int
    reaction: Literal["like", "dislike", "favorite"]
    active: bool

"""Comment-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .user import UserBrief


class CommentCreate(BaseModel):
    """Schema for commenting on a post."""

    content: str = Field(..., min_length=1)
    post_id: int


class CommentUpdate(BaseModel):
    """Schema for editing a comment."""

    id: int
    content: str = Field(..., min_length=1)


class CommentResponse(BaseModel):
    """Comment as returned by the API."""

    id: int
    content: str
    created_at: datetime
    post_id: int
    author: UserBrief

    model_config = ConfigDict(from_attributes=True)

"""Tag-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class TagCreate(BaseModel):
    """Schema for creating a tag."""

    name: str = Field(..., min_length=1, max_length=64)


class TagUpdate(BaseModel):
    """Schema for renaming a tag."""

    id: int
    name: str | None = Field(None, min_length=1, max_length=64)


class TagResponse(BaseModel):
    """Tag with its post counter."""

    id: int
    name: str
    post_count: int

    model_config = ConfigDict(from_attributes=True)

"""Quote-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class QuoteCreate(BaseModel):
    """Schema for adding a quote."""

    author: str = Field(..., min_length=1, max_length=200)
    text: str = Field(..., min_length=1)


class QuoteUpdate(BaseModel):
    """Schema for a partial quote update."""

    author: str | None = Field(None, min_length=1, max_length=200)
    text: str | None = Field(None, min_length=1)


class QuoteResponse(BaseModel):
    """Quote as returned by the API."""

    id: int
    author: str
    text: str

    model_config = ConfigDict(from_attributes=True)

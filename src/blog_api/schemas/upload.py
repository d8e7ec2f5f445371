"""Upload response schema."""

from pydantic import BaseModel, Field


class UploadResponse(BaseModel):
    """Metadata describing a stored upload."""

    original_name: str = Field(..., description="Filename supplied by the client")
    filename: str = Field(..., description="Generated filename on disk")
    path: str = Field(..., description="Path relative to the upload root")
    url: str = Field(..., description="Public URL of the stored file")
    size: int
    mimetype: str

# src/blog_api/api/v1/endpoints/uploads.py
"""File upload endpoint."""

from fastapi import APIRouter, File, HTTPException, UploadFile, status

from blog_api.api.v1.dependencies import CurrentUserDep
from blog_api.schemas.upload import UploadResponse
from blog_api.services.upload_service import save_upload

router = APIRouter(prefix="/upload", tags=["uploads"])


@router.post(
    "/{folder}/{sub_folder}",
    response_model=UploadResponse,
    status_code=status.HTTP_201_CREATED,
)
async def upload_file(
    folder: str,
    sub_folder: str,
    current_user: CurrentUserDep,
    file: UploadFile = File(...),
) -> UploadResponse:
    """Store a multipart ``file`` under ``folder/sub_folder``.

    Raises:
        HTTPException: 400 for unsafe folder names or files over the size limit.
    """
    content = await file.read()
    try:
        return await save_upload(
            folder,
            sub_folder,
            file.filename or "upload",
            content,
            file.content_type,
        )
    except ValueError as err:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(err),
        ) from err

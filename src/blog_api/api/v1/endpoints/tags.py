# src/blog_api/api/v1/endpoints/tags.py
"""Tag endpoints for the Blog API."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from blog_api.api.v1.dependencies import AdminLevelOneDep, CurrentUserDep, SessionDep
from blog_api.models import Tag
from blog_api.schemas.tag import TagCreate, TagResponse, TagUpdate
from blog_api.services.tag_service import TagService

router = APIRouter(prefix="/tag", tags=["tags"])


def get_tag_service(db: SessionDep) -> TagService:
    return TagService(db)


TagServiceDep = Annotated[TagService, Depends(get_tag_service)]


@router.get("/", response_model=list[TagResponse])
async def list_tags(
    tags: TagServiceDep,
    limit: int | None = Query(None, ge=1, le=100),
) -> list[Tag]:
    """List tags, most used first."""
    return list(tags.find_tags(limit))


@router.post("/new", response_model=TagResponse, status_code=status.HTTP_201_CREATED)
async def create_tag(payload: TagCreate, current_user: CurrentUserDep, tags: TagServiceDep) -> Tag:
    """Create a tag with a zero post counter."""
    return tags.create_tag(payload)


@router.patch("/update", response_model=TagResponse)
async def update_tag(payload: TagUpdate, admin: AdminLevelOneDep, tags: TagServiceDep) -> Tag:
    return tags.update_tag(payload)


@router.delete("/delete/{tag_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tag(tag_id: int, admin: AdminLevelOneDep, tags: TagServiceDep) -> None:
    """Delete a tag; posts carrying it become untagged."""
    tags.delete_tag(tag_id)

# src/blog_api/api/v1/endpoints/comments.py
"""Comment endpoints for the Blog API."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from blog_api.api.v1.dependencies import CurrentUserDep, SessionDep
from blog_api.models import Comment
from blog_api.schemas.comment import CommentCreate, CommentResponse, CommentUpdate
from blog_api.services.comment_service import CommentService

router = APIRouter(prefix="/comment", tags=["comments"])


def get_comment_service(db: SessionDep) -> CommentService:
    return CommentService(db)


CommentServiceDep = Annotated[CommentService, Depends(get_comment_service)]


@router.get("/post/{post_id}", response_model=list[CommentResponse])
async def list_post_comments(post_id: int, comments: CommentServiceDep) -> list[Comment]:
    """List the comments on a post, oldest first."""
    return list(comments.find_by_post(post_id))


@router.get("/by-id/{comment_id}", response_model=CommentResponse)
async def get_comment(comment_id: int, comments: CommentServiceDep) -> Comment:
    return comments.get_comment(comment_id)


@router.get("/current-user", response_model=list[CommentResponse])
async def list_own_comments(current_user: CurrentUserDep, comments: CommentServiceDep) -> list[Comment]:
    """List comments written by the authenticated user."""
    return list(comments.find_by_author(current_user.id))


@router.post("/new", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
async def create_comment(
    payload: CommentCreate,
    current_user: CurrentUserDep,
    comments: CommentServiceDep,
) -> Comment:
    """Comment on an existing post."""
    return comments.create_comment(current_user.id, payload)


@router.put("/update", response_model=CommentResponse)
async def update_comment(
    payload: CommentUpdate,
    current_user: CurrentUserDep,
    comments: CommentServiceDep,
) -> Comment:
    return comments.update_comment(current_user.id, payload)


@router.delete("/delete/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: int,
    current_user: CurrentUserDep,
    comments: CommentServiceDep,
) -> None:
    comments.delete_comment(comment_id, current_user.id)

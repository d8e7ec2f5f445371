# src/blog_api/api/v1/endpoints/posts.py
"""Post-related endpoints for the Blog API."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from blog_api.api.v1.dependencies import CurrentUserDep, SessionDep
from blog_api.models import Post
from blog_api.schemas.post import PostCreate, PostResponse, PostUpdate
from blog_api.services.post_service import PostService

router = APIRouter(prefix="/post", tags=["posts"])


def get_post_service(db: SessionDep) -> PostService:
    """Return a post service bound to the request session."""
    return PostService(db)


PostServiceDep = Annotated[PostService, Depends(get_post_service)]


def _find_posts(
    posts: PostService,
    limit: int | None,
    tag: str | None,
    search: str | None,
    sort: str | None,
) -> list[Post]:
    try:
        return list(posts.find_posts(limit=limit, tag=tag, search=search, sort=sort))
    except ValueError as err:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(err),
        ) from err


@router.get("/", response_model=list[PostResponse])
async def list_posts(
    posts: PostServiceDep,
    limit: int | None = Query(None, ge=1, le=100, description="Maximum number of posts"),
    search: str | None = Query(None, description="Case-insensitive title search"),
    sort: str | None = Query(None, description="Sort key, e.g. createdAt_DESC or viewCount_ASC"),
) -> list[Post]:
    """List posts, newest first unless ``sort`` says otherwise."""
    return _find_posts(posts, limit, None, search, sort)


@router.get("/by-tag/{tag}", response_model=list[PostResponse])
async def list_posts_by_tag(
    tag: str,
    posts: PostServiceDep,
    limit: int | None = Query(None, ge=1, le=100),
    search: str | None = Query(None),
    sort: str | None = Query(None),
) -> list[Post]:
    """List posts carrying ``tag``."""
    return _find_posts(posts, limit, tag, search, sort)


@router.get("/most-viewed", response_model=list[PostResponse])
async def list_most_viewed(
    posts: PostServiceDep,
    limit: int | None = Query(None, ge=1, le=100),
) -> list[Post]:
    """List posts by descending view count."""
    return list(posts.find_most_viewed(limit))


@router.get("/by-id/{post_id}", response_model=PostResponse)
async def get_post(post_id: int, posts: PostServiceDep) -> Post:
    """Get a post by ID and record the view.

    Raises:
        NotFoundError: If the post does not exist.
    """
    return posts.get_post(post_id, count_view=True)


@router.get("/by-author/{author_id}", response_model=list[PostResponse])
async def list_posts_by_author(author_id: int, posts: PostServiceDep) -> list[Post]:
    """List posts written by a user."""
    return list(posts.find_by_author(author_id))


@router.post("/new", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    payload: PostCreate,
    current_user: CurrentUserDep,
    posts: PostServiceDep,
) -> Post:
    """Create a post authored by the current user."""
    return posts.create_post(current_user.id, payload)


@router.put("/update", response_model=PostResponse)
async def update_post(
    payload: PostUpdate,
    current_user: CurrentUserDep,
    posts: PostServiceDep,
) -> Post:
    """Update a post as its author or an administrator."""
    return posts.update_post(current_user.id, payload)


@router.delete("/delete/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: int,
    current_user: CurrentUserDep,
    posts: PostServiceDep,
) -> None:
    """Delete a post.

    Only the author or an administrator may delete; anyone else gets 409.
    """
    posts.delete_post(post_id, current_user.id)

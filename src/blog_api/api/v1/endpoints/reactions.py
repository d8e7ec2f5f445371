# src/blog_api/api/v1/endpoints/reactions.py
"""Post reaction endpoints (like, dislike, favorite)."""

from typing import Annotated

from fastapi import APIRouter, Depends

from blog_api.api.v1.dependencies import CurrentUserDep, SessionDep
from blog_api.models import Post
from blog_api.schemas.post import PostResponse, ReactionResponse
from blog_api.services.reaction_service import ReactionService

router = APIRouter(prefix="/post/post-reaction", tags=["reactions"])


def get_reaction_service(db: SessionDep) -> ReactionService:
    """Return a reaction service bound to the request session."""
    return ReactionService(db)


ReactionServiceDep = Annotated[ReactionService, Depends(get_reaction_service)]


@router.post("/like/{post_id}", response_model=ReactionResponse)
async def toggle_like(
    post_id: int,
    current_user: CurrentUserDep,
    reactions: ReactionServiceDep,
) -> ReactionResponse:
    """Toggle the current user's like; removes a dislike when liking."""
    active = reactions.toggle_like(post_id, current_user.id)
    return ReactionResponse(post_id=post_id, reaction="like", active=active)


@router.post("/dislike/{post_id}", response_model=ReactionResponse)
async def toggle_dislike(
    post_id: int,
    current_user: CurrentUserDep,
    reactions: ReactionServiceDep,
) -> ReactionResponse:
    """Toggle the current user's dislike; removes a like when disliking."""
    active = reactions.toggle_dislike(post_id, current_user.id)
    return ReactionResponse(post_id=post_id, reaction="dislike", active=active)


@router.post("/favorite/{post_id}", response_model=ReactionResponse)
async def toggle_favorite(
    post_id: int,
    current_user: CurrentUserDep,
    reactions: ReactionServiceDep,
) -> ReactionResponse:
    """Toggle the post in the current user's favorites."""
    active = reactions.toggle_favorite(post_id, current_user.id)
    return ReactionResponse(post_id=post_id, reaction="favorite", active=active)


@router.get("/liked", response_model=list[PostResponse])
async def list_liked_posts(current_user: CurrentUserDep, reactions: ReactionServiceDep) -> list[Post]:
    """Posts the current user likes."""
    return list(reactions.find_liked_posts(current_user.id))


@router.get("/favorites", response_model=list[PostResponse])
async def list_favorite_posts(
    current_user: CurrentUserDep,
    reactions: ReactionServiceDep,
) -> list[Post]:
    """Posts the current user saved as favorites."""
    return list(reactions.find_favorite_posts(current_user.id))

# src/blog_api/models/__init__.py
"""SQLAlchemy models for the Blog API application."""

from .comment import Comment
from .post import Post, post_dislike, post_favorite, post_like
from .quote import Quote
from .tag import Tag
from .user import ActivityStatus, User, UserRole, user_subscription

__all__ = [
    "ActivityStatus",
    "Comment",
    "Post", "post_like", "post_dislike", "post_favorite",
    "Quote",
    "Tag",
    "User", "UserRole", "user_subscription",
]

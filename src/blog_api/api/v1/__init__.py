# src/blog_api/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    auth_router,
    comments_router,
    posts_router,
    quotes_router,
    reactions_router,
    tags_router,
    uploads_router,
    users_router,
)

__all__ = [
    "auth_router",
    "comments_router",
    "posts_router",
    "quotes_router",
    "reactions_router",
    "tags_router",
    "uploads_router",
    "users_router",
]

# src/blog_api/api/v1/endpoints/__init__.py
"""Endpoint routers for API v1."""

from .auth import router as auth_router
from .comments import router as comments_router
from .posts import router as posts_router
from .quotes import router as quotes_router
from .reactions import router as reactions_router
from .tags import router as tags_router
from .uploads import router as uploads_router
from .users import router as users_router

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

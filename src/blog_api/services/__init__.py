"""Service layer for the Blog API."""

from .auth_service import AuthService
from .comment_service import CommentService
from .errors import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ServiceError,
    UnauthorizedError,
)
from .post_service import PostService
from .quote_service import QuoteService
from .reaction_service import ReactionService
from .tag_service import TagService
from .user_service import UserService

__all__ = [
    "AuthService",
    "CommentService",
    "ConflictError",
    "ForbiddenError",
    "NotFoundError",
    "PostService",
    "QuoteService",
    "ReactionService",
    "ServiceError",
    "TagService",
    "UnauthorizedError",
    "UserService",
]

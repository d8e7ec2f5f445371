# src/blog_api/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .auth import AuthResponse, LoginRequest, RefreshRequest, RegisterRequest, TokenPair
from .comment import CommentCreate, CommentResponse, CommentUpdate
from .post import PostCreate, PostResponse, PostUpdate, ReactionResponse
from .quote import QuoteCreate, QuoteResponse, QuoteUpdate
from .tag import TagCreate, TagResponse, TagUpdate
from .upload import UploadResponse
from .user import (
    SocialLinks,
    SubscriptionResponse,
    UserBrief,
    UserProfileResponse,
    UserResponse,
    UserUpdate,
)

__all__ = [
    "AuthResponse", "LoginRequest", "RefreshRequest", "RegisterRequest", "TokenPair",
    "CommentCreate", "CommentResponse", "CommentUpdate",
    "PostCreate", "PostResponse", "PostUpdate", "ReactionResponse",
    "QuoteCreate", "QuoteResponse", "QuoteUpdate",
    "TagCreate", "TagResponse", "TagUpdate",
    "UploadResponse",
    "SocialLinks", "SubscriptionResponse", "UserBrief", "UserProfileResponse",
    "UserResponse", "UserUpdate",
]

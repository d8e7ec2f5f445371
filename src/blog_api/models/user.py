# src/blog_api/models/user.py
"""SQLAlchemy models for user accounts."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog_api.db.session import Base
from blog_api.db.time import utcnow

if TYPE_CHECKING:
    from .comment import Comment
    from .post import Post

DEFAULT_DESCRIPTION = (
    "Meet Jonathan Doe, a passionate writer and blogger with a love for technology "
    "and travel. Jonathan holds a degree in Computer Science and has spent years "
    "working in the tech industry, gaining a deep understanding of the impact "
    "technology has on our lives."
)


class UserRole(StrEnum):
    """Account roles in ascending order of privilege."""

    USER = "user"
    ADMIN_LEVEL_ONE = "admin-level-one"
    ADMIN_LEVEL_TWO = "admin-level-two"


# Ordinal hierarchy used for admin gating.
ROLE_HIERARCHY: tuple[UserRole, ...] = (
    UserRole.USER,
    UserRole.ADMIN_LEVEL_ONE,
    UserRole.ADMIN_LEVEL_TWO,
)


def role_rank(role: str) -> int:
    """Return the position of ``role`` in the hierarchy, -1 when unknown."""
    try:
        return ROLE_HIERARCHY.index(UserRole(role))
    except ValueError:
        return -1


class ActivityStatus(StrEnum):
    """Account activity classification, recomputed nightly except for bans."""

    ACTIVE = "active"
    SLOW_ACTIVE = "slow-active"
    NON_ACTIVE = "non-active"
    BANNED = "banned"


# Self-referential many-to-many: subscriber follows author.
user_subscription = Table(
    "user_subscription",
    Base.metadata,
    Column(
        "subscriber_id",
        Integer,
        ForeignKey("app_user.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "author_id",
        Integer,
        ForeignKey("app_user.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class User(Base):
    """Registered account with credentials, profile and activity state."""

    __tablename__ = "app_user"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(128), nullable=False)
    role: Mapped[str] = mapped_column(String(32), nullable=False, default=UserRole.USER.value)

    first_name: Mapped[str] = mapped_column(String(100), nullable=False, default="Jonathan")
    last_name: Mapped[str] = mapped_column(String(100), nullable=False, default="Doe")
    middle_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    job_title: Mapped[str] = mapped_column(
        String(200), nullable=False, default="Collaborator & Editor"
    )
    description: Mapped[str] = mapped_column(Text, nullable=False, default=DEFAULT_DESCRIPTION)
    avatar: Mapped[str] = mapped_column(Text, nullable=False, default="")
    social: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)

    activity_status: Mapped[str] = mapped_column(
        String(32), nullable=False, default=ActivityStatus.NON_ACTIVE.value
    )
    status_updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    status_comment: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    posts: Mapped[list[Post]] = relationship(
        "Post",
        back_populates="author",
        cascade="all, delete-orphan",
    )
    comments: Mapped[list[Comment]] = relationship(
        "Comment",
        back_populates="author",
        cascade="all, delete-orphan",
    )

    subscriptions: Mapped[list[User]] = relationship(
        "User",
        secondary=user_subscription,
        primaryjoin=lambda: User.id == user_subscription.c.subscriber_id,
        secondaryjoin=lambda: User.id == user_subscription.c.author_id,
        back_populates="subscribers",
    )
    subscribers: Mapped[list[User]] = relationship(
        "User",
        secondary=user_subscription,
        primaryjoin=lambda: User.id == user_subscription.c.author_id,
        secondaryjoin=lambda: User.id == user_subscription.c.subscriber_id,
        back_populates="subscriptions",
    )

    liked_posts: Mapped[list[Post]] = relationship(
        "Post", secondary="post_like", back_populates="likes"
    )
    disliked_posts: Mapped[list[Post]] = relationship(
        "Post", secondary="post_dislike", back_populates="dislikes"
    )
    favorite_posts: Mapped[list[Post]] = relationship(
        "Post", secondary="post_favorite", back_populates="favorites"
    )

    @property
    def is_admin(self) -> bool:
        """Return True for any admin tier."""
        return role_rank(self.role) > 0

    @property
    def is_banned(self) -> bool:
        """Return True when the account has been banned by an administrator."""
        return self.activity_status == ActivityStatus.BANNED

# src/blog_api/models/post.py
"""SQLAlchemy models for posts and their reaction tables."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog_api.db.session import Base
from blog_api.db.time import utcnow

if TYPE_CHECKING:
    from .comment import Comment
    from .tag import Tag
    from .user import User


def _reaction_table(name: str) -> Table:
    # Composite primary key prevents duplicate reactions from the same user.
    return Table(
        name,
        Base.metadata,
        Column(
            "post_id",
            Integer,
            ForeignKey("post.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        Column(
            "user_id",
            Integer,
            ForeignKey("app_user.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )


post_like = _reaction_table("post_like")
post_dislike = _reaction_table("post_dislike")
post_favorite = _reaction_table("post_favorite")


class Post(Base):
    """Blog article written by a user under a single tag."""

    __tablename__ = "post"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    cover: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, index=True
    )
    view_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    tag_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("tag.id", ondelete="SET NULL"),
        nullable=True,
    )
    author_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("app_user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    tag: Mapped[Tag | None] = relationship("Tag", back_populates="posts")
    author: Mapped[User] = relationship("User", back_populates="posts")
    comments: Mapped[list[Comment]] = relationship(
        "Comment",
        back_populates="post",
        cascade="all, delete-orphan",
    )

    likes: Mapped[list[User]] = relationship(
        "User", secondary=post_like, back_populates="liked_posts"
    )
    dislikes: Mapped[list[User]] = relationship(
        "User", secondary=post_dislike, back_populates="disliked_posts"
    )
    favorites: Mapped[list[User]] = relationship(
        "User", secondary=post_favorite, back_populates="favorite_posts"
    )

# src/blog_api/models/tag.py
"""SQLAlchemy model for post tags."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog_api.db.session import Base

if TYPE_CHECKING:
    from .post import Post


class Tag(Base):
    """Topic label; ``post_count`` is maintained by the post service."""

    __tablename__ = "tag"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    post_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    posts: Mapped[list[Post]] = relationship("Post", back_populates="tag")

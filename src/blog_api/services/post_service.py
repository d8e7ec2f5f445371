"""Service-level helpers for reading and writing posts."""
from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.orm import Query, Session

from blog_api.models import Post, Tag
from blog_api.schemas.post import PostCreate, PostUpdate

from .errors import ConflictError, NotFoundError
from .tag_service import TagService
from .user_service import UserService

logger = logging.getLogger(__name__)

# Public sort keys mapped to sortable columns.
SORT_FIELDS = {
    "createdAt": Post.created_at,
    "viewCount": Post.view_count,
    "title": Post.title,
}


def parse_sort(sort: str | None) -> tuple[str, str]:
    """Split a ``<field>_<ASC|DESC>`` sort key.

    Raises:
        ValueError: If the field or direction is not recognised.
    """
    if not sort:
        return "createdAt", "DESC"
    field, _, direction = sort.partition("_")
    direction = (direction or "DESC").upper()
    if field not in SORT_FIELDS or direction not in {"ASC", "DESC"}:
        raise ValueError(f"Unsupported sort key: {sort!r}")
    return field, direction


class PostService:
    """Post queries and author-guarded mutations."""

    def __init__(
        self,
        db: Session,
        users: UserService | None = None,
        tags: TagService | None = None,
    ) -> None:
        self.db = db
        self.users = users or UserService(db)
        self.tags = tags or TagService(db)

    def _query(self) -> Query[Post]:
        return self.db.query(Post)

    def find_posts(
        self,
        limit: int | None = None,
        tag: str | None = None,
        search: str | None = None,
        sort: str | None = None,
    ) -> Sequence[Post]:
        """List posts filtered by tag name and title search, sorted by ``sort``."""
        field, direction = parse_sort(sort)
        query = self._query()
        if tag:
            query = query.join(Post.tag).filter(Tag.name == tag)
        if search:
            query = query.filter(func.lower(Post.title).contains(search.lower(), autoescape=True))

        column = SORT_FIELDS[field]
        query = query.order_by(column.asc() if direction == "ASC" else column.desc(), Post.id)
        if limit:
            query = query.limit(limit)
        return query.all()

    def get_post(self, post_id: int, *, count_view: bool = False) -> Post:
        """Return a post by ID, optionally recording a view.

        Raises:
            NotFoundError: If the post does not exist.
        """
        post = self.db.get(Post, post_id)
        if post is None:
            raise NotFoundError("Post not found")
        if count_view:
            post.view_count += 1
            self.db.commit()
            self.db.refresh(post)
        return post

    def find_most_viewed(self, limit: int | None = None) -> Sequence[Post]:
        query = self._query().order_by(Post.view_count.desc(), Post.id)
        if limit:
            query = query.limit(limit)
        return query.all()

    def find_by_author(self, author_id: int) -> Sequence[Post]:
        author = self.users.get_user(author_id)
        return (
            self._query()
            .filter(Post.author_id == author.id)
            .order_by(Post.created_at.desc(), Post.id)
            .all()
        )

    def create_post(self, author_id: int, data: PostCreate) -> Post:
        """Create a post for ``author_id`` under an existing tag."""
        author = self.users.get_user(author_id)
        tag = self.tags.increment_post_count(data.tag)

        post = Post(
            title=data.title,
            content=data.content,
            cover=data.cover,
            author=author,
            tag=tag,
        )
        self.db.add(post)
        self.db.commit()
        self.db.refresh(post)
        logger.info("User %d created post %d", author.id, post.id)
        return post

    def _ensure_can_modify(self, post: Post, user_id: int) -> None:
        user = self.users.get_user(user_id)
        if post.author_id != user.id and not user.is_admin:
            raise ConflictError("You are not the author of this post")

    def update_post(self, user_id: int, data: PostUpdate) -> Post:
        """Apply a partial update; moving to another tag shifts the counters."""
        post = self.get_post(data.id)
        self._ensure_can_modify(post, user_id)

        updates = data.model_dump(exclude_unset=True, exclude={"id", "tag"})
        if data.tag is not None and (post.tag is None or post.tag.name != data.tag):
            new_tag = self.tags.increment_post_count(data.tag)
            if post.tag is not None:
                self.tags.decrement_post_count(post.tag)
            post.tag = new_tag

        for key, value in updates.items():
            if value is not None:
                setattr(post, key, value)

        self.db.commit()
        self.db.refresh(post)
        return post

    def delete_post(self, post_id: int, user_id: int) -> None:
        """Delete a post as its author or as any administrator.

        Raises:
            NotFoundError: If the post or user does not exist.
            ConflictError: If the user is neither the author nor an admin.
        """
        post = self.get_post(post_id)
        self._ensure_can_modify(post, user_id)

        if post.tag is not None:
            self.tags.decrement_post_count(post.tag)
        self.db.delete(post)
        self.db.commit()
        logger.info("User %d deleted post %d", user_id, post_id)

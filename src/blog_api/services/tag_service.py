"""Service for managing tags."""
from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from blog_api.models import Tag
from blog_api.schemas.tag import TagCreate, TagUpdate

from .errors import ConflictError, NotFoundError


class TagService:
    """Create, rename, list and delete tags and keep their post counters."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_tags(self, limit: int | None = None) -> Sequence[Tag]:
        """Return tags ordered by post count, most used first."""
        query = self.db.query(Tag).order_by(Tag.post_count.desc(), Tag.name)
        if limit:
            query = query.limit(limit)
        return query.all()

    def find_by_name(self, name: str) -> Tag | None:
        return self.db.query(Tag).filter(Tag.name == name).first()

    def get_tag(self, tag_id: int) -> Tag:
        tag = self.db.get(Tag, tag_id)
        if tag is None:
            raise NotFoundError("Tag not found")
        return tag

    def create_tag(self, data: TagCreate) -> Tag:
        if self.find_by_name(data.name) is not None:
            raise ConflictError("Tag already exists")
        tag = Tag(name=data.name, post_count=0)
        self.db.add(tag)
        self.db.commit()
        self.db.refresh(tag)
        return tag

    def increment_post_count(self, name: str) -> Tag:
        """Bump the counter of tag ``name`` without committing."""
        tag = self.find_by_name(name)
        if tag is None:
            raise NotFoundError("Tag not found")
        tag.post_count += 1
        return tag

    def decrement_post_count(self, tag: Tag) -> None:
        """Lower the counter of ``tag`` without committing, never below zero."""
        tag.post_count = max(tag.post_count - 1, 0)

    def update_tag(self, data: TagUpdate) -> Tag:
        tag = self.get_tag(data.id)
        if data.name is not None and data.name != tag.name:
            if self.find_by_name(data.name) is not None:
                raise ConflictError("Tag already exists")
            tag.name = data.name
        self.db.commit()
        self.db.refresh(tag)
        return tag

    def delete_tag(self, tag_id: int) -> None:
        """Delete a tag; its posts remain untagged."""
        tag = self.get_tag(tag_id)
        for post in list(tag.posts):
            post.tag = None
        self.db.delete(tag)
        self.db.commit()

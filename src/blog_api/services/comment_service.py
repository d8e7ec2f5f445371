"""Comment service."""
from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from blog_api.models import Comment
from blog_api.schemas.comment import CommentCreate, CommentUpdate

from .errors import ConflictError, NotFoundError
from .post_service import PostService
from .user_service import UserService


class CommentService:
    """Create, edit, list and delete comments on posts."""

    def __init__(
        self,
        db: Session,
        posts: PostService | None = None,
        users: UserService | None = None,
    ) -> None:
        self.db = db
        self.users = users or UserService(db)
        self.posts = posts or PostService(db, users=self.users)

    def find_by_post(self, post_id: int) -> Sequence[Comment]:
        return (
            self.db.query(Comment)
            .filter(Comment.post_id == post_id)
            .order_by(Comment.created_at, Comment.id)
            .all()
        )

    def find_by_author(self, user_id: int) -> Sequence[Comment]:
        return (
            self.db.query(Comment)
            .filter(Comment.author_id == user_id)
            .order_by(Comment.created_at.desc(), Comment.id)
            .all()
        )

    def get_comment(self, comment_id: int) -> Comment:
        comment = self.db.get(Comment, comment_id)
        if comment is None:
            raise NotFoundError("Comment not found")
        return comment

    def create_comment(self, author_id: int, data: CommentCreate) -> Comment:
        post = self.posts.get_post(data.post_id)
        author = self.users.get_user(author_id)
        comment = Comment(content=data.content, post=post, author=author)
        self.db.add(comment)
        self.db.commit()
        self.db.refresh(comment)
        return comment

    def _ensure_can_modify(self, comment: Comment, user_id: int) -> None:
        user = self.users.get_user(user_id)
        if comment.author_id != user.id and not user.is_admin:
            raise ConflictError("You are not the author of this comment")

    def update_comment(self, user_id: int, data: CommentUpdate) -> Comment:
        comment = self.get_comment(data.id)
        self._ensure_can_modify(comment, user_id)
        comment.content = data.content
        self.db.commit()
        self.db.refresh(comment)
        return comment

    def delete_comment(self, comment_id: int, user_id: int) -> None:
        comment = self.get_comment(comment_id)
        self._ensure_can_modify(comment, user_id)
        self.db.delete(comment)
        self.db.commit()

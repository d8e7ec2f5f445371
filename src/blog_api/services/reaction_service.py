"""Like, dislike and favorite toggling for posts.

Reactions live in association tables shared by both sides of the
relationship, so one commit updates the post's and the user's view of a
reaction together.
"""
from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from blog_api.models import Post, User

from .post_service import PostService
from .user_service import UserService


class ReactionService:
    """Toggle reactions with like and dislike kept mutually exclusive."""

    def __init__(
        self,
        db: Session,
        posts: PostService | None = None,
        users: UserService | None = None,
    ) -> None:
        self.db = db
        self.users = users or UserService(db)
        self.posts = posts or PostService(db, users=self.users)

    def _load(self, post_id: int, user_id: int) -> tuple[Post, User]:
        post = self.posts.get_post(post_id)
        user = self.users.get_user(user_id)
        return post, user

    @staticmethod
    def _toggle(
        active: list[User],
        user: User,
        opposite: list[User] | None = None,
    ) -> bool:
        if user in active:
            active.remove(user)
            return False
        if opposite is not None and user in opposite:
            opposite.remove(user)
        active.append(user)
        return True

    def toggle_like(self, post_id: int, user_id: int) -> bool:
        """Toggle a like, dropping any dislike; return True when now liked."""
        post, user = self._load(post_id, user_id)
        liked = self._toggle(post.likes, user, opposite=post.dislikes)
        self.db.commit()
        return liked

    def toggle_dislike(self, post_id: int, user_id: int) -> bool:
        """Toggle a dislike, dropping any like; return True when now disliked."""
        post, user = self._load(post_id, user_id)
        disliked = self._toggle(post.dislikes, user, opposite=post.likes)
        self.db.commit()
        return disliked

    def toggle_favorite(self, post_id: int, user_id: int) -> bool:
        """Toggle a favorite; independent of likes and dislikes."""
        post, user = self._load(post_id, user_id)
        favorited = self._toggle(post.favorites, user)
        self.db.commit()
        return favorited

    def find_liked_posts(self, user_id: int) -> Sequence[Post]:
        user = self.users.get_user(user_id)
        return (
            self.db.query(Post)
            .filter(Post.likes.any(User.id == user.id))
            .order_by(Post.created_at.desc(), Post.id)
            .all()
        )

    def find_favorite_posts(self, user_id: int) -> Sequence[Post]:
        user = self.users.get_user(user_id)
        return (
            self.db.query(Post)
            .filter(Post.favorites.any(User.id == user.id))
            .order_by(Post.created_at.desc(), Post.id)
            .all()
        )

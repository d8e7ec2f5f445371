"""CRUD-style helpers for managing users."""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from blog_api.core import security
from blog_api.db.time import utcnow
from blog_api.models import ActivityStatus, User, UserRole
from blog_api.models.user import role_rank
from blog_api.schemas.user import UserUpdate

from .errors import ConflictError, ForbiddenError, NotFoundError

logger = logging.getLogger(__name__)


class UserService:
    """Account lookups, profile edits, subscriptions and admin toggles."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def get_user(self, user_id: int) -> User:
        """Return a single user by primary key.

        Raises:
            NotFoundError: If no such user exists.
        """
        user = self.db.get(User, user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def find_by_email(self, email: str) -> User | None:
        """Return the user registered under ``email`` (case-insensitive)."""
        return (
            self.db.query(User)
            .filter(func.lower(User.email) == email.strip().lower())
            .first()
        )

    def list_users(self, search: str | None = None, limit: int | None = None) -> Sequence[User]:
        """Return users, optionally matching ``search`` against first or last name."""
        query = self.db.query(User)
        if search:
            needle = search.lower()
            # autoescape keeps % and _ in the search text literal.
            query = query.filter(
                or_(
                    func.lower(User.first_name).contains(needle, autoescape=True),
                    func.lower(User.last_name).contains(needle, autoescape=True),
                )
            )
        query = query.order_by(User.id)
        if limit:
            query = query.limit(limit)
        return query.all()

    def create_user(self, email: str, password: str, **profile: Any) -> User:
        """Persist a new user with a hashed password.

        Raises:
            ConflictError: If the email is already registered.
        """
        if self.find_by_email(email) is not None:
            raise ConflictError("Email or username is already in use")

        fields = {key: value for key, value in profile.items() if value is not None}
        user = User(
            email=email.strip().lower(),
            password_hash=security.hash_password(password),
            **fields,
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        logger.info("Created user %d", user.id)
        return user

    def update_profile(self, user_id: int, update_data: UserUpdate) -> User:
        """Apply partial updates to an existing user."""
        user = self.get_user(user_id)
        update_dict = update_data.model_dump(exclude_unset=True)
        for key, value in update_dict.items():
            # Only the middle name may be cleared.
            if value is None and key != "middle_name":
                continue
            setattr(user, key, value)

        self.db.commit()
        self.db.refresh(user)
        return user

    def delete_user(self, user_id: int) -> None:
        """Remove a user together with their posts and comments."""
        user = self.get_user(user_id)
        for post in user.posts:
            if post.tag is not None:
                post.tag.post_count = max(post.tag.post_count - 1, 0)
        self.db.delete(user)
        self.db.commit()
        logger.info("Deleted user %d", user_id)

    def toggle_subscription(self, user_id: int, author_id: int) -> bool:
        """Follow or unfollow ``author_id``; return True when now subscribed."""
        user = self.get_user(user_id)
        try:
            author = self.get_user(author_id)
        except NotFoundError:
            raise NotFoundError("Author not found") from None

        if user.id == author.id:
            raise ConflictError("You cannot subscribe to yourself")

        if author in user.subscriptions:
            user.subscriptions.remove(author)
            subscribed = False
        else:
            user.subscriptions.append(author)
            subscribed = True

        self.db.commit()
        return subscribed

    def toggle_banned(self, user_id: int, actor_id: int) -> User:
        """Ban an account, or lift an existing ban, on behalf of ``actor_id``.

        A lifted ban leaves the user non-active until the next activity sweep.

        Raises:
            ConflictError: If the actor targets their own account.
            ForbiddenError: If the target holds the same or a higher role.
        """
        actor = self.get_user(actor_id)
        user = self.get_user(user_id)
        if user.id == actor.id:
            raise ConflictError("You cannot ban yourself")
        if role_rank(user.role) >= role_rank(actor.role):
            raise ForbiddenError("You have no rights!")
        if user.is_banned:
            user.activity_status = ActivityStatus.NON_ACTIVE.value
            user.status_comment = None
        else:
            user.activity_status = ActivityStatus.BANNED.value
            user.status_comment = "Banned by an administrator"
        user.status_updated_at = utcnow()
        self.db.commit()
        self.db.refresh(user)
        logger.info("User %d activity status set to %s", user.id, user.activity_status)
        return user

    def toggle_admin(self, user_id: int) -> User:
        """Promote a standard user to admin-level-one or demote them back.

        Raises:
            ConflictError: If the user already holds the top admin tier.
        """
        user = self.get_user(user_id)
        if user.role == UserRole.ADMIN_LEVEL_TWO:
            raise ConflictError("Top-level administrators cannot be demoted")

        if user.role == UserRole.ADMIN_LEVEL_ONE:
            user.role = UserRole.USER.value
        else:
            user.role = UserRole.ADMIN_LEVEL_ONE.value
        self.db.commit()
        self.db.refresh(user)
        logger.info("User %d role set to %s", user.id, user.role)
        return user

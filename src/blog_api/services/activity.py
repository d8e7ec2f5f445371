"""Nightly recomputation of user activity status.

A user's status is derived from the timestamp of their most recent post:
no post or one older than the inactive window makes them non-active, one
older than the slow window makes them slow-active, anything newer keeps
them active. Banned accounts are left untouched.
"""

from __future__ import annotations

import asyncio
import logging
from collections import Counter
from datetime import datetime, timedelta

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from blog_api.core.settings import settings
from blog_api.db.session import SessionLocal
from blog_api.db.time import as_utc, utcnow
from blog_api.models import ActivityStatus, Post, User

logger = logging.getLogger(__name__)


def classify_activity(
    last_post_at: datetime | None,
    now: datetime,
    *,
    slow_after: timedelta | None = None,
    inactive_after: timedelta | None = None,
) -> ActivityStatus:
    """Classify a user from the time of their latest post."""
    if slow_after is None:
        slow_after = timedelta(days=settings.activity_slow_after_days)
    if inactive_after is None:
        inactive_after = timedelta(days=settings.activity_inactive_after_days)

    if last_post_at is None:
        return ActivityStatus.NON_ACTIVE

    age = as_utc(now) - as_utc(last_post_at)
    if age > inactive_after:
        return ActivityStatus.NON_ACTIVE
    if age > slow_after:
        return ActivityStatus.SLOW_ACTIVE
    return ActivityStatus.ACTIVE


def latest_post_times(db: Session) -> dict[int, datetime]:
    """Map author ID to the creation time of their newest post."""
    rows = (
        db.query(Post.author_id, func.max(Post.created_at))
        .group_by(Post.author_id)
        .all()
    )
    return {author_id: created_at for author_id, created_at in rows}


def run_activity_sweep(db: Session, now: datetime | None = None) -> dict[str, int]:
    """Recompute and persist the activity status of every non-banned user.

    Each user is committed on its own; a failed write is rolled back, logged
    and counted, and the sweep moves on to the next user.

    Returns a summary dict with a count per resulting status plus
    ``"failed"`` and ``"skipped"`` (banned accounts).
    """
    now = now or utcnow()
    latest = latest_post_times(db)
    summary: Counter[str] = Counter()

    user_ids = [user_id for (user_id,) in db.query(User.id).order_by(User.id).all()]
    for user_id in user_ids:
        try:
            user = db.get(User, user_id)
            if user is None:
                continue
            if user.is_banned:
                summary["skipped"] += 1
                continue
            status = classify_activity(latest.get(user_id), now)
            user.activity_status = status.value
            user.status_updated_at = now
            db.commit()
            summary[status.value] += 1
        except SQLAlchemyError:
            db.rollback()
            summary["failed"] += 1
            logger.exception("Failed to update activity status for user %d", user_id)

    result = {status.value: summary[status.value] for status in ActivityStatus}
    result.pop(ActivityStatus.BANNED.value)
    result["skipped"] = summary["skipped"]
    result["failed"] = summary["failed"]
    logger.info("Activity sweep finished: %s", result)
    return result


def _sweep_with_new_session() -> dict[str, int]:
    with SessionLocal() as db:
        return run_activity_sweep(db)


class ActivitySweepWorker:
    """Runs the activity sweep periodically in the background.

    The first sweep happens one interval after :meth:`start`; use
    :meth:`run_once` to trigger one immediately.
    """

    def __init__(self, interval_seconds: float | None = None) -> None:
        self.interval = float(
            interval_seconds
            if interval_seconds is not None
            else settings.activity_sweep_interval_seconds
        )
        self._task: asyncio.Task[None] | None = None
        self._stopping = asyncio.Event()

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        """Start the background sweep loop."""
        if not self.running:
            self._stopping.clear()
            self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        """Stop the background sweep loop."""
        if self._task is None:
            return

        self._stopping.set()
        await self._task
        self._task = None

    async def run_once(self) -> dict[str, int]:
        """Run a single sweep in a worker thread."""
        return await asyncio.to_thread(_sweep_with_new_session)

    async def _run(self) -> None:
        interval = max(0.1, self.interval)

        while not self._stopping.is_set():
            try:
                await asyncio.wait_for(self._stopping.wait(), timeout=interval)
                return
            except TimeoutError:
                pass

            try:
                await self.run_once()
            except SQLAlchemyError as e:
                logger.error("Activity sweep aborted: %s", e, exc_info=True)
            except (OSError, ValueError, TypeError, KeyError, AttributeError) as e:
                logger.error("Activity sweep failed: %s", e, exc_info=True)

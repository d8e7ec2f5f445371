import asyncio
from datetime import timedelta

import pytest
from sqlalchemy.exc import SQLAlchemyError

from blog_api.db.time import utcnow
from blog_api.models import ActivityStatus, Post, User
from blog_api.services.activity import (
    ActivitySweepWorker,
    classify_activity,
    latest_post_times,
    run_activity_sweep,
)

SLOW = timedelta(days=7)
INACTIVE = timedelta(days=30)


@pytest.mark.parametrize(
    ("age", "expected"),
    [
        (timedelta(days=3), ActivityStatus.ACTIVE),
        (timedelta(days=7), ActivityStatus.ACTIVE),
        (timedelta(days=10), ActivityStatus.SLOW_ACTIVE),
        (timedelta(days=30), ActivityStatus.SLOW_ACTIVE),
        (timedelta(days=31), ActivityStatus.NON_ACTIVE),
    ],
)
def test_classify_activity_by_age(age, expected):
    now = utcnow()
    assert classify_activity(now - age, now, slow_after=SLOW, inactive_after=INACTIVE) == expected


def test_classify_activity_without_posts():
    assert classify_activity(None, utcnow()) == ActivityStatus.NON_ACTIVE


def test_classify_activity_accepts_naive_timestamps():
    now = utcnow()
    naive = (now - timedelta(days=1)).replace(tzinfo=None)
    assert classify_activity(naive, now) == ActivityStatus.ACTIVE


def _post(author, days_ago, now):
    return Post(
        title="p",
        content="c",
        cover="x",
        author=author,
        created_at=now - timedelta(days=days_ago),
    )


def test_latest_post_times(db_session, test_user, other_user):
    now = utcnow()
    db_session.add_all([_post(test_user, 10, now), _post(test_user, 2, now)])
    db_session.flush()

    latest = latest_post_times(db_session)
    assert set(latest) == {test_user.id}
    assert other_user.id not in latest


def test_sweep_updates_statuses_and_skips_banned(db_session, test_user, other_user, admin_user):
    now = utcnow()
    db_session.add_all([_post(test_user, 1, now), _post(other_user, 12, now)])
    admin_user.activity_status = ActivityStatus.BANNED.value
    db_session.flush()

    summary = run_activity_sweep(db_session, now=now)

    assert summary == {
        "active": 1,
        "slow-active": 1,
        "non-active": 0,
        "skipped": 1,
        "failed": 0,
    }
    assert db_session.get(User, test_user.id).activity_status == ActivityStatus.ACTIVE
    assert db_session.get(User, other_user.id).activity_status == ActivityStatus.SLOW_ACTIVE
    assert db_session.get(User, admin_user.id).activity_status == ActivityStatus.BANNED
    assert test_user.status_updated_at is not None


def test_sweep_isolates_a_failing_user(db_session, mocker, test_user, other_user, admin_user):
    now = utcnow()
    db_session.add_all([_post(test_user, 1, now), _post(other_user, 1, now), _post(admin_user, 12, now)])
    db_session.flush()

    real_commit = db_session.commit

    def flaky_commit():
        if other_user in db_session.dirty:
            raise SQLAlchemyError("write failed")
        real_commit()

    mocker.patch.object(db_session, "commit", side_effect=flaky_commit)
    # Discard the failed user's pending change without ending the test transaction.
    rollback = mocker.patch.object(
        db_session, "rollback", side_effect=lambda: db_session.refresh(other_user)
    )

    summary = run_activity_sweep(db_session, now=now)

    assert summary["failed"] == 1
    assert summary["active"] == 1
    assert summary["slow-active"] == 1
    rollback.assert_called_once()
    assert test_user.activity_status == ActivityStatus.ACTIVE
    assert admin_user.activity_status == ActivityStatus.SLOW_ACTIVE
    assert other_user.activity_status == ActivityStatus.NON_ACTIVE
    assert other_user.status_updated_at is None


def test_sweep_marks_users_without_posts_non_active(db_session, test_user):
    test_user.activity_status = ActivityStatus.ACTIVE.value
    db_session.flush()

    summary = run_activity_sweep(db_session)

    assert summary["non-active"] == 1
    assert test_user.activity_status == ActivityStatus.NON_ACTIVE


@pytest.mark.asyncio
async def test_worker_runs_sweep_periodically(mocker):
    sweep = mocker.patch(
        "blog_api.services.activity._sweep_with_new_session",
        return_value={"active": 0},
    )
    worker = ActivitySweepWorker(interval_seconds=0.1)

    await worker.start()
    assert worker.running
    await asyncio.sleep(0.35)
    await worker.stop()

    assert not worker.running
    assert sweep.call_count >= 1


@pytest.mark.asyncio
async def test_worker_stops_before_first_interval(mocker):
    sweep = mocker.patch("blog_api.services.activity._sweep_with_new_session")
    worker = ActivitySweepWorker(interval_seconds=3600)

    await worker.start()
    await worker.stop()

    sweep.assert_not_called()


@pytest.mark.asyncio
async def test_run_once_returns_summary(mocker):
    mocker.patch(
        "blog_api.services.activity._sweep_with_new_session",
        return_value={"active": 2, "failed": 0},
    )
    assert await ActivitySweepWorker().run_once() == {"active": 2, "failed": 0}


@pytest.mark.asyncio
async def test_worker_keeps_running_after_a_failed_sweep(mocker):
    calls = []

    def sweep():
        calls.append(1)
        if len(calls) == 1:
            raise ValueError("unexpected row")
        return {"active": 0}

    mocker.patch("blog_api.services.activity._sweep_with_new_session", side_effect=sweep)
    worker = ActivitySweepWorker(interval_seconds=0.1)

    await worker.start()
    await asyncio.sleep(0.45)
    assert worker.running
    await worker.stop()

    assert len(calls) >= 2

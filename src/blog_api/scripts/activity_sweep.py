# src/blog_api/scripts/activity_sweep.py
"""
One-shot activity recomputation for cron.

Runs the same sweep as the in-process worker and prints a summary:
    python -m blog_api.scripts.activity_sweep
"""

import logging

from blog_api.core.settings import settings
from blog_api.db.session import SessionLocal
from blog_api.services.activity import run_activity_sweep


def main() -> dict[str, int]:
    """Sweep every user once and return the per-status counts."""
    db = SessionLocal()
    try:
        summary = run_activity_sweep(db)
    finally:
        db.close()

    print(
        "Activity sweep: "
        + ", ".join(f"{status}={count}" for status, count in summary.items())
    )
    return summary


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level.upper())
    main()

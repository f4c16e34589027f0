"""Date manipulation utilities"""

from datetime import datetime, timezone


def account_age_in_days(created_at: datetime, now: datetime | None = None) -> int:
    """Whole days elapsed since created_at (never negative)"""
    if now is None:
        now = datetime.now(timezone.utc)
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return max((now - created_at).days, 0)

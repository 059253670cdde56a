"""Time helpers: every timestamp in the system is timezone-aware UTC."""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone

DAY = timedelta(days=1)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def ensure_aware(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC and normalise aware ones to UTC."""

    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def describe_due(due_date: datetime, now: datetime) -> str:
    """Human wording for a due date relative to ``now``.

    Days are counted by rounding the remaining time up, so anything due later
    today reads "Due today" and an assignment only reads "Overdue" once it is
    more than a full day late.
    """
    diff = ensure_aware(due_date) - ensure_aware(now)
    diff_days = math.ceil(diff / DAY)
    if diff_days == 0:
        return "Due today"
    if diff_days == 1:
        return "Due tomorrow"
    if diff_days < 0:
        return "Overdue"
    if diff_days < 7:
        return f"Due in {diff_days} days"
    return due_date.date().isoformat()

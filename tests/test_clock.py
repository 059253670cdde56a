from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from core.clock import describe_due, ensure_aware

NOW = datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "offset,label",
    [
        (timedelta(hours=-3), "Due today"),
        (timedelta(0), "Due today"),
        (timedelta(hours=10), "Due tomorrow"),
        (timedelta(hours=30), "Due in 2 days"),
        (timedelta(days=6), "Due in 6 days"),
        (timedelta(days=-2), "Overdue"),
        (timedelta(days=9), "2026-03-11"),
    ],
)
def test_describe_due(offset, label) -> None:
    assert describe_due(NOW + offset, NOW) == label


def test_ensure_aware_normalises_to_utc() -> None:
    naive = datetime(2026, 3, 2, 9, 0)
    assert ensure_aware(naive) == NOW
    plus_two = datetime(2026, 3, 2, 11, 0, tzinfo=timezone(timedelta(hours=2)))
    assert ensure_aware(plus_two).tzinfo == timezone.utc
    assert ensure_aware(plus_two) == NOW

from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

# Settings are cached on first import of the API modules.
os.environ.setdefault("STUDYMATE_NOTIFICATIONS", "memory")
os.environ.setdefault("STUDYMATE_NOTIFICATION_PERMISSION", "undetermined")
os.environ.setdefault("STUDYMATE_SEED_DEMO", "1")

from api.services.assignment_store import AssignmentStore  # noqa: E402
from notifications import InMemoryNotificationCenter, PermissionStatus  # noqa: E402
from scheduler import ReminderScheduler  # noqa: E402

START = datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)


class FakeClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(START)


def build_harness(clock: FakeClock, center: InMemoryNotificationCenter) -> SimpleNamespace:
    store = AssignmentStore(clock=clock)
    scheduler = ReminderScheduler(center, source=store.snapshot, clock=clock)
    store.subscribe(scheduler.reconcile)
    return SimpleNamespace(store=store, center=center, scheduler=scheduler, clock=clock)


@pytest.fixture
def harness(clock: FakeClock) -> SimpleNamespace:
    center = InMemoryNotificationCenter(permission=PermissionStatus.GRANTED, clock=clock)
    return build_harness(clock, center)


@pytest.fixture
def make_harness(clock: FakeClock):
    """Build a harness around a custom notification centre."""

    def factory(center: InMemoryNotificationCenter) -> SimpleNamespace:
        center.clock = clock
        return build_harness(clock, center)

    return factory

from __future__ import annotations

import asyncio
from datetime import timedelta

import pytest

from core.errors import PermissionDenied, SchedulingError
from notifications import (
    InMemoryNotificationCenter,
    LocalNotificationCenter,
    NotificationRequest,
    PermissionStatus,
)


def _request(clock, hours=30, correlation_id="a-1", title="Assignment Reminder"):
    return NotificationRequest(
        trigger_at=clock.now + timedelta(hours=hours),
        title=title,
        body="Essay is due tomorrow!",
        correlation_id=correlation_id,
    )


def test_request_permission_resolves_undetermined(clock) -> None:
    granting = InMemoryNotificationCenter(clock=clock)
    refusing = InMemoryNotificationCenter(clock=clock, grant_on_request=False)
    assert asyncio.run(granting.request_permission()) == PermissionStatus.GRANTED
    assert asyncio.run(refusing.request_permission()) == PermissionStatus.DENIED

    refusing.set_permission(PermissionStatus.GRANTED)
    assert asyncio.run(refusing.request_permission()) == PermissionStatus.GRANTED


def test_schedule_requires_permission(clock) -> None:
    center = InMemoryNotificationCenter(clock=clock)
    with pytest.raises(PermissionDenied):
        asyncio.run(center.schedule(_request(clock)))
    assert center.pending() == []


@pytest.mark.parametrize("hours,title", [(-1, "Reminder"), (0, "Reminder"), (5, "  ")])
def test_schedule_rejects_malformed_requests(clock, hours, title) -> None:
    center = InMemoryNotificationCenter(permission=PermissionStatus.GRANTED, clock=clock)
    with pytest.raises(SchedulingError) as excinfo:
        asyncio.run(center.schedule(_request(clock, hours=hours, title=title)))
    assert excinfo.value.assignment_id == "a-1"


def test_memory_center_fires_due_requests_once(clock) -> None:
    delivered = []
    center = InMemoryNotificationCenter(
        permission=PermissionStatus.GRANTED, clock=clock, on_delivered=delivered.append
    )
    asyncio.run(center.schedule(_request(clock, hours=2, correlation_id="soon")))
    asyncio.run(center.schedule(_request(clock, hours=30, correlation_id="later")))

    clock.advance(timedelta(hours=3))
    assert [r.correlation_id for r in center.fire_due()] == ["soon"]
    assert center.fire_due() == []
    assert [r.correlation_id for r in delivered] == ["soon"]
    assert [r.correlation_id for r in center.pending()] == ["later"]


def test_memory_center_cancel_all_counts(clock) -> None:
    center = InMemoryNotificationCenter(permission=PermissionStatus.GRANTED, clock=clock)
    asyncio.run(center.schedule(_request(clock, correlation_id="x")))
    asyncio.run(center.schedule(_request(clock, correlation_id="y")))
    assert asyncio.run(center.cancel_all()) == 2
    assert asyncio.run(center.cancel_all()) == 0


@pytest.fixture
def local_center(clock):
    center = LocalNotificationCenter(permission=PermissionStatus.GRANTED, clock=clock)
    yield center
    center.shutdown()


def test_local_center_holds_one_shot_jobs(local_center, clock) -> None:
    request = _request(clock)
    ack = asyncio.run(local_center.schedule(request))
    assert ack
    assert local_center.pending() == [request]

    assert asyncio.run(local_center.cancel_all()) == 1
    assert local_center.pending() == []


def test_local_center_rejects_past_trigger(local_center, clock) -> None:
    with pytest.raises(SchedulingError):
        asyncio.run(local_center.schedule(_request(clock, hours=-3)))
    assert local_center.pending() == []


def test_local_center_delivery_records_and_calls_back(local_center, clock) -> None:
    seen = []
    local_center.on_delivered = seen.append
    request = _request(clock)
    local_center._deliver(request)
    assert local_center.delivered == [request]
    assert seen == [request]

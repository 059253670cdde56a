from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

from scheduler import REMINDER_LEAD, plan_reminders, reminder_for

NOW = datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)


@dataclass
class Item:
    title: str
    due_date: datetime
    completed: bool = False
    id: UUID = None

    def __post_init__(self) -> None:
        if self.id is None:
            self.id = uuid4()


def test_incomplete_assignment_beyond_lead_gets_one_reminder() -> None:
    item = Item("Quadratic equations", NOW + timedelta(hours=48))
    reminders = plan_reminders([item], NOW)
    assert len(reminders) == 1
    assert reminders[0].assignment_id == item.id
    assert reminders[0].trigger_at == NOW + timedelta(hours=24)
    assert "Quadratic equations" in reminders[0].body


def test_completed_assignment_is_skipped() -> None:
    item = Item("Lab report", NOW + timedelta(days=5), completed=True)
    assert plan_reminders([item], NOW) == []


def test_due_within_lead_or_overdue_is_skipped() -> None:
    items = [
        Item("Due soon", NOW + timedelta(hours=10)),
        Item("Overdue", NOW - timedelta(days=2)),
        Item("Due now", NOW),
    ]
    assert plan_reminders(items, NOW) == []


def test_trigger_exactly_now_is_not_in_the_future() -> None:
    item = Item("Boundary", NOW + REMINDER_LEAD)
    assert reminder_for(item, NOW) is None
    assert reminder_for(item, NOW - timedelta(seconds=1)) is not None


def test_naive_due_date_is_treated_as_utc() -> None:
    item = Item("Naive", datetime(2026, 3, 5, 9, 0))
    reminder = reminder_for(item, NOW)
    assert reminder.trigger_at == datetime(2026, 3, 4, 9, 0, tzinfo=timezone.utc)


def test_custom_lead_interval() -> None:
    item = Item("Essay", NOW + timedelta(hours=5))
    reminder = reminder_for(item, NOW, lead=timedelta(hours=2))
    assert reminder.trigger_at == NOW + timedelta(hours=3)


def test_request_carries_assignment_id_for_correlation() -> None:
    item = Item("History project", NOW + timedelta(days=3))
    request = reminder_for(item, NOW).to_request()
    assert request.correlation_id == str(item.id)
    assert request.title == "Assignment Reminder 📚"
    assert request.body == "History project is due tomorrow!"


def test_mixed_list_only_plans_eligible_items() -> None:
    eligible = Item("Eligible", NOW + timedelta(days=3))
    items = [
        Item("Done", NOW + timedelta(days=3), completed=True),
        eligible,
        Item("Too close", NOW + timedelta(hours=23)),
    ]
    assert [r.assignment_id for r in plan_reminders(items, NOW)] == [eligible.id]

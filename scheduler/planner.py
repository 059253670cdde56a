"""Pure reminder planning: current assignments in, desired reminders out."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, List, Optional, Protocol
from uuid import UUID

from core.clock import ensure_aware
from notifications import NotificationRequest

REMINDER_LEAD = timedelta(hours=24)
REMINDER_TITLE = "Assignment Reminder 📚"


class Schedulable(Protocol):
    id: UUID
    title: str
    due_date: datetime
    completed: bool


@dataclass(frozen=True)
class Reminder:
    assignment_id: UUID
    trigger_at: datetime
    title: str
    body: str

    def to_request(self) -> NotificationRequest:
        return NotificationRequest(
            trigger_at=self.trigger_at,
            title=self.title,
            body=self.body,
            correlation_id=str(self.assignment_id),
        )


def trigger_time(due_date: datetime, lead: timedelta = REMINDER_LEAD) -> datetime:
    return ensure_aware(due_date) - lead


def reminder_for(
    assignment: Schedulable, now: datetime, lead: timedelta = REMINDER_LEAD
) -> Optional[Reminder]:
    """Return the reminder an assignment should have right now, or None.

    Completed assignments never get one. Neither do assignments whose trigger
    is not strictly after ``now``, which covers overdue work and anything due
    within the lead interval.
    """
    if assignment.completed:
        return None
    trigger = trigger_time(assignment.due_date, lead)
    if trigger <= ensure_aware(now):
        return None
    return Reminder(
        assignment_id=assignment.id,
        trigger_at=trigger,
        title=REMINDER_TITLE,
        body=f"{assignment.title} is due tomorrow!",
    )


def plan_reminders(
    assignments: Iterable[Schedulable], now: datetime, lead: timedelta = REMINDER_LEAD
) -> List[Reminder]:
    """At most one reminder per assignment; order carries no meaning."""

    reminders: List[Reminder] = []
    for assignment in assignments:
        reminder = reminder_for(assignment, now, lead)
        if reminder is not None:
            reminders.append(reminder)
    return reminders


__all__ = ["REMINDER_LEAD", "REMINDER_TITLE", "Reminder", "Schedulable", "plan_reminders", "reminder_for", "trigger_time"]

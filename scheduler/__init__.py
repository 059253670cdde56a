"""Reminder planning and reconciliation."""

from .planner import REMINDER_LEAD, Reminder, plan_reminders, reminder_for
from .service import ReconcileReport, ReconcileStatus, ReminderScheduler

__all__ = [
    "REMINDER_LEAD",
    "ReconcileReport",
    "ReconcileStatus",
    "Reminder",
    "ReminderScheduler",
    "plan_reminders",
    "reminder_for",
]

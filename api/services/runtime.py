"""Module-level singletons used by the API routes.

The store is the source of truth; the scheduler subscribes to it and is the
only writer to the notification centre.
"""

from __future__ import annotations

from api.services.assignment_store import AssignmentStore
from api.services.seed import demo_assignments
from core.clock import utcnow
from core.settings import get_settings
from notifications import build_notification_center
from scheduler import ReminderScheduler

settings = get_settings()

notification_center = build_notification_center(settings)

assignment_store = AssignmentStore()
reminder_scheduler = ReminderScheduler(
    notification_center,
    source=assignment_store.snapshot,
    lead=settings.reminder_lead,
)
assignment_store.subscribe(reminder_scheduler.reconcile)

if settings.seed_demo_data:
    assignment_store.seed(demo_assignments(utcnow()))

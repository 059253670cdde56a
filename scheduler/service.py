"""Reconcile pending reminders in the notification centre with the assignment list."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence

from core.clock import utcnow
from core.errors import NotificationError, PermissionDenied, SchedulingError
from notifications import NotificationCenter, PermissionStatus

from .planner import REMINDER_LEAD, Reminder, Schedulable, plan_reminders

logger = logging.getLogger(__name__)


class ReconcileStatus(str, Enum):
    OK = "ok"
    PARTIAL = "partial"
    PERMISSION_DENIED = "permission_denied"
    FAILED = "failed"


@dataclass
class ReconcileReport:
    """Outcome of one reconciliation pass."""

    started_at: datetime
    finished_at: Optional[datetime] = None
    status: ReconcileStatus = ReconcileStatus.OK
    cancelled: int = 0
    scheduled: List[Reminder] = field(default_factory=list)
    errors: Dict[str, str] = field(default_factory=dict)
    error: Optional[NotificationError] = None

    @property
    def permission_denied(self) -> bool:
        return self.status == ReconcileStatus.PERMISSION_DENIED


class ReminderScheduler:
    """Cancel every pending reminder, then schedule the planned set again.

    Passes never overlap. A caller that asked for a pass while another one
    was running is satisfied by any later pass that read the assignment list
    after the request was made, so bursts of mutations collapse into one pass
    against the latest state instead of replaying stale ones.
    """

    def __init__(
        self,
        center: NotificationCenter,
        source: Callable[[], Sequence[Schedulable]],
        lead: timedelta = REMINDER_LEAD,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self.center = center
        self.source = source
        self.lead = lead
        self.clock = clock
        self.last_report: Optional[ReconcileReport] = None
        self.passes = 0
        self._lock = asyncio.Lock()
        self._requested = 0
        self._covered = 0

    async def reconcile(self) -> ReconcileReport:
        self._requested += 1
        ticket = self._requested
        async with self._lock:
            if self._covered >= ticket and self.last_report is not None:
                logger.debug("Reconcile request %s already covered by the last pass", ticket)
                return self.last_report
            report = await self._run_pass()
            self.last_report = report
            return report

    async def _run_pass(self) -> ReconcileReport:
        self.passes += 1
        report = ReconcileReport(started_at=self.clock())

        try:
            report.cancelled = await self.center.cancel_all()
        except NotificationError as exc:
            logger.error("Could not clear pending reminders, skipping scheduling: %s", exc)
            report.status = ReconcileStatus.FAILED
            report.error = exc
            report.finished_at = self.clock()
            return report
        except Exception as exc:
            logger.exception("Notification centre crashed while clearing reminders")
            report.status = ReconcileStatus.FAILED
            report.error = NotificationError(f"Failed to cancel pending reminders: {exc}")
            report.finished_at = self.clock()
            return report

        permission = await self.center.get_permission()
        if permission == PermissionStatus.UNDETERMINED:
            permission = await self.center.request_permission()

        # Read the list only now so the pass reflects every mutation made
        # while cancel-all was in flight.
        covered = self._requested
        assignments = tuple(self.source())

        if permission != PermissionStatus.GRANTED:
            logger.warning("Notification permission is %s, no reminders scheduled", permission.value)
            report.status = ReconcileStatus.PERMISSION_DENIED
            report.error = PermissionDenied(f"Notification permission is {permission.value}")
        else:
            await self._submit(plan_reminders(assignments, self.clock(), self.lead), report)

        self._covered = covered
        report.finished_at = self.clock()
        logger.info(
            "Reconciled reminders: status=%s cancelled=%d scheduled=%d failed=%d",
            report.status.value,
            report.cancelled,
            len(report.scheduled),
            len(report.errors),
        )
        return report

    async def _submit(self, reminders: List[Reminder], report: ReconcileReport) -> None:
        for reminder in reminders:
            try:
                await self.center.schedule(reminder.to_request())
            except PermissionDenied as exc:
                # Revoked mid-pass; the rest would be rejected the same way.
                logger.warning("Notification permission revoked during reconciliation")
                report.status = ReconcileStatus.PERMISSION_DENIED
                report.error = exc
                return
            except SchedulingError as exc:
                logger.warning("Reminder for assignment %s rejected: %s", reminder.assignment_id, exc)
                report.errors[str(reminder.assignment_id)] = str(exc)
                report.status = ReconcileStatus.PARTIAL
                continue
            except Exception as exc:
                logger.exception("Reminder for assignment %s could not be submitted", reminder.assignment_id)
                report.errors[str(reminder.assignment_id)] = f"Unexpected error: {exc}"
                report.status = ReconcileStatus.PARTIAL
                continue
            report.scheduled.append(reminder)


__all__ = ["ReconcileReport", "ReconcileStatus", "ReminderScheduler"]

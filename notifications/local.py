"""In-process notification centre backed by APScheduler one-shot jobs.

Each reminder becomes a ``date`` job on a background scheduler. When the job
runs, the reminder is presented (logged and recorded) and APScheduler drops
the job, so a fired reminder is consumed and never repeats.
"""

from __future__ import annotations

import logging
from datetime import timezone
from typing import List, Optional
from uuid import uuid4

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.schedulers.base import BaseScheduler

from core.errors import NotificationError, SchedulingError

from .base import NotificationCenter, NotificationRequest

logger = logging.getLogger(__name__)


class LocalNotificationCenter(NotificationCenter):
    def __init__(self, *args, scheduler: Optional[BaseScheduler] = None, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._scheduler = scheduler or BackgroundScheduler(timezone=timezone.utc)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self) -> None:
        if self._scheduler.running:
            logger.info("Notification scheduler already running, skipping start")
            return
        self._scheduler.start()
        logger.info("Notification scheduler started")

    def shutdown(self) -> None:
        if self._scheduler.running:
            self._scheduler.shutdown(wait=False)
            logger.info("Notification scheduler stopped")

    # ------------------------------------------------------------------
    # NotificationCenter
    # ------------------------------------------------------------------
    async def cancel_all(self) -> int:
        count = len(self._scheduler.get_jobs())
        try:
            self._scheduler.remove_all_jobs()
        except Exception as exc:
            raise NotificationError(f"Failed to cancel pending reminders: {exc}") from exc
        return count

    async def schedule(self, request: NotificationRequest) -> str:
        self._check_request(request)
        ack = uuid4().hex
        try:
            self._scheduler.add_job(
                self._deliver,
                trigger="date",
                run_date=request.trigger_at,
                args=[request],
                id=ack,
                name=f"reminder:{request.correlation_id}",
                misfire_grace_time=None,  # deliver late rather than never
                coalesce=True,
            )
        except (TypeError, ValueError) as exc:
            raise SchedulingError(f"Invalid reminder: {exc}", request.correlation_id) from exc
        return ack

    def pending(self) -> List[NotificationRequest]:
        return [job.args[0] for job in self._scheduler.get_jobs()]

    # ------------------------------------------------------------------
    # Delivery
    # ------------------------------------------------------------------
    def _deliver(self, request: NotificationRequest) -> None:
        logger.info(
            "Delivering reminder for assignment %s: %s - %s",
            request.correlation_id,
            request.title,
            request.body,
        )
        self._record_delivery(request)


__all__ = ["LocalNotificationCenter"]

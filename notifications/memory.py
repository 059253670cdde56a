"""Recording notification centre that keeps pending alerts in a dict.

Used by default when no device is attached and as the fake in tests. Time
only moves when :meth:`fire_due` is called, so delivery is deterministic.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, Set, Tuple
from uuid import uuid4

from core.errors import SchedulingError

from .base import NotificationCenter, NotificationRequest


class InMemoryNotificationCenter(NotificationCenter):
    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._pending: Dict[str, NotificationRequest] = {}
        self.calls: List[Tuple[str, Optional[str]]] = []
        self.rejected_ids: Set[str] = set()

    async def cancel_all(self) -> int:
        count = len(self._pending)
        self._pending.clear()
        self.calls.append(("cancel_all", None))
        return count

    async def schedule(self, request: NotificationRequest) -> str:
        self.calls.append(("schedule", request.correlation_id))
        self._check_request(request)
        if request.correlation_id in self.rejected_ids:
            raise SchedulingError("Rejected by notification subsystem", request.correlation_id)
        ack = uuid4().hex
        self._pending[ack] = request
        return ack

    def pending(self) -> List[NotificationRequest]:
        return list(self._pending.values())

    def fire_due(self, now: Optional[datetime] = None) -> List[NotificationRequest]:
        """Deliver and consume every pending alert whose trigger has passed."""

        now = now or self.clock()
        fired = [(ack, req) for ack, req in self._pending.items() if req.trigger_at <= now]
        for ack, request in fired:
            del self._pending[ack]
            self._record_delivery(request)
        return [request for _, request in fired]


__all__ = ["InMemoryNotificationCenter"]

"""Contract for the device notification subsystem consumed by the scheduler."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, List, Optional

from core.clock import utcnow
from core.errors import PermissionDenied, SchedulingError


class PermissionStatus(str, Enum):
    GRANTED = "granted"
    DENIED = "denied"
    UNDETERMINED = "undetermined"


@dataclass(frozen=True)
class NotificationRequest:
    """A one-shot alert to be presented at or after ``trigger_at``."""

    trigger_at: datetime
    title: str
    body: str
    correlation_id: str


DeliveryCallback = Callable[[NotificationRequest], None]


class NotificationCenter(abc.ABC):
    """Base class for notification subsystems.

    Permission handling is shared: an undetermined status resolves on the
    first :meth:`request_permission` call to granted or denied depending on
    ``grant_on_request``, standing in for the OS prompt.
    """

    def __init__(
        self,
        permission: PermissionStatus = PermissionStatus.UNDETERMINED,
        grant_on_request: bool = True,
        clock: Callable[[], datetime] = utcnow,
        on_delivered: Optional[DeliveryCallback] = None,
    ) -> None:
        self._permission = PermissionStatus(permission)
        self.grant_on_request = grant_on_request
        self.clock = clock
        self.on_delivered = on_delivered
        self.delivered: List[NotificationRequest] = []

    # ------------------------------------------------------------------
    # Permission
    # ------------------------------------------------------------------
    async def get_permission(self) -> PermissionStatus:
        return self._permission

    async def request_permission(self) -> PermissionStatus:
        if self._permission == PermissionStatus.UNDETERMINED:
            self._permission = (
                PermissionStatus.GRANTED if self.grant_on_request else PermissionStatus.DENIED
            )
        return self._permission

    def set_permission(self, status: PermissionStatus) -> None:
        """Simulate the user flipping the permission switch in system settings."""

        self._permission = PermissionStatus(status)

    # ------------------------------------------------------------------
    # Pending reminders
    # ------------------------------------------------------------------
    @abc.abstractmethod
    async def cancel_all(self) -> int:
        """Remove every pending notification and return how many were removed."""

    @abc.abstractmethod
    async def schedule(self, request: NotificationRequest) -> str:
        """Submit a one-shot notification and return its acknowledgement id."""

    @abc.abstractmethod
    def pending(self) -> List[NotificationRequest]:
        """Notifications submitted but not yet delivered."""

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _check_request(self, request: NotificationRequest) -> None:
        if self._permission != PermissionStatus.GRANTED:
            raise PermissionDenied("Notification permission has not been granted")
        if request.trigger_at.tzinfo is None:
            raise SchedulingError("Trigger time must be timezone-aware", request.correlation_id)
        if request.trigger_at <= self.clock():
            raise SchedulingError(
                f"Trigger time {request.trigger_at.isoformat()} is not in the future",
                request.correlation_id,
            )
        if not request.title.strip():
            raise SchedulingError("Notification title must not be empty", request.correlation_id)

    def _record_delivery(self, request: NotificationRequest) -> None:
        self.delivered.append(request)
        if self.on_delivered is not None:
            self.on_delivered(request)


__all__ = [
    "DeliveryCallback",
    "NotificationCenter",
    "NotificationRequest",
    "PermissionStatus",
]

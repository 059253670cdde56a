"""Notification subsystem adapters."""

from core.settings import Settings

from .base import NotificationCenter, NotificationRequest, PermissionStatus
from .local import LocalNotificationCenter
from .memory import InMemoryNotificationCenter


def build_notification_center(settings: Settings) -> NotificationCenter:
    """Pick the notification centre configured for this process."""

    permission = PermissionStatus(settings.notification_permission)
    if settings.resolved_notification_mode == "local":
        return LocalNotificationCenter(permission=permission)
    return InMemoryNotificationCenter(permission=permission)


__all__ = [
    "InMemoryNotificationCenter",
    "LocalNotificationCenter",
    "NotificationCenter",
    "NotificationRequest",
    "PermissionStatus",
    "build_notification_center",
]

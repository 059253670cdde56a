"""Error taxonomy shared by the assignment store and reminder scheduling."""

from __future__ import annotations

from typing import Optional
from uuid import UUID


class StudyPlannerError(Exception):
    """Base class for all application errors."""


class ValidationError(StudyPlannerError):
    """A mutation was rejected before any state change because its input is malformed."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class NotFoundError(StudyPlannerError, KeyError):
    """A mutation or lookup referenced an assignment id that is not in the store."""

    def __init__(self, assignment_id: UUID) -> None:
        super().__init__(f"Assignment {assignment_id} not found")
        self.assignment_id = assignment_id

    def __str__(self) -> str:
        return self.args[0]


class NotificationError(StudyPlannerError):
    """The notification subsystem reported a failure."""


class PermissionDenied(NotificationError):
    """Permission to schedule notifications has not been granted."""


class SchedulingError(NotificationError):
    """A single reminder submission was rejected by the notification subsystem."""

    def __init__(self, message: str, assignment_id: Optional[str] = None) -> None:
        super().__init__(message)
        self.assignment_id = assignment_id


__all__ = [
    "StudyPlannerError",
    "ValidationError",
    "NotFoundError",
    "NotificationError",
    "PermissionDenied",
    "SchedulingError",
]

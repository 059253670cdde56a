"""Pydantic data models used by the FastAPI layer.

The schemas are the HTTP face of the in-memory ``AssignmentStore`` and the
reminder scheduler. They stand in for the screens of the mobile client, which
only ever needs these shapes to render its lists and badges.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, Field


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class AssignmentFilter(str, Enum):
    """Tabs on the assignments screen."""

    ALL = "all"
    PENDING = "pending"
    COMPLETED = "completed"


class AssignmentCreateRequest(BaseModel):
    title: str = Field(..., description="Short assignment title, required")
    subject: str = Field(..., description="Free-form subject label, required")
    description: str = ""
    due_date: datetime
    priority: Priority = Priority.MEDIUM


class AssignmentUpdateRequest(BaseModel):
    title: Optional[str] = None
    subject: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    priority: Optional[Priority] = None


class AssignmentResponse(BaseModel):
    id: UUID
    title: str
    subject: str
    description: str
    due_date: datetime
    due_label: str
    completed: bool
    priority: Priority
    created_at: datetime
    updated_at: datetime


class ReminderResponse(BaseModel):
    assignment_id: str
    trigger_at: datetime
    title: str
    body: str


class ReminderSyncResponse(BaseModel):
    """Summary of the reconciliation pass that followed a mutation."""

    status: str
    cancelled: int
    scheduled: int
    errors: Dict[str, str] = Field(default_factory=dict)
    detail: Optional[str] = None


class AssignmentMutationResponse(BaseModel):
    assignment: AssignmentResponse
    reminder_sync: Optional[ReminderSyncResponse] = None


class AssignmentDeleteResponse(BaseModel):
    deleted: UUID
    reminder_sync: Optional[ReminderSyncResponse] = None


class AssignmentListResponse(BaseModel):
    status: AssignmentFilter
    assignments: List[AssignmentResponse]


class AssignmentSummaryResponse(BaseModel):
    pending: int
    completed: int
    total: int
    upcoming: List[AssignmentResponse]


class ReconcileResponse(BaseModel):
    sync: ReminderSyncResponse
    reminders: List[ReminderResponse]


class PermissionRequest(BaseModel):
    status: str = Field(..., pattern="^(granted|denied|undetermined)$")


class PermissionResponse(BaseModel):
    status: str


__all__ = [
    "Priority",
    "AssignmentFilter",
    "AssignmentCreateRequest",
    "AssignmentUpdateRequest",
    "AssignmentResponse",
    "AssignmentMutationResponse",
    "AssignmentDeleteResponse",
    "AssignmentListResponse",
    "AssignmentSummaryResponse",
    "ReminderResponse",
    "ReminderSyncResponse",
    "ReconcileResponse",
    "PermissionRequest",
    "PermissionResponse",
]

"""HTTP routes for inspecting and re-syncing deadline reminders."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter

from api.models.schemas import (
    PermissionRequest,
    PermissionResponse,
    ReconcileResponse,
    ReminderResponse,
)
from api.routes.assignments import sync_summary
from api.services.runtime import notification_center, reminder_scheduler
from notifications import PermissionStatus

router = APIRouter(prefix="/api", tags=["reminders"])


@router.get("/reminders", response_model=List[ReminderResponse])
def list_reminders() -> List[ReminderResponse]:
    """Reminders currently pending in the notification centre, soonest first."""

    pending = sorted(notification_center.pending(), key=lambda request: request.trigger_at)
    return [
        ReminderResponse(
            assignment_id=request.correlation_id,
            trigger_at=request.trigger_at,
            title=request.title,
            body=request.body,
        )
        for request in pending
    ]


@router.post("/reminders/reconcile", response_model=ReconcileResponse)
async def reconcile_reminders() -> ReconcileResponse:
    """Run a reconciliation pass, e.g. after notification permission was granted."""

    report = await reminder_scheduler.reconcile()
    return ReconcileResponse(sync=sync_summary(report), reminders=list_reminders())


@router.get("/notifications/permission", response_model=PermissionResponse)
async def get_permission() -> PermissionResponse:
    status = await notification_center.get_permission()
    return PermissionResponse(status=status.value)


@router.put("/notifications/permission", response_model=PermissionResponse)
def set_permission(request: PermissionRequest) -> PermissionResponse:
    """Simulate the user changing the notification switch in system settings."""

    notification_center.set_permission(PermissionStatus(request.status))
    return PermissionResponse(status=request.status)

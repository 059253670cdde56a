"""HTTP routes for the assignment list.

Every mutation goes through the ``AssignmentStore`` and returns only after the
reminder scheduler has reconciled, so the response can report how reminder
syncing went. Scheduling problems never fail the request: the assignment
change has already happened.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query

from api.models.schemas import (
    AssignmentCreateRequest,
    AssignmentDeleteResponse,
    AssignmentFilter,
    AssignmentListResponse,
    AssignmentMutationResponse,
    AssignmentResponse,
    AssignmentSummaryResponse,
    AssignmentUpdateRequest,
    ReminderSyncResponse,
)
from api.services.assignment_store import AssignmentRecord
from api.services.runtime import assignment_store
from core.clock import describe_due, utcnow
from core.errors import ValidationError

router = APIRouter(prefix="/api", tags=["assignments"])


@router.get("/assignments", response_model=AssignmentListResponse)
def list_assignments(status: AssignmentFilter = AssignmentFilter.ALL) -> AssignmentListResponse:
    """Return assignments for one of the screen's filter tabs."""

    now = utcnow()
    return AssignmentListResponse(
        status=status,
        assignments=[to_response(record, now) for record in assignment_store.list(status)],
    )


@router.get("/assignments/summary", response_model=AssignmentSummaryResponse)
def assignment_summary(limit: int = Query(3, ge=0, le=50)) -> AssignmentSummaryResponse:
    """Counts and the next few assignments for the home screen."""

    now = utcnow()
    counts = assignment_store.counts()
    return AssignmentSummaryResponse(
        pending=counts["pending"],
        completed=counts["completed"],
        total=counts["total"],
        upcoming=[to_response(record, now) for record in assignment_store.upcoming(now, limit)],
    )


@router.post("/assignments", response_model=AssignmentMutationResponse, status_code=201)
async def create_assignment(request: AssignmentCreateRequest) -> AssignmentMutationResponse:
    """Add an assignment and arm its reminder if it is far enough out."""

    try:
        record = await assignment_store.create(
            title=request.title,
            subject=request.subject,
            description=request.description,
            due_date=request.due_date,
            priority=request.priority,
        )
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return _mutation_response(record)


@router.get("/assignments/{assignment_id}", response_model=AssignmentResponse)
def get_assignment(assignment_id: str) -> AssignmentResponse:
    try:
        record = assignment_store.get(_parse_uuid(assignment_id))
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return to_response(record, utcnow())


@router.patch("/assignments/{assignment_id}", response_model=AssignmentMutationResponse)
async def edit_assignment(assignment_id: str, request: AssignmentUpdateRequest) -> AssignmentMutationResponse:
    """Update any subset of the editable fields."""

    try:
        record = await assignment_store.edit(
            _parse_uuid(assignment_id), **request.model_dump(exclude_unset=True)
        )
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _mutation_response(record)


@router.post("/assignments/{assignment_id}/toggle", response_model=AssignmentMutationResponse)
async def toggle_assignment(assignment_id: str) -> AssignmentMutationResponse:
    """Flip the completion flag."""

    try:
        record = await assignment_store.toggle_complete(_parse_uuid(assignment_id))
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _mutation_response(record)


@router.delete("/assignments/{assignment_id}", response_model=AssignmentDeleteResponse)
async def delete_assignment(assignment_id: str) -> AssignmentDeleteResponse:
    try:
        record = await assignment_store.delete(_parse_uuid(assignment_id))
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return AssignmentDeleteResponse(
        deleted=record.id, reminder_sync=sync_summary(assignment_store.last_report)
    )


def to_response(record: AssignmentRecord, now) -> AssignmentResponse:
    return AssignmentResponse(
        id=record.id,
        title=record.title,
        subject=record.subject,
        description=record.description,
        due_date=record.due_date,
        due_label=describe_due(record.due_date, now),
        completed=record.completed,
        priority=record.priority,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def sync_summary(report) -> Optional[ReminderSyncResponse]:
    if report is None:
        return None
    return ReminderSyncResponse(
        status=report.status.value,
        cancelled=report.cancelled,
        scheduled=len(report.scheduled),
        errors=dict(report.errors),
        detail=str(report.error) if report.error else None,
    )


def _mutation_response(record: AssignmentRecord) -> AssignmentMutationResponse:
    return AssignmentMutationResponse(
        assignment=to_response(record, utcnow()),
        reminder_sync=sync_summary(assignment_store.last_report),
    )


def _parse_uuid(value: str) -> UUID:
    try:
        return UUID(value)
    except ValueError as exc:
        raise HTTPException(status_code=404, detail=f"Assignment {value} not found") from exc

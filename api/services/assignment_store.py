"""In-memory assignment collection.

State lives for the lifetime of the process only. Every successful mutation
awaits the registered observers (the reminder scheduler) before returning, so
by the time a caller sees the result the pending reminders already match the
new list.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional, Tuple
from uuid import UUID, uuid4

from api.models.schemas import AssignmentFilter, Priority
from core.clock import ensure_aware, utcnow
from core.errors import NotFoundError, ValidationError


@dataclass
class AssignmentRecord:
    """Internal representation of an assignment."""

    id: UUID
    title: str
    subject: str
    due_date: datetime
    description: str = ""
    completed: bool = False
    priority: Priority = Priority.MEDIUM
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)


Observer = Callable[[], Awaitable[Any]]

EDITABLE_FIELDS = frozenset({"title", "subject", "description", "due_date", "priority"})


class AssignmentStore:
    """Mutable assignment repository with change notification."""

    def __init__(self, clock: Callable[[], datetime] = utcnow) -> None:
        self._assignments: Dict[UUID, AssignmentRecord] = {}
        self._observers: List[Observer] = []
        self.clock = clock
        self.last_report: Optional[Any] = None

    def subscribe(self, observer: Observer) -> None:
        self._observers.append(observer)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    async def create(
        self,
        title: str,
        subject: str,
        due_date: datetime,
        description: str = "",
        priority: Priority | str = Priority.MEDIUM,
    ) -> AssignmentRecord:
        now = self.clock()
        record = AssignmentRecord(
            id=uuid4(),
            title=_require_text(title, "title"),
            subject=_require_text(subject, "subject"),
            description=_optional_text(description, "description"),
            due_date=_coerce_due_date(due_date),
            priority=_coerce_priority(priority),
            created_at=now,
            updated_at=now,
        )
        self._assignments[record.id] = record
        await self._notify()
        return record

    async def toggle_complete(self, assignment_id: UUID) -> AssignmentRecord:
        record = self.get(assignment_id)
        record.completed = not record.completed
        record.updated_at = self.clock()
        await self._notify()
        return record

    async def delete(self, assignment_id: UUID) -> AssignmentRecord:
        record = self.get(assignment_id)
        del self._assignments[assignment_id]
        await self._notify()
        return record

    async def edit(self, assignment_id: UUID, **fields: Any) -> AssignmentRecord:
        record = self.get(assignment_id)
        unknown = set(fields) - EDITABLE_FIELDS
        if unknown:
            raise ValidationError(f"Cannot edit field(s): {', '.join(sorted(unknown))}")

        changes: Dict[str, Any] = {}
        if "title" in fields:
            changes["title"] = _require_text(fields["title"], "title")
        if "subject" in fields:
            changes["subject"] = _require_text(fields["subject"], "subject")
        if "description" in fields:
            changes["description"] = _optional_text(fields["description"], "description")
        if "due_date" in fields:
            changes["due_date"] = _coerce_due_date(fields["due_date"])
        if "priority" in fields:
            changes["priority"] = _coerce_priority(fields["priority"])

        for name, value in changes.items():
            setattr(record, name, value)
        record.updated_at = self.clock()
        await self._notify()
        return record

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get(self, assignment_id: UUID) -> AssignmentRecord:
        try:
            return self._assignments[assignment_id]
        except KeyError:
            raise NotFoundError(assignment_id) from None

    def list(self, status: AssignmentFilter | str = AssignmentFilter.ALL) -> List[AssignmentRecord]:
        status = AssignmentFilter(status)
        records = list(self._assignments.values())
        if status == AssignmentFilter.PENDING:
            return [record for record in records if not record.completed]
        if status == AssignmentFilter.COMPLETED:
            return [record for record in records if record.completed]
        return records

    def counts(self) -> Dict[str, int]:
        pending = sum(1 for record in self._assignments.values() if not record.completed)
        total = len(self._assignments)
        return {"pending": pending, "completed": total - pending, "total": total}

    def upcoming(self, now: Optional[datetime] = None, limit: int = 3) -> List[AssignmentRecord]:
        """Incomplete assignments not yet past due, soonest first."""

        now = ensure_aware(now or self.clock())
        records = [
            record
            for record in self._assignments.values()
            if not record.completed and record.due_date >= now
        ]
        records.sort(key=lambda record: record.due_date)
        return records[:limit]

    def snapshot(self) -> Tuple[AssignmentRecord, ...]:
        """Copies of the current records, safe to hold across awaits."""

        return tuple(replace(record) for record in self._assignments.values())

    def __len__(self) -> int:
        return len(self._assignments)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def seed(self, records: Iterable[AssignmentRecord]) -> None:
        """Load records without notifying observers; reconcile afterwards."""

        for record in records:
            self._assignments[record.id] = record

    async def _notify(self) -> None:
        for observer in self._observers:
            self.last_report = await observer()


def _require_text(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} must not be empty", field=field_name)
    return value.strip()


def _optional_text(value: Any, field_name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text", field=field_name)
    return value


def _coerce_due_date(value: Any) -> datetime:
    if not isinstance(value, datetime):
        raise ValidationError("due_date must be a datetime", field="due_date")
    return ensure_aware(value)


def _coerce_priority(value: Any) -> Priority:
    try:
        return Priority(value)
    except ValueError:
        raise ValidationError(
            f"priority must be one of: {', '.join(p.value for p in Priority)}", field="priority"
        ) from None

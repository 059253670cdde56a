"""Demo assignments loaded into a fresh process."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List
from uuid import uuid4

from api.models.schemas import Priority
from api.services.assignment_store import AssignmentRecord


@dataclass
class SeedAssignment:
    title: str
    subject: str
    description: str
    due_in: timedelta
    completed: bool
    priority: Priority


SEED_ASSIGNMENTS: List[SeedAssignment] = [
    SeedAssignment(
        title="Mathematics Assignment - Quadratic Equations",
        subject="Mathematics",
        description="Solve problems 1-20 from chapter 5",
        due_in=timedelta(days=2),
        completed=False,
        priority=Priority.HIGH,
    ),
    SeedAssignment(
        title="English Essay - Ghanaian Literature",
        subject="English",
        description="Write a 500-word essay on Ama Ata Aidoo",
        due_in=timedelta(days=4),
        completed=False,
        priority=Priority.MEDIUM,
    ),
    SeedAssignment(
        title="Science Lab Report - Chemistry",
        subject="Science",
        description="Complete lab report on acid-base reactions",
        due_in=timedelta(days=1),
        completed=False,
        priority=Priority.HIGH,
    ),
    SeedAssignment(
        title="History Project - Independence",
        subject="History",
        description="Research Ghana's independence movement",
        due_in=timedelta(days=7),
        completed=True,
        priority=Priority.LOW,
    ),
]


def demo_assignments(now: datetime) -> List[AssignmentRecord]:
    """Materialise the seed list with due dates relative to ``now``."""

    return [
        AssignmentRecord(
            id=uuid4(),
            title=seed.title,
            subject=seed.subject,
            description=seed.description,
            due_date=now + seed.due_in,
            completed=seed.completed,
            priority=seed.priority,
            created_at=now,
            updated_at=now,
        )
        for seed in SEED_ASSIGNMENTS
    ]

"""
Domain entities for the todolist system.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
from uuid import UUID


@dataclass
class Comment:
    """Immutable text annotation attached to a task."""

    task_id: UUID
    value: str
    id: Optional[UUID] = None
    created_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None


@dataclass
class Label:
    """Tag attached to a task, unique per task among non-deleted labels."""

    task_id: UUID
    value: str
    id: Optional[UUID] = None
    created_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    def __post_init__(self):
        self.value = normalize_label(self.value)


@dataclass
class Task:
    """Task entity."""

    value: str
    id: Optional[UUID] = None
    completed: bool = False
    due_date: Optional[datetime] = None

    # Timestamps (assigned by storage)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    # Filled by the orchestration layer, never persisted with the task row
    comments: List[Comment] = field(default_factory=list)
    labels: List[Label] = field(default_factory=list)


def normalize_label(value: str) -> str:
    """Labels are compared and stored in lowercase."""
    return value.lower()

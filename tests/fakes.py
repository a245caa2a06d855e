"""
In-memory repositories implementing the ports, for use case and API tests.
"""

from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, List
from uuid import UUID, uuid4

from adapters.postgres.common import PAGE_SIZE, get_offset
from domain.entities import Comment, Label, Task, normalize_label
from domain.errors import (
    COMMENT_NOT_FOUND,
    LABEL_ALREADY_EXISTS,
    LABEL_NOT_FOUND,
    TASK_NOT_FOUND,
    already_exists,
    not_found,
)
from ports.repository import (
    CommentRepositoryPort,
    LabelRepositoryPort,
    TaskRepositoryPort,
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryTaskRepository(TaskRepositoryPort):
    def __init__(self):
        self.rows: Dict[UUID, Task] = {}

    def _live(self, task_id: UUID) -> Task:
        task = self.rows.get(task_id)
        if task is None or task.deleted_at is not None:
            raise not_found(TASK_NOT_FOUND)
        return task

    async def get_task(self, task_id: UUID) -> Task:
        return replace(self._live(task_id), comments=[], labels=[])

    async def get_tasks(self, page: int) -> List[Task]:
        live = [t for t in self.rows.values() if t.deleted_at is None]
        offset = get_offset(page)
        return [
            replace(t, comments=[], labels=[])
            for t in live[offset : offset + PAGE_SIZE]
        ]

    async def create_task(self, task: Task) -> Task:
        now = _now()
        created = Task(
            id=uuid4(),
            value=task.value,
            due_date=task.due_date,
            created_at=now,
            updated_at=now,
        )
        self.rows[created.id] = created
        return replace(created, comments=[], labels=[])

    async def update_task(self, task: Task) -> None:
        stored = self._live(task.id)
        now = _now()
        stored.value = task.value
        stored.completed = task.completed
        stored.due_date = task.due_date
        stored.updated_at = now
        task.updated_at = now

    async def delete_task(self, task_id: UUID) -> None:
        self._live(task_id).deleted_at = _now()


class InMemoryCommentRepository(CommentRepositoryPort):
    def __init__(self):
        self.rows: Dict[UUID, Comment] = {}

    async def create_comment(self, comment: Comment) -> Comment:
        created = Comment(
            id=uuid4(), task_id=comment.task_id, value=comment.value, created_at=_now()
        )
        self.rows[created.id] = created
        return replace(created)

    async def get_comments_by_task_id(self, task_id: UUID) -> List[Comment]:
        return [
            replace(c)
            for c in self.rows.values()
            if c.task_id == task_id and c.deleted_at is None
        ]

    async def delete_comment_by_task_id_and_comment_id(
        self, task_id: UUID, comment_id: UUID
    ) -> None:
        comment = self.rows.get(comment_id)
        if comment is None or comment.task_id != task_id or comment.deleted_at:
            raise not_found(COMMENT_NOT_FOUND)
        comment.deleted_at = _now()


class InMemoryLabelRepository(LabelRepositoryPort):
    def __init__(self):
        self.rows: Dict[UUID, Label] = {}

    async def create_label(self, label: Label) -> Label:
        value = normalize_label(label.value)
        for existing in self.rows.values():
            if (
                existing.task_id == label.task_id
                and existing.value == value
                and existing.deleted_at is None
            ):
                raise already_exists(LABEL_ALREADY_EXISTS)

        created = Label(id=uuid4(), task_id=label.task_id, value=value, created_at=_now())
        self.rows[created.id] = created
        return replace(created)

    async def get_labels_by_task_id(self, task_id: UUID) -> List[Label]:
        return [
            replace(label)
            for label in self.rows.values()
            if label.task_id == task_id and label.deleted_at is None
        ]

    async def delete_label_by_task_id_and_label_id(
        self, task_id: UUID, label_id: UUID
    ) -> None:
        label = self.rows.get(label_id)
        if label is None or label.task_id != task_id or label.deleted_at:
            raise not_found(LABEL_NOT_FOUND)
        label.deleted_at = _now()

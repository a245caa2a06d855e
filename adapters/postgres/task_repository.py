"""
PostgreSQL Task Repository Adapter.
Includes logging for all CRUD operations; storage errors propagate unchanged.
"""

from datetime import datetime, timezone
from typing import List
from uuid import UUID

from core.database import Database
from domain.entities import Task
from domain.errors import TASK_NOT_FOUND, not_found
from ports.repository import TaskRepositoryPort

from .common import PAGE_SIZE, affected_rows, get_offset

_TASK_COLUMNS = "id, value, completed, due_date, created_at, updated_at, deleted_at"


class PostgresTaskRepository(TaskRepositoryPort):
    """PostgreSQL implementation of TaskRepositoryPort."""

    def __init__(self, database: Database, log):
        self.database = database
        self.log = log

    def _to_entity(self, row) -> Task:
        """Convert a result row to a Task entity."""
        return Task(
            id=row["id"],
            value=row["value"],
            completed=row["completed"],
            due_date=row["due_date"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
            deleted_at=row["deleted_at"],
        )

    async def get_task(self, task_id: UUID) -> Task:
        self.log.debug(f"🔍 Fetching task: task_id={task_id}")

        async with self.database.acquire() as conn:
            row = await conn.fetchrow(
                f"""
                SELECT {_TASK_COLUMNS}
                FROM tasks
                WHERE id = $1 AND deleted_at IS NULL
                LIMIT 1
                """,
                task_id,
            )

        if row is None:
            self.log.warning(f"⚠️ Task not found: task_id={task_id}")
            raise not_found(TASK_NOT_FOUND)

        return self._to_entity(row)

    async def get_tasks(self, page: int) -> List[Task]:
        offset = get_offset(page)
        self.log.debug(f"🔍 Listing tasks: page={page}, offset={offset}")

        async with self.database.acquire() as conn:
            rows = await conn.fetch(
                f"""
                SELECT {_TASK_COLUMNS}
                FROM tasks
                WHERE deleted_at IS NULL
                ORDER BY created_at, id
                LIMIT $1 OFFSET $2
                """,
                PAGE_SIZE,
                offset,
            )

        return [self._to_entity(row) for row in rows]

    async def create_task(self, task: Task) -> Task:
        self.log.info(f"📝 Creating task: value={task.value!r}")

        async with self.database.transaction() as conn:
            row = await conn.fetchrow(
                f"""
                INSERT INTO tasks (value, due_date)
                VALUES ($1, $2)
                RETURNING {_TASK_COLUMNS}
                """,
                task.value,
                task.due_date,
            )

        created = self._to_entity(row)
        self.log.info(f"✅ Task created: task_id={created.id}")
        return created

    async def update_task(self, task: Task) -> None:
        """
        Update value, completed flag and due date of a non-deleted task.

        On success ``task.updated_at`` holds the timestamp that was written.

        Raises:
            DomainError: NOT_FOUND when no non-deleted row matched
        """
        self.log.info(f"📝 Updating task: task_id={task.id}")
        now = datetime.now(timezone.utc)

        async with self.database.acquire() as conn:
            status = await conn.execute(
                """
                UPDATE tasks
                SET value = $1, completed = $2, due_date = $3, updated_at = $4
                WHERE id = $5 AND deleted_at IS NULL
                """,
                task.value,
                task.completed,
                task.due_date,
                now,
                task.id,
            )

        if affected_rows(status) == 0:
            self.log.warning(f"⚠️ Task not found for update: task_id={task.id}")
            raise not_found(TASK_NOT_FOUND)

        task.updated_at = now
        self.log.info(f"✅ Task updated: task_id={task.id}")

    async def delete_task(self, task_id: UUID) -> None:
        self.log.info(f"🗑️ Deleting task: task_id={task_id}")

        async with self.database.acquire() as conn:
            status = await conn.execute(
                """
                UPDATE tasks
                SET deleted_at = $1
                WHERE id = $2 AND deleted_at IS NULL
                """,
                datetime.now(timezone.utc),
                task_id,
            )

        if affected_rows(status) == 0:
            self.log.warning(f"⚠️ Task not found for deletion: task_id={task_id}")
            raise not_found(TASK_NOT_FOUND)

        self.log.info(f"✅ Task deleted: task_id={task_id}")

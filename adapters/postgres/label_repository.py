"""
PostgreSQL Label Repository Adapter.

Label values are lowercased before they are compared or stored. Uniqueness
among the live labels of a task is checked inside the insert transaction and
backed by the partial unique index ``uq_labels_task_id_value``.
"""

from datetime import datetime, timezone
from typing import List
from uuid import UUID

from asyncpg.exceptions import UniqueViolationError

from core.database import Database
from domain.entities import Label, normalize_label
from domain.errors import (
    LABEL_ALREADY_EXISTS,
    LABEL_NOT_FOUND,
    already_exists,
    not_found,
)
from ports.repository import LabelRepositoryPort

from .common import affected_rows

_LABEL_COLUMNS = "id, task_id, value, created_at, deleted_at"


class PostgresLabelRepository(LabelRepositoryPort):
    """PostgreSQL implementation of LabelRepositoryPort."""

    def __init__(self, database: Database, log):
        self.database = database
        self.log = log

    def _to_entity(self, row) -> Label:
        return Label(
            id=row["id"],
            task_id=row["task_id"],
            value=row["value"],
            created_at=row["created_at"],
            deleted_at=row["deleted_at"],
        )

    async def create_label(self, label: Label) -> Label:
        """
        Save a new label for a task.

        Args:
            label: Label to save; its value is lowercased

        Returns:
            Persisted label

        Raises:
            DomainError: ALREADY_EXISTS when the task already has a live label
                with the same value
        """
        value = normalize_label(label.value)
        self.log.info(f"📝 Creating label: task_id={label.task_id}, value={value!r}")

        try:
            async with self.database.transaction() as conn:
                count = await conn.fetchval(
                    """
                    SELECT COUNT(id)
                    FROM labels
                    WHERE task_id = $1 AND value = $2 AND deleted_at IS NULL
                    """,
                    label.task_id,
                    value,
                )
                if count > 0:
                    self.log.warning(
                        f"⚠️ Label already exists: task_id={label.task_id}, value={value!r}"
                    )
                    raise already_exists(LABEL_ALREADY_EXISTS)

                row = await conn.fetchrow(
                    f"""
                    INSERT INTO labels (task_id, value)
                    VALUES ($1, $2)
                    RETURNING {_LABEL_COLUMNS}
                    """,
                    label.task_id,
                    value,
                )
        except UniqueViolationError as e:
            # concurrent insert won the race
            self.log.warning(
                f"⚠️ Label already exists (unique index): task_id={label.task_id}, value={value!r}"
            )
            raise already_exists(LABEL_ALREADY_EXISTS, e)

        created = self._to_entity(row)
        self.log.info(f"✅ Label created: label_id={created.id}")
        return created

    async def get_labels_by_task_id(self, task_id: UUID) -> List[Label]:
        self.log.debug(f"🔍 Listing labels: task_id={task_id}")

        async with self.database.acquire() as conn:
            rows = await conn.fetch(
                f"""
                SELECT {_LABEL_COLUMNS}
                FROM labels
                WHERE task_id = $1 AND deleted_at IS NULL
                ORDER BY created_at, id
                """,
                task_id,
            )

        return [self._to_entity(row) for row in rows]

    async def delete_label_by_task_id_and_label_id(
        self, task_id: UUID, label_id: UUID
    ) -> None:
        self.log.info(f"🗑️ Deleting label: task_id={task_id}, label_id={label_id}")

        async with self.database.acquire() as conn:
            status = await conn.execute(
                """
                UPDATE labels
                SET deleted_at = $1
                WHERE task_id = $2 AND id = $3 AND deleted_at IS NULL
                """,
                datetime.now(timezone.utc),
                task_id,
                label_id,
            )

        if affected_rows(status) == 0:
            self.log.warning(f"⚠️ Label not found for deletion: label_id={label_id}")
            raise not_found(LABEL_NOT_FOUND)

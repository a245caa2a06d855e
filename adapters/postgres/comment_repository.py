"""
PostgreSQL Comment Repository Adapter.
"""

from datetime import datetime, timezone
from typing import List
from uuid import UUID

from core.database import Database
from domain.entities import Comment
from domain.errors import COMMENT_NOT_FOUND, not_found
from ports.repository import CommentRepositoryPort

from .common import affected_rows

_COMMENT_COLUMNS = "id, task_id, value, created_at, deleted_at"


class PostgresCommentRepository(CommentRepositoryPort):
    """PostgreSQL implementation of CommentRepositoryPort."""

    def __init__(self, database: Database, log):
        self.database = database
        self.log = log

    def _to_entity(self, row) -> Comment:
        return Comment(
            id=row["id"],
            task_id=row["task_id"],
            value=row["value"],
            created_at=row["created_at"],
            deleted_at=row["deleted_at"],
        )

    async def create_comment(self, comment: Comment) -> Comment:
        self.log.info(f"📝 Creating comment: task_id={comment.task_id}")

        async with self.database.transaction() as conn:
            row = await conn.fetchrow(
                f"""
                INSERT INTO comments (task_id, value)
                VALUES ($1, $2)
                RETURNING {_COMMENT_COLUMNS}
                """,
                comment.task_id,
                comment.value,
            )

        created = self._to_entity(row)
        self.log.info(f"✅ Comment created: comment_id={created.id}")
        return created

    async def get_comments_by_task_id(self, task_id: UUID) -> List[Comment]:
        self.log.debug(f"🔍 Listing comments: task_id={task_id}")

        async with self.database.acquire() as conn:
            rows = await conn.fetch(
                f"""
                SELECT {_COMMENT_COLUMNS}
                FROM comments
                WHERE task_id = $1 AND deleted_at IS NULL
                ORDER BY created_at, id
                """,
                task_id,
            )

        return [self._to_entity(row) for row in rows]

    async def delete_comment_by_task_id_and_comment_id(
        self, task_id: UUID, comment_id: UUID
    ) -> None:
        self.log.info(
            f"🗑️ Deleting comment: task_id={task_id}, comment_id={comment_id}"
        )

        async with self.database.acquire() as conn:
            status = await conn.execute(
                """
                UPDATE comments
                SET deleted_at = $1
                WHERE task_id = $2 AND id = $3 AND deleted_at IS NULL
                """,
                datetime.now(timezone.utc),
                task_id,
                comment_id,
            )

        if affected_rows(status) == 0:
            self.log.warning(f"⚠️ Comment not found for deletion: comment_id={comment_id}")
            raise not_found(COMMENT_NOT_FOUND)

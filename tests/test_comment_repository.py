from datetime import datetime, timezone
from uuid import UUID

import pytest

from adapters.postgres import PostgresCommentRepository
from domain.entities import Comment
from domain.errors import DomainError, ErrorKind

TASK_ID = UUID("9b2f6c1e-8a43-4d4c-9f43-3f1b2a6d7e10")
COMMENT_ID = UUID("3c1d8f0a-2b7e-4f5a-9d6c-1e2f3a4b5c6d")
CREATED = datetime(2024, 1, 1, tzinfo=timezone.utc)


def comment_row(value="call the store"):
    return {
        "id": COMMENT_ID,
        "task_id": TASK_ID,
        "value": value,
        "created_at": CREATED,
        "deleted_at": None,
    }


@pytest.fixture
def repository(database, log):
    return PostgresCommentRepository(database, log)


@pytest.mark.asyncio
async def test_create_comment(repository, conn, tx):
    conn.fetchrow.return_value = comment_row()

    created = await repository.create_comment(
        Comment(task_id=TASK_ID, value="call the store")
    )

    assert created.id == COMMENT_ID
    assert created.task_id == TASK_ID
    assert created.created_at == CREATED
    assert conn.fetchrow.await_args.args[1:] == (TASK_ID, "call the store")
    tx.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_get_comments_by_task_id(repository, conn):
    conn.fetch.return_value = [comment_row("a"), comment_row("b")]

    comments = await repository.get_comments_by_task_id(TASK_ID)

    assert [c.value for c in comments] == ["a", "b"]
    sql, task_id = conn.fetch.await_args.args
    assert "deleted_at IS NULL" in sql
    assert task_id == TASK_ID


@pytest.mark.asyncio
async def test_get_comments_empty(repository, conn):
    conn.fetch.return_value = []
    assert await repository.get_comments_by_task_id(TASK_ID) == []


@pytest.mark.asyncio
async def test_delete_comment(repository, conn):
    conn.execute.return_value = "UPDATE 1"

    await repository.delete_comment_by_task_id_and_comment_id(TASK_ID, COMMENT_ID)

    assert conn.execute.await_args.args[2:] == (TASK_ID, COMMENT_ID)


@pytest.mark.asyncio
async def test_delete_comment_not_found(repository, conn):
    conn.execute.return_value = "UPDATE 0"

    with pytest.raises(DomainError) as exc_info:
        await repository.delete_comment_by_task_id_and_comment_id(TASK_ID, COMMENT_ID)

    assert exc_info.value.kind == ErrorKind.NOT_FOUND
    assert exc_info.value.message == "comment not found"

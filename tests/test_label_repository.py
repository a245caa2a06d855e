from datetime import datetime, timezone
from uuid import UUID

import pytest
from asyncpg.exceptions import UniqueViolationError

from adapters.postgres import PostgresLabelRepository
from domain.entities import Label
from domain.errors import DomainError, ErrorKind

TASK_ID = UUID("9b2f6c1e-8a43-4d4c-9f43-3f1b2a6d7e10")
LABEL_ID = UUID("7a6b5c4d-3e2f-4a1b-8c9d-0e1f2a3b4c5d")
CREATED = datetime(2024, 1, 1, tzinfo=timezone.utc)


def label_row(value="urgent"):
    return {
        "id": LABEL_ID,
        "task_id": TASK_ID,
        "value": value,
        "created_at": CREATED,
        "deleted_at": None,
    }


@pytest.fixture
def repository(database, log):
    return PostgresLabelRepository(database, log)


@pytest.mark.asyncio
async def test_create_label_lowercases_and_inserts(repository, conn, tx):
    conn.fetchval.return_value = 0
    conn.fetchrow.return_value = label_row()

    created = await repository.create_label(Label(task_id=TASK_ID, value="URGENT"))

    assert created.value == "urgent"
    assert conn.fetchval.await_args.args[1:] == (TASK_ID, "urgent")
    assert conn.fetchrow.await_args.args[1:] == (TASK_ID, "urgent")
    tx.commit.assert_awaited_once()
    tx.rollback.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_label_already_exists(repository, conn, tx):
    conn.fetchval.return_value = 1

    with pytest.raises(DomainError) as exc_info:
        await repository.create_label(Label(task_id=TASK_ID, value="Urgent"))

    assert exc_info.value.kind == ErrorKind.ALREADY_EXISTS
    assert exc_info.value.message == "label already exists"
    conn.fetchrow.assert_not_awaited()
    tx.rollback.assert_awaited_once()
    tx.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_label_unique_violation_is_already_exists(repository, conn, tx):
    conn.fetchval.return_value = 0
    conn.fetchrow.side_effect = UniqueViolationError("duplicate key value")

    with pytest.raises(DomainError) as exc_info:
        await repository.create_label(Label(task_id=TASK_ID, value="urgent"))

    assert exc_info.value.kind == ErrorKind.ALREADY_EXISTS
    assert isinstance(exc_info.value.cause, UniqueViolationError)
    tx.rollback.assert_awaited_once()


@pytest.mark.asyncio
async def test_create_label_storage_error_propagates(repository, conn):
    conn.fetchval.side_effect = OSError("connection reset")

    with pytest.raises(OSError):
        await repository.create_label(Label(task_id=TASK_ID, value="urgent"))


@pytest.mark.asyncio
async def test_get_labels_by_task_id(repository, conn):
    conn.fetch.return_value = [label_row("grocery"), label_row("home")]

    labels = await repository.get_labels_by_task_id(TASK_ID)

    assert [label.value for label in labels] == ["grocery", "home"]
    assert "deleted_at IS NULL" in conn.fetch.await_args.args[0]


@pytest.mark.asyncio
async def test_delete_label(repository, conn):
    conn.execute.return_value = "UPDATE 1"

    await repository.delete_label_by_task_id_and_label_id(TASK_ID, LABEL_ID)

    assert conn.execute.await_args.args[2:] == (TASK_ID, LABEL_ID)


@pytest.mark.asyncio
async def test_delete_label_not_found(repository, conn):
    conn.execute.return_value = "UPDATE 0"

    with pytest.raises(DomainError) as exc_info:
        await repository.delete_label_by_task_id_and_label_id(TASK_ID, LABEL_ID)

    assert exc_info.value.kind == ErrorKind.NOT_FOUND
    assert exc_info.value.message == "label not found"

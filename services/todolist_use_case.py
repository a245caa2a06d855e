"""
Todolist Use Case.

Orchestrates the task, comment and label repositories. Identifiers and due
dates are validated before any storage call. Storage failures other than
NOT_FOUND / ALREADY_EXISTS are logged with their cause and surfaced as an
INTERNAL error carrying a generic message.
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import List, Optional

from domain.entities import Comment, Label, Task
from domain.errors import DomainError, ErrorKind, internal
from domain.value_objects import parse_optional_timestamp, parse_uuid
from ports.repository import (
    CommentRepositoryPort,
    LabelRepositoryPort,
    TaskRepositoryPort,
)


class ITodoListUseCase(ABC):
    """Interface for Todolist Use Case."""

    @abstractmethod
    async def get_task(self, task_id: str) -> Task:
        """Get a task together with its comments and labels."""
        pass

    @abstractmethod
    async def get_tasks(self, page: int) -> List[Task]:
        pass

    @abstractmethod
    async def create_task(self, value: str, due_date: Optional[str] = None) -> Task:
        pass

    @abstractmethod
    async def update_task(
        self,
        task_id: str,
        value: str,
        completed: bool,
        due_date: Optional[str] = None,
    ) -> Task:
        pass

    @abstractmethod
    async def delete_task(self, task_id: str) -> None:
        pass

    @abstractmethod
    async def update_task_status(self, task_id: str, completed: bool) -> None:
        pass

    @abstractmethod
    async def create_comment(self, task_id: str, message: str) -> Comment:
        pass

    @abstractmethod
    async def get_comments(self, task_id: str) -> List[Comment]:
        pass

    @abstractmethod
    async def delete_comment(self, task_id: str, comment_id: str) -> None:
        pass

    @abstractmethod
    async def create_label(self, task_id: str, label: str) -> Label:
        pass

    @abstractmethod
    async def get_labels(self, task_id: str) -> List[Label]:
        pass

    @abstractmethod
    async def delete_label(self, task_id: str, label_id: str) -> None:
        pass


class TodoListUseCase(ITodoListUseCase):
    """
    Application Use Case for managing tasks, comments and labels.
    """

    def __init__(
        self,
        task_repository: TaskRepositoryPort,
        comment_repository: CommentRepositoryPort,
        label_repository: LabelRepositoryPort,
        log,
    ):
        self.task_repository = task_repository
        self.comment_repository = comment_repository
        self.label_repository = label_repository
        self.log = log

    @contextmanager
    def _storage_errors(self, action: str, *passthrough: ErrorKind):
        """
        Classify failures raised inside the block.

        Domain errors whose kind is in ``passthrough`` are re-raised as they
        are; anything else is logged and replaced by an INTERNAL error.
        """
        try:
            yield
        except DomainError as e:
            if e.is_kind(*passthrough):
                raise
            self.log.error(f"❌ Cannot {action}: {e!r}")
            raise internal(e) from e
        except Exception as e:
            self.log.error(f"❌ Cannot {action}: {type(e).__name__}: {e}")
            raise internal(e) from e

    async def _find_task(self, task_id, action: str) -> Task:
        with self._storage_errors(action, ErrorKind.NOT_FOUND):
            return await self.task_repository.get_task(task_id)

    async def get_task(self, task_id: str) -> Task:
        uid = parse_uuid(task_id)
        self.log.info(f"Getting task: task_id={uid}")

        task = await self._find_task(uid, "get task")

        with self._storage_errors("get comments"):
            try:
                task.comments = await self.comment_repository.get_comments_by_task_id(uid)
            except DomainError as e:
                if not e.is_kind(ErrorKind.NOT_FOUND):
                    raise
                task.comments = []

        with self._storage_errors("get labels"):
            try:
                task.labels = await self.label_repository.get_labels_by_task_id(uid)
            except DomainError as e:
                if not e.is_kind(ErrorKind.NOT_FOUND):
                    raise
                task.labels = []

        return task

    async def get_tasks(self, page: int) -> List[Task]:
        self.log.info(f"Listing tasks: page={page}")
        with self._storage_errors("get tasks"):
            return await self.task_repository.get_tasks(page)

    async def create_task(self, value: str, due_date: Optional[str] = None) -> Task:
        parsed_due_date = parse_optional_timestamp(due_date)
        self.log.info(f"Creating task: value={value!r}, due_date={parsed_due_date}")

        with self._storage_errors("create task"):
            return await self.task_repository.create_task(
                Task(value=value, due_date=parsed_due_date)
            )

    async def update_task(
        self,
        task_id: str,
        value: str,
        completed: bool,
        due_date: Optional[str] = None,
    ) -> Task:
        """
        Replace value and completed flag of a task.

        Args:
            task_id: Task identifier
            value: New text
            completed: New completion flag
            due_date: None keeps the stored due date, a blank string clears
                it, anything else is parsed with the fixed time layout

        Returns:
            The updated task

        Raises:
            DomainError: INVALID_ARGUMENT, NOT_FOUND or INTERNAL
        """
        uid = parse_uuid(task_id)
        clear_due_date = due_date is not None and not due_date.strip()
        parsed_due_date = parse_optional_timestamp(due_date)
        self.log.info(f"Updating task: task_id={uid}")

        task = await self._find_task(uid, "update task")

        task.value = value
        task.completed = completed
        if clear_due_date:
            task.due_date = None
        elif parsed_due_date is not None:
            task.due_date = parsed_due_date

        with self._storage_errors("update task", ErrorKind.NOT_FOUND):
            await self.task_repository.update_task(task)

        return task

    async def delete_task(self, task_id: str) -> None:
        uid = parse_uuid(task_id)
        self.log.info(f"Deleting task: task_id={uid}")

        with self._storage_errors("delete task", ErrorKind.NOT_FOUND):
            await self.task_repository.delete_task(uid)

    async def update_task_status(self, task_id: str, completed: bool) -> None:
        uid = parse_uuid(task_id)
        self.log.info(f"Updating task status: task_id={uid}, completed={completed}")

        task = await self._find_task(uid, "get task")
        task.completed = completed

        with self._storage_errors("update task", ErrorKind.NOT_FOUND):
            await self.task_repository.update_task(task)

    async def create_comment(self, task_id: str, message: str) -> Comment:
        uid = parse_uuid(task_id)
        self.log.info(f"Creating comment: task_id={uid}")

        task = await self._find_task(uid, "get task")

        with self._storage_errors("create comment"):
            return await self.comment_repository.create_comment(
                Comment(task_id=task.id, value=message)
            )

    async def get_comments(self, task_id: str) -> List[Comment]:
        uid = parse_uuid(task_id)

        task = await self._find_task(uid, "get task")

        with self._storage_errors("get comments"):
            return await self.comment_repository.get_comments_by_task_id(task.id)

    async def delete_comment(self, task_id: str, comment_id: str) -> None:
        task_uid = parse_uuid(task_id)
        comment_uid = parse_uuid(comment_id)
        self.log.info(f"Deleting comment: task_id={task_uid}, comment_id={comment_uid}")

        with self._storage_errors("delete comment", ErrorKind.NOT_FOUND):
            await self.comment_repository.delete_comment_by_task_id_and_comment_id(
                task_uid, comment_uid
            )

    async def create_label(self, task_id: str, label: str) -> Label:
        uid = parse_uuid(task_id)
        self.log.info(f"Creating label: task_id={uid}, label={label!r}")

        task = await self._find_task(uid, "get task")

        with self._storage_errors("create label", ErrorKind.ALREADY_EXISTS):
            return await self.label_repository.create_label(
                Label(task_id=task.id, value=label)
            )

    async def get_labels(self, task_id: str) -> List[Label]:
        uid = parse_uuid(task_id)

        task = await self._find_task(uid, "get task")

        with self._storage_errors("get labels"):
            return await self.label_repository.get_labels_by_task_id(task.id)

    async def delete_label(self, task_id: str, label_id: str) -> None:
        task_uid = parse_uuid(task_id)
        label_uid = parse_uuid(label_id)
        self.log.info(f"Deleting label: task_id={task_uid}, label_id={label_uid}")

        with self._storage_errors("delete label", ErrorKind.NOT_FOUND):
            await self.label_repository.delete_label_by_task_id_and_label_id(
                task_uid, label_uid
            )

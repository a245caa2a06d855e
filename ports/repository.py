"""
Repository Ports.

Implementations raise ``DomainError`` with kind NOT_FOUND or ALREADY_EXISTS for
domain outcomes and let every storage failure propagate unchanged.
"""

from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from domain.entities import Comment, Label, Task


class TaskRepositoryPort(ABC):
    """Abstract interface for Task Repository."""

    @abstractmethod
    async def get_task(self, task_id: UUID) -> Task:
        """Get a non-deleted task by ID."""
        pass

    @abstractmethod
    async def get_tasks(self, page: int) -> List[Task]:
        """Get one page of non-deleted tasks."""
        pass

    @abstractmethod
    async def create_task(self, task: Task) -> Task:
        """Save a new task and return the persisted row."""
        pass

    @abstractmethod
    async def update_task(self, task: Task) -> None:
        """Update value, completed flag and due date of an existing task."""
        pass

    @abstractmethod
    async def delete_task(self, task_id: UUID) -> None:
        """Soft-delete a task."""
        pass


class CommentRepositoryPort(ABC):
    """Abstract interface for Comment Repository."""

    @abstractmethod
    async def create_comment(self, comment: Comment) -> Comment:
        pass

    @abstractmethod
    async def get_comments_by_task_id(self, task_id: UUID) -> List[Comment]:
        pass

    @abstractmethod
    async def delete_comment_by_task_id_and_comment_id(
        self, task_id: UUID, comment_id: UUID
    ) -> None:
        pass


class LabelRepositoryPort(ABC):
    """Abstract interface for Label Repository."""

    @abstractmethod
    async def create_label(self, label: Label) -> Label:
        """Save a new label; ALREADY_EXISTS when the task already has it."""
        pass

    @abstractmethod
    async def get_labels_by_task_id(self, task_id: UUID) -> List[Label]:
        pass

    @abstractmethod
    async def delete_label_by_task_id_and_label_id(
        self, task_id: UUID, label_id: UUID
    ) -> None:
        pass

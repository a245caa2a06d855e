"""
Pydantic schemas for Task API.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from domain.entities import Task
from domain.value_objects import format_optional_timestamp

from .comment_schemas import CommentView
from .label_schemas import LabelView


class CreateTaskRequest(BaseModel):
    """Request model for task creation."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [{"value": "Buy milk", "due_date": "2024-01-01T00:00:00.000Z"}]
        }
    )

    value: str = Field(..., description="Task text")
    due_date: Optional[str] = Field(
        default=None, description="Due date as YYYY-MM-DDTHH:MM:SS.mmmZ"
    )


class UpdateTaskRequest(BaseModel):
    """Request model for task update."""

    value: str = Field(..., description="Task text")
    completed: bool = Field(default=False, description="Completion flag")
    due_date: Optional[str] = Field(
        default=None,
        description="Omit to keep the due date, send an empty string to clear it",
    )


class UpdateTaskStatusRequest(BaseModel):
    completed: bool


class TaskView(BaseModel):
    """Task as returned to clients."""

    id: str
    value: str
    completed: bool
    due_date: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    comments: List[CommentView] = Field(default_factory=list)
    labels: List[LabelView] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, task: Task) -> "TaskView":
        return cls(
            id=str(task.id),
            value=task.value,
            completed=task.completed,
            due_date=format_optional_timestamp(task.due_date),
            created_at=format_optional_timestamp(task.created_at),
            updated_at=format_optional_timestamp(task.updated_at),
            comments=[CommentView.from_entity(c) for c in task.comments],
            labels=[LabelView.from_entity(label) for label in task.labels],
        )

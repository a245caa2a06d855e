"""
API Schemas (Request/Response Models).
"""

from .comment_schemas import CommentView, CreateCommentRequest
from .common_schemas import HealthResponse, StandardResponse
from .label_schemas import CreateLabelRequest, LabelView
from .task_schemas import (
    CreateTaskRequest,
    TaskView,
    UpdateTaskRequest,
    UpdateTaskStatusRequest,
)

__all__ = [
    # Common schemas
    "StandardResponse",
    "HealthResponse",
    # Task schemas
    "CreateTaskRequest",
    "UpdateTaskRequest",
    "UpdateTaskStatusRequest",
    "TaskView",
    # Comment schemas
    "CreateCommentRequest",
    "CommentView",
    # Label schemas
    "CreateLabelRequest",
    "LabelView",
]

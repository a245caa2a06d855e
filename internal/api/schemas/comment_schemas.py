"""
Pydantic schemas for Comment API.
"""

from typing import Optional

from pydantic import BaseModel, Field

from domain.entities import Comment
from domain.value_objects import format_optional_timestamp


class CreateCommentRequest(BaseModel):
    """Request model for comment creation."""

    comment: str = Field(..., description="Comment text")


class CommentView(BaseModel):
    id: str
    message: str
    created_at: Optional[str] = None

    @classmethod
    def from_entity(cls, comment: Comment) -> "CommentView":
        return cls(
            id=str(comment.id),
            message=comment.value,
            created_at=format_optional_timestamp(comment.created_at),
        )

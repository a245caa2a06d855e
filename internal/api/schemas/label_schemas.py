"""
Pydantic schemas for Label API.
"""

from typing import Optional

from pydantic import BaseModel, Field

from domain.entities import Label
from domain.value_objects import format_optional_timestamp


class CreateLabelRequest(BaseModel):
    """Request model for label creation."""

    label: str = Field(..., description="Label name, stored in lowercase")


class LabelView(BaseModel):
    id: str
    name: str
    created_at: Optional[str] = None

    @classmethod
    def from_entity(cls, label: Label) -> "LabelView":
        return cls(
            id=str(label.id),
            name=label.value,
            created_at=format_optional_timestamp(label.created_at),
        )

"""
Ports (abstract interfaces) implemented by adapters.
"""

from .repository import CommentRepositoryPort, LabelRepositoryPort, TaskRepositoryPort

__all__ = [
    "TaskRepositoryPort",
    "CommentRepositoryPort",
    "LabelRepositoryPort",
]

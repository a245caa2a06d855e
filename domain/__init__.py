"""
Domain layer: entities, value objects and the error taxonomy.
"""

from .entities import Comment, Label, Task
from .errors import DomainError, ErrorKind

__all__ = [
    "Comment",
    "Label",
    "Task",
    "DomainError",
    "ErrorKind",
]

"""
PostgreSQL adapters (asyncpg).
"""

from .comment_repository import PostgresCommentRepository
from .label_repository import PostgresLabelRepository
from .schema import SCHEMA_SQL
from .task_repository import PostgresTaskRepository

__all__ = [
    "PostgresTaskRepository",
    "PostgresCommentRepository",
    "PostgresLabelRepository",
    "SCHEMA_SQL",
]

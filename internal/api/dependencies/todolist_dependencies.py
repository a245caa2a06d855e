"""
Todolist Dependencies.
"""

from core.container import Container
from core.database import Database
from services.todolist_use_case import ITodoListUseCase


def get_todolist_use_case() -> ITodoListUseCase:
    """Get Todolist Use Case instance."""
    return Container.resolve(ITodoListUseCase)


def get_database() -> Database:
    """Get the shared connection provider."""
    return Container.resolve(Database)

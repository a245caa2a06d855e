"""
Service layer implementing business logic.
"""

from .todolist_use_case import ITodoListUseCase, TodoListUseCase

__all__ = [
    "ITodoListUseCase",
    "TodoListUseCase",
]

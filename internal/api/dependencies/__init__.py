"""
FastAPI dependencies resolving services from the DI container.
"""

from .todolist_dependencies import get_database, get_todolist_use_case

__all__ = [
    "get_database",
    "get_todolist_use_case",
]

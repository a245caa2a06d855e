"""
Dependency Injection Container.
"""

from typing import Any, Callable, Dict, Type, TypeVar

from core.database import Database
from core.logger import get_logger

T = TypeVar("T")


class Container:
    """
    Simple Dependency Injection Container.
    """

    _instances: Dict[Type, Any] = {}
    _factories: Dict[Type, Callable[[], Any]] = {}

    @classmethod
    def register(cls, interface: Type[T], instance: Any) -> None:
        """Register a singleton instance for an interface."""
        cls._instances[interface] = instance

    @classmethod
    def register_factory(cls, interface: Type[T], factory: Callable[[], T]) -> None:
        """Register a factory for an interface."""
        cls._factories[interface] = factory

    @classmethod
    def resolve(cls, interface: Type[T]) -> T:
        """Resolve an interface to its implementation."""
        if interface in cls._instances:
            return cls._instances[interface]
        if interface in cls._factories:
            return cls._factories[interface]()
        raise KeyError(f"No provider registered for {interface.__name__}")

    @classmethod
    def clear(cls):
        """Clear all registrations (useful for testing)."""
        cls._instances.clear()
        cls._factories.clear()


def bootstrap_container(database: Database) -> None:
    """
    Initialize the dependency injection container.

    Repositories and the use case are singletons sharing one connection
    provider. Each receives its own logger bound to its component name.
    """
    from adapters.postgres import (
        PostgresCommentRepository,
        PostgresLabelRepository,
        PostgresTaskRepository,
    )
    from ports import CommentRepositoryPort, LabelRepositoryPort, TaskRepositoryPort
    from services import ITodoListUseCase, TodoListUseCase

    Container.register(Database, database)

    task_repository = PostgresTaskRepository(
        database, get_logger("task_repository")
    )
    comment_repository = PostgresCommentRepository(
        database, get_logger("comment_repository")
    )
    label_repository = PostgresLabelRepository(
        database, get_logger("label_repository")
    )

    Container.register(TaskRepositoryPort, task_repository)
    Container.register(CommentRepositoryPort, comment_repository)
    Container.register(LabelRepositoryPort, label_repository)

    Container.register(
        ITodoListUseCase,
        TodoListUseCase(
            task_repository=task_repository,
            comment_repository=comment_repository,
            label_repository=label_repository,
            log=get_logger("todolist_use_case"),
        ),
    )

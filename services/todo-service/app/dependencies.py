"""
Shared dependencies for the application.

Provides dependency injection functions used across routers.
"""

from typing import Optional

from fastapi import Request

from .config import Settings
from .repositories.memory_repository import InMemoryTodoRepository
from .repositories.todo_repository import ITodoRepository

# Global repository instance (set by main app)
_todo_repository: Optional[ITodoRepository] = None


def create_todo_repository() -> ITodoRepository:
    """
    Create the todo repository for this process.

    The in-memory repository is the only implementation; callers that
    need another one pass it to set_todo_repository directly.

    Returns:
        Configured repository instance
    """
    return InMemoryTodoRepository()


def set_todo_repository(repository: Optional[ITodoRepository]) -> None:
    """
    Set the global todo repository instance.

    Called by main app during startup and cleared on shutdown.
    """
    global _todo_repository
    _todo_repository = repository


def get_todo_repository() -> ITodoRepository:
    """
    Get todo repository instance for dependency injection.

    Used by all routers that need the repository.
    """
    if _todo_repository is None:
        raise RuntimeError("Todo repository not initialized")
    return _todo_repository


def is_repository_ready() -> bool:
    """Check whether a repository has been injected."""
    return _todo_repository is not None


def get_settings(request: Request) -> Settings:
    """Get the settings the serving app was created with."""
    return request.app.state.settings

"""
Repository layer - Data access abstractions.

This layer provides interfaces for todo storage and retrieval,
hiding implementation details from the HTTP layer.
"""

from .memory_repository import InMemoryTodoRepository
from .todo_repository import ITodoRepository

__all__ = ["ITodoRepository", "InMemoryTodoRepository"]

"""
Todo repository interface (Abstract Base Class).

Defines the contract for todo storage and retrieval
independent of the underlying storage mechanism.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from ..domain.entities import Todo


class ITodoRepository(ABC):
    """
    Abstract repository interface for todo operations.

    Implementations must be safe to call concurrently from any number
    of requests. A missing todo is reported as ``None`` (or ``False``
    from ``delete``), never as an exception.
    """

    @abstractmethod
    async def create(self, title: str, order: Optional[int], url_prefix: str) -> Todo:
        """
        Create a new todo.

        Args:
            title: Non-empty title
            order: Optional sort hint
            url_prefix: Prefix the new todo's url is built from

        Returns:
            The created todo, with a fresh id and url

        Raises:
            ValidationException: If title or order is malformed
        """
        pass

    @abstractmethod
    async def get(self, todo_id: Any) -> Optional[Todo]:
        """
        Get a todo by id.

        Args:
            todo_id: Todo identifier

        Returns:
            The todo if it exists, None otherwise
        """
        pass

    @abstractmethod
    async def list(self) -> List[Todo]:
        """
        List all todos.

        Returns:
            Snapshot of every todo, in creation order
        """
        pass

    @abstractmethod
    async def update(
        self,
        todo_id: Any,
        title: Optional[str] = None,
        order: Optional[int] = None,
        completed: Optional[bool] = None,
    ) -> Optional[Todo]:
        """
        Partially update a todo.

        Only the arguments that are not None are applied.

        Args:
            todo_id: Todo identifier
            title: New title (must be non-empty when given)
            order: New sort hint
            completed: New completion flag

        Returns:
            The updated todo, or None if it does not exist

        Raises:
            ValidationException: If a provided field is malformed
        """
        pass

    @abstractmethod
    async def delete(self, todo_id: Any) -> bool:
        """
        Delete a todo.

        Args:
            todo_id: Todo identifier

        Returns:
            True if a todo was removed, False if none existed
        """
        pass

    @abstractmethod
    async def delete_all(self) -> None:
        """Delete every todo."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Return the number of live todos."""
        pass

"""
In-memory todo repository.

Keeps every todo in a single insertion-ordered dict guarded by one lock.
Nothing survives a process restart.

All reads and writes run entirely inside the lock and never await while
holding it, so the repository can be shared between coroutines on the
event loop and worker threads alike.
"""

import dataclasses
from threading import Lock
from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4

import structlog

from ..domain.entities import Todo
from ..domain.exceptions import ValidationException
from .todo_repository import ITodoRepository

logger = structlog.get_logger(__name__)


def _coerce_id(todo_id: Any) -> Optional[UUID]:
    """Turn a caller-supplied id into a UUID key, or None if it cannot be one."""
    if isinstance(todo_id, UUID):
        return todo_id
    if isinstance(todo_id, str):
        try:
            return UUID(todo_id)
        except ValueError:
            return None
    return None


def _validate_title(title: Any) -> None:
    if not isinstance(title, str):
        raise ValidationException("title", title, "must be a string")
    if not title:
        raise ValidationException("title", title, "must not be empty")


def _validate_order(order: Any) -> None:
    # bool is a subclass of int
    if order is not None and (isinstance(order, bool) or not isinstance(order, int)):
        raise ValidationException("order", order, "must be an integer")


def _validate_completed(completed: Any) -> None:
    if completed is not None and not isinstance(completed, bool):
        raise ValidationException("completed", completed, "must be a boolean")


class InMemoryTodoRepository(ITodoRepository):
    """
    Thread-safe in-memory todo repository.

    Features:
    - Random UUID4 identifiers, never reused for a new todo
    - Creation-ordered listing
    - Partial updates that only touch provided fields
    - Atomic clear

    Attributes:
        _todos: Live todos keyed by id, in creation order
        _lock: Guards every access to _todos
    """

    def __init__(self) -> None:
        """Initialize an empty repository."""
        self._todos: Dict[UUID, Todo] = {}
        self._lock = Lock()

        logger.info("Initialized InMemoryTodoRepository")

    async def create(self, title: str, order: Optional[int], url_prefix: str) -> Todo:
        """
        Create a new todo.

        Args:
            title: Non-empty title (whitespace is kept as given)
            order: Optional sort hint
            url_prefix: Prefix the new todo's url is built from

        Returns:
            The created todo

        Raises:
            ValidationException: If title or order is malformed
        """
        _validate_title(title)
        _validate_order(order)

        with self._lock:
            todo_id = uuid4()
            while todo_id in self._todos:
                todo_id = uuid4()

            todo = Todo(
                id=todo_id,
                title=title,
                url=Todo.build_url(url_prefix, todo_id),
                order=order,
            )
            self._todos[todo_id] = todo

        logger.debug("Todo created", todo_id=str(todo_id))
        return todo

    async def get(self, todo_id: Any) -> Optional[Todo]:
        """
        Get a todo by id.

        Unknown or malformed ids are reported as not found.
        """
        key = _coerce_id(todo_id)
        if key is None:
            return None

        with self._lock:
            return self._todos.get(key)

    async def list(self) -> List[Todo]:
        """Return a snapshot of all todos in creation order."""
        with self._lock:
            return list(self._todos.values())

    async def update(
        self,
        todo_id: Any,
        title: Optional[str] = None,
        order: Optional[int] = None,
        completed: Optional[bool] = None,
    ) -> Optional[Todo]:
        """
        Partially update a todo.

        Fields are validated before the lookup, so a malformed update is
        rejected whether or not the todo exists.

        Args:
            todo_id: Todo identifier
            title: New title, applied when not None
            order: New sort hint, applied when not None
            completed: New completion flag, applied when not None

        Returns:
            The updated todo, or None if no todo has that id

        Raises:
            ValidationException: If a provided field is malformed
        """
        if title is not None:
            _validate_title(title)
        _validate_order(order)
        _validate_completed(completed)

        key = _coerce_id(todo_id)
        if key is None:
            return None

        changes: Dict[str, Any] = {}
        if title is not None:
            changes["title"] = title
        if order is not None:
            changes["order"] = order
        if completed is not None:
            changes["completed"] = completed

        with self._lock:
            current = self._todos.get(key)
            if current is None:
                return None

            if not changes:
                return current

            # Assigning an existing key keeps its position in the dict
            updated = dataclasses.replace(current, **changes)
            self._todos[key] = updated

        logger.debug("Todo updated", todo_id=str(key), fields=sorted(changes))
        return updated

    async def delete(self, todo_id: Any) -> bool:
        """
        Delete a todo.

        Returns:
            True if a todo was removed, False if none existed
        """
        key = _coerce_id(todo_id)
        if key is None:
            return False

        with self._lock:
            removed = self._todos.pop(key, None)

        if removed is None:
            return False

        logger.debug("Todo deleted", todo_id=str(key))
        return True

    async def delete_all(self) -> None:
        """Delete every todo in one step."""
        with self._lock:
            count = len(self._todos)
            self._todos.clear()

        logger.info("Cleared all todos", count=count)

    async def count(self) -> int:
        """Return the number of live todos without copying them."""
        with self._lock:
            return len(self._todos)

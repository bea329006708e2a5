"""
Todo API router.

Translates HTTP requests into repository calls and repository
results into status codes. Malformed ids and bodies are rejected here,
before they reach the repository.
"""

from typing import List
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, HTTPException, Response, status

from ..config import Settings
from ..dependencies import get_settings, get_todo_repository
from ..domain.exceptions import InvalidIdentifierException, ValidationException
from ..metrics import track_todo_operation
from ..models import CreateTodoRequest, ErrorResponse, TodoResponse, UpdateTodoRequest
from ..repositories.todo_repository import ITodoRepository

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/todos", tags=["todos"])


def parse_todo_id(todo_id: str) -> UUID:
    """
    Parse the todo id path parameter.

    Raises:
        InvalidIdentifierException: If the id is not a UUID
    """
    try:
        return UUID(todo_id)
    except ValueError:
        raise InvalidIdentifierException(todo_id)


@router.get(
    "/{todo_id}",
    response_model=TodoResponse,
    response_model_exclude_none=True,
    responses={
        200: {"description": "Todo found"},
        204: {"description": "No todo with this id"},
        400: {"description": "Malformed id", "model": ErrorResponse},
    },
    summary="Get todo",
)
async def get_todo(
    todo_id: UUID = Depends(parse_todo_id),
    repository: ITodoRepository = Depends(get_todo_repository),
):
    """Get a single todo. A missing todo is an empty 204 response."""
    todo = await repository.get(todo_id)

    if todo is None:
        track_todo_operation("get", "not_found")
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    track_todo_operation("get", "found")
    return TodoResponse.from_entity(todo)


@router.get(
    "",
    response_model=List[TodoResponse],
    response_model_exclude_none=True,
    summary="List todos",
)
async def list_todos(repository: ITodoRepository = Depends(get_todo_repository)):
    """List all todos in creation order."""
    todos = await repository.list()
    track_todo_operation("list", "found")
    return [TodoResponse.from_entity(todo) for todo in todos]


@router.post(
    "",
    response_model=TodoResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "Todo created"},
        400: {"description": "Bad request", "model": ErrorResponse},
    },
    summary="Create todo",
)
async def create_todo(
    payload: CreateTodoRequest,
    repository: ITodoRepository = Depends(get_todo_repository),
    app_settings: Settings = Depends(get_settings),
):
    """Create a todo. Its url is built from the configured prefix."""
    try:
        todo = await repository.create(
            title=payload.title,
            order=payload.order,
            url_prefix=app_settings.TODO_URL_PREFIX,
        )
    except ValidationException:
        track_todo_operation("create", "invalid")
        raise

    track_todo_operation("create", "created")

    logger.info("Todo created", todo_id=str(todo.id))
    return TodoResponse.from_entity(todo)


@router.patch(
    "/{todo_id}",
    response_model=TodoResponse,
    response_model_exclude_none=True,
    responses={
        200: {"description": "Todo updated"},
        400: {"description": "Malformed id or invalid field", "model": ErrorResponse},
        404: {"description": "Todo not found", "model": ErrorResponse},
    },
    summary="Update todo",
)
async def update_todo(
    payload: UpdateTodoRequest,
    todo_id: UUID = Depends(parse_todo_id),
    repository: ITodoRepository = Depends(get_todo_repository),
):
    """
    Partially update a todo.

    Only fields present (and not null) in the body are changed.
    """
    try:
        todo = await repository.update(
            todo_id,
            title=payload.title,
            order=payload.order,
            completed=payload.completed,
        )
    except ValidationException:
        track_todo_operation("update", "invalid")
        raise

    if todo is None:
        track_todo_operation("update", "not_found")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Todo {todo_id} not found",
        )

    track_todo_operation("update", "updated")
    logger.info("Todo updated", todo_id=str(todo_id))
    return TodoResponse.from_entity(todo)


@router.delete(
    "/{todo_id}",
    responses={
        200: {"description": "Todo deleted"},
        400: {"description": "Malformed id", "model": ErrorResponse},
        404: {"description": "Todo not found", "model": ErrorResponse},
    },
    summary="Delete todo",
)
async def delete_todo(
    todo_id: UUID = Depends(parse_todo_id),
    repository: ITodoRepository = Depends(get_todo_repository),
):
    """Delete a single todo."""
    if not await repository.delete(todo_id):
        track_todo_operation("delete", "not_found")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Todo {todo_id} not found",
        )

    track_todo_operation("delete", "deleted")

    logger.info("Todo deleted", todo_id=str(todo_id))
    return Response(status_code=status.HTTP_200_OK)


@router.delete("", summary="Delete all todos")
async def delete_all_todos(repository: ITodoRepository = Depends(get_todo_repository)):
    """Delete every todo."""
    await repository.delete_all()

    track_todo_operation("delete_all", "cleared")

    return Response(status_code=status.HTTP_200_OK)

"""Pydantic models for request/response validation."""

from typing import Optional

from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr

from .domain.entities import Todo


class CreateTodoRequest(BaseModel):
    """Request model for creating a todo."""

    title: StrictStr = Field(..., min_length=1, description="Todo title")
    order: Optional[StrictInt] = Field(None, description="Optional sort order")


class UpdateTodoRequest(BaseModel):
    """
    Request model for updating a todo.

    Missing and null fields both leave the stored value unchanged.
    """

    title: Optional[StrictStr] = Field(None, description="New title (non-empty)")
    order: Optional[StrictInt] = Field(None, description="New sort order")
    completed: Optional[StrictBool] = Field(None, description="New completion flag")


class TodoResponse(BaseModel):
    """Todo response model."""

    id: str
    title: str
    order: Optional[int] = None
    url: str
    completed: Optional[bool] = None

    @classmethod
    def from_entity(cls, todo: Todo) -> "TodoResponse":
        """Build a response model from a domain todo."""
        return cls(**todo.to_dict())


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    service: str
    version: str
    timestamp: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    ready: bool
    checks: dict
    timestamp: str


class ErrorResponse(BaseModel):
    """Error response model."""

    success: bool = False
    error: str
    message: str
    details: dict = {}
    request_id: Optional[str] = None

"""
Custom exceptions for the todo service domain.

These exceptions represent domain-level errors and are independent
of infrastructure concerns (HTTP, storage, etc.).

A todo that does not exist is not an error: repositories report it as
``None`` (or ``False`` for deletes).
"""

from typing import Any, Optional


class TodoServiceException(Exception):
    """Base exception for all todo service errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidIdentifierException(TodoServiceException):
    """Raised when a todo identifier cannot be parsed."""

    def __init__(self, identifier: str):
        super().__init__(
            message=f"Invalid todo identifier: {identifier}",
            details={"identifier": identifier},
        )


class ValidationException(TodoServiceException):
    """Raised when a create or update carries a malformed field."""

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.reason = reason
        message = f"Validation failed for {field}: {reason}"
        super().__init__(
            message=message,
            details={"field": field, "value": str(value), "reason": reason},
        )

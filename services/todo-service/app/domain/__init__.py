"""
Domain layer - Core business entities and rules.
"""

from .entities import Todo
from .exceptions import (
    InvalidIdentifierException,
    TodoServiceException,
    ValidationException,
)

__all__ = [
    "Todo",
    "TodoServiceException",
    "InvalidIdentifierException",
    "ValidationException",
]

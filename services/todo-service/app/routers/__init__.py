"""
API routers for todo service endpoints.
"""

from . import health_router, todo_router

__all__ = ["health_router", "todo_router"]

"""
Metrics and request ID middleware for the todo service.

Tracks HTTP request metrics and request IDs for all endpoints.
"""

import time
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from .logging_config import bind_request_id, clear_request_id


class PrometheusMiddleware(BaseHTTPMiddleware):
    """
    Middleware to automatically track Prometheus metrics for all HTTP requests.

    Tracks:
    - Request count by method, route, and status code
    - Request duration by method and route
    """

    def __init__(self, app, track_func: Callable):
        """
        Initialize the middleware.

        Args:
            app: FastAPI application
            track_func: Function to call for tracking metrics (method, endpoint, status, duration)
        """
        super().__init__(app)
        self.track_func = track_func

    async def dispatch(self, request: Request, call_next):
        """Process the request and track metrics."""
        start_time = time.time()

        response = await call_next(request)

        duration = time.time() - start_time

        # Use the route template so ids don't explode label cardinality
        route = request.scope.get("route")
        endpoint = getattr(route, "path", request.url.path)

        self.track_func(
            method=request.method,
            endpoint=endpoint,
            status_code=response.status_code,
            duration=duration,
        )

        return response


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Bind a request ID to the logging context and echo it back."""

    async def dispatch(self, request: Request, call_next):
        request_id = bind_request_id(request.headers.get("X-Request-ID"))
        request.state.request_id = request_id
        try:
            response = await call_next(request)
        finally:
            clear_request_id()

        response.headers["X-Request-ID"] = request_id
        return response

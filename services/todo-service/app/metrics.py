"""
Prometheus metrics for Todo Service.

Tracks HTTP traffic and todo operations.
"""

from fastapi import Depends, Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest

from .dependencies import get_todo_repository
from .repositories.todo_repository import ITodoRepository

# Request metrics
http_requests_total = Counter(
    "todo_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "todo_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
)

# Todo metrics
todo_operations_total = Counter(
    "todo_operations_total",
    "Total todo repository operations",
    ["operation", "outcome"],
)

todos_live = Gauge(
    "todo_live_todos",
    "Number of todos currently stored",
)


def track_request_metrics(method: str, endpoint: str, status_code: int, duration: float):
    """Track HTTP request metrics."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=status_code).inc()
    http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(duration)


def track_todo_operation(operation: str, outcome: str):
    """Track a todo operation and its outcome."""
    todo_operations_total.labels(operation=operation, outcome=outcome).inc()


def update_live_todos(count: int):
    """Update live todos gauge."""
    todos_live.set(count)


async def metrics_endpoint(repository: ITodoRepository = Depends(get_todo_repository)):
    """
    Prometheus metrics endpoint.

    The live todos gauge is read from the repository at scrape time.

    Returns:
        Response with Prometheus metrics in text format
    """
    update_live_todos(await repository.count())
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

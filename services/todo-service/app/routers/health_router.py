"""
Health check router.

Provides the root greeting, liveness and readiness endpoints.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from ..config import Settings
from ..dependencies import get_settings, get_todo_repository, is_repository_ready
from ..models import HealthResponse, ReadinessResponse

router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse, summary="Greeting")
async def root():
    """Root endpoint."""
    return "Hello!"


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Basic health check endpoint - returns 200 if service is running",
)
async def health_check(app_settings: Settings = Depends(get_settings)):
    """
    Basic health check.

    Always returns 200 OK if the service is running.
    """
    return HealthResponse(
        status="healthy",
        service=app_settings.SERVICE_NAME,
        version=app_settings.SERVICE_VERSION,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    summary="Readiness check",
    description="Check if the todo repository is available",
)
async def readiness_check():
    """
    Readiness check.

    Reports whether a repository has been injected and how many
    todos it currently holds.
    """
    checks: dict = {"repository": "unavailable"}

    if is_repository_ready():
        todos = await get_todo_repository().count()
        checks = {"repository": "healthy", "todos": todos}

    return ReadinessResponse(
        ready=checks["repository"] == "healthy",
        checks=checks,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )

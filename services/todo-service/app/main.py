"""
Todo Service - Main Application.

This file wires together all layers:
- Domain: Todo entity and domain exceptions
- Repositories: Concurrent-safe todo storage
- Routers: HTTP endpoints
"""

import argparse
from contextlib import asynccontextmanager
from typing import Optional, Sequence

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, settings
from .dependencies import create_todo_repository, set_todo_repository
from .domain.exceptions import (
    InvalidIdentifierException,
    TodoServiceException,
    ValidationException,
)
from .logging_config import setup_logging
from .metrics import metrics_endpoint, track_request_metrics
from .metrics_middleware import PrometheusMiddleware, RequestIDMiddleware
from .routers import health_router, todo_router

logger = structlog.get_logger(__name__)


def _error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    details: Optional[dict] = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": error,
            "message": message,
            "details": details or {},
            "request_id": getattr(request.state, "request_id", None),
        },
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    app_settings: Settings = app.state.settings
    logger.info(
        "Starting Todo Service",
        version=app_settings.SERVICE_VERSION,
        url_prefix=app_settings.TODO_URL_PREFIX,
    )

    set_todo_repository(create_todo_repository())
    logger.info("Todo repository initialized")

    yield

    logger.info("Shutting down Todo Service")
    set_todo_repository(None)
    logger.info("Todo Service stopped")


def create_app(app_settings: Settings = settings) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to configure the app with

    Returns:
        Configured FastAPI instance
    """
    setup_logging(app_settings.LOG_LEVEL, json_logs=app_settings.LOG_JSON)

    application = FastAPI(
        title="Todo Service",
        description="Create, read, update and delete todo items",
        version=app_settings.SERVICE_VERSION,
        lifespan=lifespan,
        docs_url="/docs" if app_settings.DEBUG else None,
        redoc_url="/redoc" if app_settings.DEBUG else None,
    )
    application.state.settings = app_settings

    application.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    application.add_middleware(PrometheusMiddleware, track_func=track_request_metrics)
    application.add_middleware(RequestIDMiddleware)

    application.include_router(health_router.router)
    application.include_router(todo_router.router)
    application.add_api_route(
        "/metrics", metrics_endpoint, methods=["GET"], include_in_schema=False
    )

    @application.exception_handler(InvalidIdentifierException)
    async def invalid_identifier_handler(request: Request, exc: InvalidIdentifierException):
        """Reject ids the client could not have got from us."""
        logger.warning("Invalid todo identifier", path=request.url.path, **exc.details)
        return _error_response(
            request, status.HTTP_400_BAD_REQUEST, "invalid_identifier", exc.message, exc.details
        )

    @application.exception_handler(ValidationException)
    async def validation_exception_handler(request: Request, exc: ValidationException):
        """Reject malformed creates and updates."""
        logger.warning("Todo validation failed", path=request.url.path, field=exc.field)
        return _error_response(
            request, status.HTTP_400_BAD_REQUEST, "validation_error", exc.message, exc.details
        )

    @application.exception_handler(TodoServiceException)
    async def service_exception_handler(request: Request, exc: TodoServiceException):
        """Map any other domain error to a bad request."""
        return _error_response(
            request, status.HTTP_400_BAD_REQUEST, "bad_request", exc.message, exc.details
        )

    @application.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Report undecodable request bodies as bad requests."""
        return _error_response(
            request,
            status.HTTP_400_BAD_REQUEST,
            "invalid_request",
            "Request body could not be decoded",
            {"errors": jsonable_errors(exc)},
        )

    @application.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Wrap HTTP errors in the common error envelope."""
        error = "not_found" if exc.status_code == status.HTTP_404_NOT_FOUND else "http_error"
        return _error_response(request, exc.status_code, error, str(exc.detail))

    @application.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle all unhandled exceptions."""
        logger.error(
            "Unhandled exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_info=True,
        )
        return _error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "internal_server_error",
            "An unexpected error occurred",
        )

    return application


def jsonable_errors(exc: RequestValidationError) -> list:
    """Reduce pydantic errors to their location, message and type."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]


app = create_app()


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Run the todo service")
    parser.add_argument(
        "--hostname",
        default=settings.HOST,
        help=f"Bind address (default: {settings.HOST})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.PORT,
        help=f"Port to listen on (default: {settings.PORT})",
    )
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help=f"Logging level (default: {settings.LOG_LEVEL})",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point."""
    import uvicorn

    args = parse_args(argv)
    if args.log_level != settings.LOG_LEVEL:
        setup_logging(args.log_level, json_logs=settings.LOG_JSON)

    logger.info("Starting server", host=args.hostname, port=args.port)
    uvicorn.run(
        app,
        host=args.hostname,
        port=args.port,
        log_level=args.log_level.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    main()

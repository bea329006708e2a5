"""
Logging configuration module for todo service.

Provides structured logging with structlog on top of the standard library
logging module, plus request ID tracking through structlog's contextvars.
"""

import logging
import sys
from typing import Optional
from uuid import uuid4

import structlog


def setup_logging(log_level: str = "INFO", json_logs: bool = False) -> None:
    """
    Configure application logging.

    Supports JSON structured logging for production and console
    output for development.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Use JSON rendering instead of console rendering
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def bind_request_id(request_id: Optional[str] = None) -> str:
    """
    Bind a request ID to the logging context.

    Args:
        request_id: Request ID to bind, generates new UUID if None

    Returns:
        The request ID that was bound
    """
    if request_id is None:
        request_id = str(uuid4())
    structlog.contextvars.bind_contextvars(request_id=request_id)
    return request_id


def clear_request_id() -> None:
    """Clear request-scoped logging context."""
    structlog.contextvars.clear_contextvars()

"""
Configuration module for todo service.

This module provides centralized configuration management using Pydantic settings.
All configuration values can be overridden via environment variables or .env file.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings for the todo service.

    All settings can be configured via environment variables.

    Attributes:
        SERVICE_NAME: Name used in logs and health responses
        SERVICE_VERSION: Reported service version
        HOST: Server bind address
        PORT: Server port number (0 picks a free port)
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        LOG_JSON: Render logs as JSON instead of console output
        TODO_URL_PREFIX: Prefix for the url of every created todo
        CORS_ORIGINS: Comma-separated list of allowed origins
        DEBUG: Enable debug mode (exposes API docs)
    """

    # Service configuration
    SERVICE_NAME: str = Field(default="todo-service")
    SERVICE_VERSION: str = Field(default="1.0.0")
    DEBUG: bool = Field(default=False, description="Enable debug mode")

    # Server configuration
    HOST: str = Field(default="127.0.0.1", description="Server bind address")
    PORT: int = Field(default=8080, ge=0, le=65535, description="Server port number")

    # Logging configuration
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    LOG_JSON: bool = Field(default=False, description="Emit JSON structured logs")

    # Todo configuration
    TODO_URL_PREFIX: str = Field(
        default="http://localhost:8080/todos/",
        description="Prefix used to build the url of each todo",
    )

    # CORS
    CORS_ORIGINS: str = Field(default="*")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("TODO_URL_PREFIX")
    @classmethod
    def validate_url_prefix(cls, value: str) -> str:
        """
        Validate the todo url prefix.

        Args:
            value: The prefix to validate

        Returns:
            The prefix, ending with a slash

        Raises:
            ValueError: If prefix is not an http(s) URL
        """
        if not (value.startswith("http://") or value.startswith("https://")):
            raise ValueError(
                f"TODO_URL_PREFIX must start with http:// or https://, got: {value}"
            )

        if not value.endswith("/"):
            value += "/"

        return value

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins string into list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]


# Global settings instance
settings = Settings()

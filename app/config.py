"""
Configuration module for hello service.

This module provides centralized configuration management using Pydantic settings.
All configuration values can be overridden via environment variables or .env file.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings for the hello service.

    All settings can be configured via environment variables.
    Settings are validated on instantiation to ensure correct configuration.

    Attributes:
        SERVICE_NAME: Name used for logger identification
        DEBUG: Enable debug mode (exposes API docs)
        HOST: Server bind address
        PORT: Server port number
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        LOG_JSON: Emit JSON structured logs instead of human-readable lines
        ENABLE_REQUEST_TRACING: Enable request ID tracking and request logging
    """

    SERVICE_NAME: str = Field(
        default="hello-service",
        description="Name used for logger identification",
    )
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    # Server configuration
    HOST: str = Field(
        default="0.0.0.0",
        description="Server bind address",
    )
    PORT: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Server port number",
    )

    # Logging configuration
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    LOG_JSON: bool = Field(
        default=False,
        description="Use JSON structured logging",
    )

    ENABLE_REQUEST_TRACING: bool = Field(
        default=True,
        description="Enable request tracing with request IDs",
    )

    # An empty PORT (or any other empty variable) falls back to the default
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Build settings from the current environment once and cache them.

    Returns:
        Validated Settings instance

    Raises:
        pydantic.ValidationError: If any variable fails validation
    """
    return Settings()

"""
Base configuration module for FastCatch.

This module provides the base settings class that environment-specific
settings classes inherit from. It covers the application identity, logging
and the error rendering options.
"""

import logging

from pydantic import ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings

ERROR_RESPONSE_FORMATS = ("text", "json")


class BaseAppSettings(BaseSettings):
    """
    Base settings class for application configuration.

    Attributes:
        APP_NAME: The name of the application
        DEBUG: Flag to enable/disable debug logging
        VERSION: Application version string
        LOG_LEVEL: Default level for loggers created by fastcatch.logging
        LOG_JSON_FORMAT: Emit logs as JSON lines instead of plain text
        ERROR_RESPONSE_FORMAT: Body format of the default error renderer,
            "text" ("404 Not Found") or "json" (ErrorResponse envelope)
        ERROR_LOG_LEVEL: Level used when rescue() logs an intercepted exception
    """

    APP_NAME: str = Field(default="FastCatch")
    DEBUG: bool = Field(default=False)
    VERSION: str = Field(default="0.1.0")

    # Logging configuration
    LOG_LEVEL: str = Field(default="INFO", description="Default logging level")
    LOG_JSON_FORMAT: bool = Field(
        default=False, description="Emit logs as JSON lines"
    )

    # Error rendering configuration
    ERROR_RESPONSE_FORMAT: str = Field(
        default="text", description='Default error body format: "text" or "json"'
    )
    ERROR_LOG_LEVEL: str = Field(
        default="DEBUG", description="Level for exceptions intercepted by rescue()"
    )

    @field_validator("ERROR_RESPONSE_FORMAT", mode="before")
    def validate_error_response_format(cls, value):
        """Ensure the default error body format is one we can render."""
        value = str(value).lower()
        if value not in ERROR_RESPONSE_FORMATS:
            raise ValueError(
                f"ERROR_RESPONSE_FORMAT must be one of {ERROR_RESPONSE_FORMATS}. "
                f"You provided: {value}"
            )
        return value

    @field_validator("LOG_LEVEL", "ERROR_LOG_LEVEL", mode="before")
    def validate_log_level(cls, value):
        """Ensure log levels are standard logging level names."""
        value = str(value).upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"Unknown log level: {value}")
        return value

    model_config = ConfigDict(env_file=".env", case_sensitive=True)

"""
Development environment specific settings.
"""

from .base import BaseAppSettings


class DevelopmentSettings(BaseAppSettings):
    """
    Settings class for development environment.

    Enables debug mode and verbose logging.

    Attributes:
        DEBUG: Always True in development
        LOG_LEVEL: DEBUG in development
    """

    DEBUG: bool = True
    LOG_LEVEL: str = "DEBUG"

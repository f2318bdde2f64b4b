"""
Production environment specific settings.

Production logs are emitted as JSON so they can be shipped to a log
aggregation service.
"""

from .base import BaseAppSettings


class ProductionSettings(BaseAppSettings):
    """
    Settings class for production environment.

    Attributes:
        DEBUG: Always False in production
        LOG_JSON_FORMAT: Always True in production
    """

    DEBUG: bool = False
    LOG_JSON_FORMAT: bool = True

"""
Configuration module for FastCatch.

This module provides:
- BaseAppSettings: The base class for application settings, supporting environment variable loading.
- Environment-specific settings (development, testing, production).
- get_settings: Factory for loading the correct settings class based on APP_ENV.

Example environment variables (to be placed in your consuming project's .env or environment):

APP_NAME=FastCatch
APP_ENV=development
DEBUG=True
LOG_LEVEL=INFO
LOG_JSON_FORMAT=False
ERROR_RESPONSE_FORMAT=text
ERROR_LOG_LEVEL=DEBUG
"""

from .base import BaseAppSettings
from .development import DevelopmentSettings
from .production import ProductionSettings
from .settings import get_settings
from .testing import TestingSettings

__all__ = [
    "BaseAppSettings",
    "get_settings",
    "DevelopmentSettings",
    "ProductionSettings",
    "TestingSettings",
]

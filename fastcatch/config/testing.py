"""
Testing environment specific settings.
"""

from .base import BaseAppSettings


class TestingSettings(BaseAppSettings):
    """Settings class for the test environment."""

    __test__ = False

    DEBUG: bool = False
    LOG_LEVEL: str = "WARNING"

"""
FastAPI application configuration module.

This module provides a function to configure FastAPI applications
with settings and FastCatch error handling.
"""

from typing import Optional

from fastapi import FastAPI

from fastcatch.config import BaseAppSettings, get_settings
from fastcatch.errors import setup_errors
from fastcatch.logging import ensure_logger


def configure_app(app: FastAPI, settings: Optional[BaseAppSettings] = None) -> None:
    """
    Configure a FastAPI application with standard settings and error handling.

    Args:
        app: The FastAPI application to configure
        settings: Optional application settings, if not provided will be loaded
                 from environment
    """
    app_settings = settings or get_settings()

    logger = ensure_logger(None, __name__, app_settings)

    if not app.title:
        app.title = app_settings.APP_NAME
    if not app.version:
        app.version = app_settings.VERSION

    app.debug = app_settings.DEBUG

    setup_errors(app, app_settings, logger)
    logger.debug(f"FastCatch configured for '{app.title}'")

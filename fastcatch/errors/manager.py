"""
Error management functionality for FastAPI applications.

This module provides the main entry point for configuring error handling
in a FastAPI application.
"""

from typing import Optional

from fastapi import FastAPI

from fastcatch.config.base import BaseAppSettings
from fastcatch.errors.handlers import register_exception_handlers
from fastcatch.logging import ensure_logger


def setup_errors(
    app: FastAPI,
    settings: Optional[BaseAppSettings] = None,
    logger: Optional[object] = None,
) -> None:
    """
    Configure error handling for a FastAPI application.

    Registers the handler that serves responses raised with ``abort``.

    Args:
        app: FastAPI application instance
        settings: Optional application settings
        logger: Optional logger for logging aborted requests
    """
    log = ensure_logger(logger, __name__, settings)
    register_exception_handlers(app, logger=log)

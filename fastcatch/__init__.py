"""
FastCatch - Turn any error value into an HTTP response in FastAPI handlers.

This package converts heterogeneous error values into responses without
forcing them into one error hierarchy. Each error site decides how the
failure is shown: hidden behind a status code, shown as plain text, or
rendered by a custom producer.

Usage:
    from fastapi import FastAPI
    from fastcatch import stop, transparent_stop, catch

    app = FastAPI()

    @app.get("/items/{item_id}")
    def read_item(item_id: int):
        try:
            return load_item(item_id)
        except LookupError as exc:
            return stop(404)(exc)
"""

__version__ = "0.1.0"

# Public API exports
from fastcatch.config import BaseAppSettings, get_settings
from fastcatch.errors import Abort, InvalidStatusCodeError, setup_errors
from fastcatch.factory import configure_app
from fastcatch.logging import get_logger
from fastcatch.pipeline import (
    abort,
    attempt,
    catch,
    custom_response,
    rescue,
    stop,
    transparent_stop,
)
from fastcatch.responses import (
    default_response,
    get_default_renderer,
    into_response,
    json_response,
    transparent,
)

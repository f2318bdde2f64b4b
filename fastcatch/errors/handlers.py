"""
Exception handlers for FastAPI applications.

The only exception FastCatch needs the framework to handle is ``Abort``,
which already carries the response to serve. Everything else is left to the
application and the framework defaults.
"""

from functools import partial
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import Response

from fastcatch.errors.exceptions import Abort
from fastcatch.logging import Logger, ensure_logger


async def abort_handler(
    request: Request, exc: Abort, logger: Optional[Logger] = None
) -> Response:
    """
    Handler for Abort.

    Args:
        request: FastAPI request
        exc: Abort instance
        logger: Optional logger to use instead of default logging

    Returns:
        The response prepared when the request was aborted
    """
    log = ensure_logger(logger, __name__)
    log.debug(
        f"Request {request.method} {request.url.path} aborted "
        f"with status {exc.response.status_code}"
    )
    return exc.response


def register_exception_handlers(app: FastAPI, logger: Optional[Logger] = None) -> None:
    """
    Register FastCatch exception handlers with a FastAPI application.

    Args:
        app: FastAPI application instance
        logger: Optional logger for logging aborted requests
    """
    app.exception_handler(Abort)(partial(abort_handler, logger=logger))

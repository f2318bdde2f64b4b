"""
Renderers that turn a status code (and possibly an error) into a response.

- ``default_response``: minimal plain-text body derived from the status only.
- ``json_response``: the same information wrapped in the ErrorResponse envelope.
- ``transparent``: plain-text body showing the error's ``str()``.

Default renderers never look at the error value and never carry diagnostic
information, whatever the environment.
"""

from typing import Any, Callable, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from fastcatch.config.base import BaseAppSettings
from fastcatch.logging import get_logger
from fastcatch.responses.status import (
    StatusLike,
    reason_constant,
    reason_phrase,
    status_line,
    to_status_code,
)
from fastcatch.schemas import ErrorInfo, ErrorResponse, ResponseMetadata

DefaultRenderer = Callable[[int], Response]

logger = get_logger(__name__)


def default_response(code: StatusLike) -> Response:
    """
    Create the default error response for a given status code.

    The body is the numeric code followed by the canonical reason phrase,
    e.g. ``"404 Not Found"``. Unknown codes render as the bare number.

    Args:
        code: HTTP status code

    Returns:
        Plain-text response carrying the status code
    """
    status = to_status_code(code)
    return PlainTextResponse(status_line(status), status_code=status)


def json_response(code: StatusLike) -> Response:
    """
    Create the default error response as a JSON ErrorResponse envelope.

    Args:
        code: HTTP status code

    Returns:
        JSON response carrying the status code
    """
    status = to_status_code(code)
    message = reason_phrase(status) or status_line(status)
    body = ErrorResponse(
        message=message,
        errors=[ErrorInfo(code=reason_constant(status), message=message)],
        metadata=ResponseMetadata(),
    )
    return JSONResponse(status_code=status, content=jsonable_encoder(body))


def transparent(code: StatusLike, error: Any) -> Response:
    """
    Create a response showing the error's text as a plain-text body.

    Usable directly as the producer argument of ``catch``; it always
    produces a response. An empty ``str(error)`` yields an empty body.

    Args:
        code: HTTP status code
        error: Any value; its ``str()`` becomes the body

    Returns:
        Plain-text response carrying the status code
    """
    status = to_status_code(code)
    try:
        body = str(error)
    except Exception:
        logger.warning(
            f"Could not render {type(error).__name__} as text, using status line",
            exc_info=True,
        )
        body = status_line(status)
    return PlainTextResponse(body, status_code=status)


def get_default_renderer(settings: Optional[BaseAppSettings] = None) -> DefaultRenderer:
    """
    Pick the default renderer configured by ERROR_RESPONSE_FORMAT.

    Args:
        settings: Optional application settings

    Returns:
        ``json_response`` for "json", ``default_response`` otherwise
    """
    if settings and getattr(settings, "ERROR_RESPONSE_FORMAT", "text") == "json":
        return json_response
    return default_response

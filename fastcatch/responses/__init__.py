"""
Response building blocks.

This module provides status code handling, conversion of response-like
values into Starlette responses, and the renderers used by the catch
pipeline.
"""

from fastcatch.responses.convert import into_response, set_headers
from fastcatch.responses.render import (
    DefaultRenderer,
    default_response,
    get_default_renderer,
    json_response,
    transparent,
)
from fastcatch.responses.status import (
    StatusLike,
    reason_constant,
    reason_phrase,
    status_line,
    to_status_code,
)

__all__ = [
    # Conversion
    "into_response",
    "set_headers",
    # Renderers
    "DefaultRenderer",
    "default_response",
    "json_response",
    "transparent",
    "get_default_renderer",
    # Status codes
    "StatusLike",
    "to_status_code",
    "reason_phrase",
    "reason_constant",
    "status_line",
]

"""
Conversion of response-like values into Starlette responses.

Producers passed to ``catch`` may return a ready ``Response`` or any of the
shorthand forms below, which keeps custom error responses short to write:

    "plain text"                          -> 200 text/plain
    {"err": "..."} / [..] / BaseModel     -> 200 application/json
    b"..."                                -> 200 application/octet-stream
    409                                   -> 409 with an empty body
    (409, body)                           -> body converted, status 409
    (409, {"Retry-After": "30"}, body)    -> same, plus headers (replacing)
    ([("Set-Cookie", "a=b")], body)       -> body converted, plus headers
"""

import copy
from collections.abc import Mapping
from typing import Any, Iterable, Tuple, Union

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from pydantic import BaseModel

from fastcatch.responses.status import to_status_code

HeadersLike = Union[Mapping, Iterable[Tuple[str, str]]]


def into_response(value: Any) -> Response:
    """
    Convert a response-like value into a Response.

    Args:
        value: A Response, a body value or a (status, headers, body) tuple

    Returns:
        The converted response. Response instances are returned unmodified.

    Raises:
        TypeError: If the value has no response representation
    """
    if isinstance(value, Response):
        return value

    if value is None:
        return Response(status_code=200)

    if isinstance(value, bool):
        raise TypeError("bool cannot be converted into a response")

    if isinstance(value, int):
        return Response(status_code=to_status_code(value))

    if isinstance(value, str):
        return PlainTextResponse(value)

    if isinstance(value, (bytes, bytearray)):
        return Response(bytes(value), media_type="application/octet-stream")

    if isinstance(value, (BaseModel, dict, list)):
        return JSONResponse(content=jsonable_encoder(value))

    if isinstance(value, tuple):
        return _tuple_into_response(value)

    raise TypeError(
        f"{type(value).__name__} cannot be converted into a response"
    )


def _tuple_into_response(parts: tuple) -> Response:
    """Convert the (status, headers, body) family of tuples."""
    if len(parts) == 3:
        status, headers, body = parts
    elif len(parts) == 2 and _is_status(parts[0]):
        status, body = parts
        headers = None
    elif len(parts) == 2:
        headers, body = parts
        status = None
    else:
        raise TypeError(
            f"response tuple must have 2 or 3 items, got {len(parts)}"
        )

    # Shared Response objects must not pick up this request's status or headers
    if isinstance(body, Response):
        response = _copy_response(body)
    else:
        response = into_response(body)

    if status is not None:
        if not _is_status(status):
            raise TypeError(f"invalid status in response tuple: {status!r}")
        response.status_code = to_status_code(status)

    if headers is not None:
        set_headers(response, headers)

    return response


def set_headers(response: Response, headers: HeadersLike) -> Response:
    """
    Set headers on a response.

    The first occurrence of a name replaces any value the response already
    carries (e.g. ``Content-Type``). Later occurrences of the same name are
    appended, so several ``Set-Cookie`` values survive side by side.
    """
    pairs = headers.items() if isinstance(headers, Mapping) else headers
    seen = set()
    for name, value in pairs:
        name = str(name)
        key = name.lower()
        if key not in seen:
            del response.headers[name]
            seen.add(key)
        response.headers.append(name, str(value))
    return response


def _copy_response(response: Response) -> Response:
    copied = copy.copy(response)
    copied.raw_headers = list(response.raw_headers)
    # Starlette caches the MutableHeaders view bound to the original list
    copied.__dict__.pop("_headers", None)
    return copied


def _is_status(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().isdigit()
    return isinstance(value, int) and not isinstance(value, bool)

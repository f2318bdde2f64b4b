"""
Response schemas for error envelopes.
"""

from fastcatch.schemas.response.base import BaseResponse
from fastcatch.schemas.response.error import ErrorInfo, ErrorResponse

__all__ = [
    "BaseResponse",
    "ErrorResponse",
    "ErrorInfo",
]

"""
Schemas used by FastCatch renderers.

This module provides the Pydantic schemas for the optional JSON error
envelope and its metadata.

Limitations:
- Envelope structure is fixed; customization requires subclassing or code changes
- Only basic metadata (timestamp, version) is included by default
"""

from fastcatch.schemas.metadata import BaseMetadata, ResponseMetadata
from fastcatch.schemas.response import BaseResponse, ErrorInfo, ErrorResponse

__all__ = [
    # Metadata schemas
    "BaseMetadata",
    "ResponseMetadata",
    # Response schemas
    "BaseResponse",
    "ErrorResponse",
    "ErrorInfo",
]

"""
Error response schemas.

This module contains the schemas rendered by the JSON default renderer
(:func:`fastcatch.responses.json_response`).

Limitations:
- Envelope structure is fixed; customization requires subclassing or a custom
  default renderer passed to ``catch``
- No built-in support for localization
"""

from typing import List

from pydantic import BaseModel, Field

from fastcatch.schemas.metadata import ResponseMetadata
from fastcatch.schemas.response.base import BaseResponse


class ErrorInfo(BaseModel):
    """
    Error code and message for one error.

    Attributes:
        code: Error code identifier
        message: Human-readable error message
    """

    code: str = Field(..., description="Error code identifier")
    message: str = Field(..., description="Human-readable error message")


class ErrorResponse(BaseResponse):
    """
    Schema for error responses.

    Attributes:
        errors: List of error details (ErrorInfo)
        metadata: Standard response metadata
        success: Always false for error responses
        message: Error message
    """

    success: bool = Field(default=False, description="Always false for error responses")
    metadata: ResponseMetadata = Field(
        default_factory=ResponseMetadata, description="Standard response metadata"
    )
    errors: List[ErrorInfo] = Field(
        default_factory=list, description="List of error details"
    )

"""
Base response schema.

The JSON error envelope inherits from this schema so that error bodies keep
the same shape (success, metadata, message) as regular API responses.
"""

from typing import Optional

from pydantic import BaseModel, Field

from fastcatch.schemas.metadata import BaseMetadata


class BaseResponse(BaseModel):
    """
    Base schema for API response envelopes.

    Attributes:
        success: Whether the request was successful
        metadata: Response metadata
        message: Additional context about the response
    """

    success: bool = Field(
        default=True, description="Indicates if the request was successful"
    )
    metadata: BaseMetadata
    message: Optional[str] = Field(
        default=None, description="Additional context about the response"
    )

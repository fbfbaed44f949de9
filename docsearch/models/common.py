"""
Common response models.

Error envelope shared by every failing endpoint.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response schema."""

    success: bool = False
    error: str = Field(description="Error message")
    detail: str | None = Field(default=None, description="Underlying error text, when exposed")


class MessageResponse(BaseModel):
    """Static acknowledgment."""

    message: str

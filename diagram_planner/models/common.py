"""
Common response models.

Generic result and error schemas shared by the pipeline and the API.

Dependencies: pydantic
System role: Common result structures
"""

from typing import Any

from pydantic import BaseModel, Field


class ToolResult(BaseModel):
    """Outcome of one board operation or one whole diagram request."""

    success: bool
    message: str = Field(description="Human-readable summary")
    data: Any | None = Field(default=None, description="Operation-specific payload")

    @classmethod
    def ok(cls, message: str, data: Any | None = None) -> "ToolResult":
        """Build a successful result."""
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(cls, message: str, data: Any | None = None) -> "ToolResult":
        """Build a failed result."""
        return cls(success=False, message=message, data=data)


class ErrorResponse(BaseModel):
    """Error response schema."""

    success: bool = False
    error: str = Field(description="Error message")
    details: dict | None = Field(default=None, description="Additional error context")

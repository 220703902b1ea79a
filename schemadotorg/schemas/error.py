"""
Pydantic schemas for error responses.
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Standard error response format.

    Examples:
        422: {"error": "invalid_mapping_value", "message": "...", "details": {"key": ..., "kind": ...}}
        422: {"error": "path_not_found", "message": "...", "details": {"path": ..., "segment": ...}}
        422: {"error": "array_expansion_type_mismatch", "message": "..."}
    """

    error: str = Field(
        ...,
        description="Error code string",
        examples=["invalid_mapping_value", "path_not_found", "reserved_marker"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] | None = Field(
        default=None,
        description="Optional additional error details",
    )

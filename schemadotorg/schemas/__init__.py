"""
Pydantic schemas for request/response validation.
"""

from schemadotorg.schemas.jsonld import (
    GenerateRequest,
    RenderRequest,
    SchemaEntry,
    ValidateRequest,
    ValidateResponse,
)
from schemadotorg.schemas.error import ErrorResponse

__all__ = [
    "GenerateRequest",
    "RenderRequest",
    "SchemaEntry",
    "ValidateRequest",
    "ValidateResponse",
    "ErrorResponse",
]

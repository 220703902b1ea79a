"""Core utilities and exceptions for the schema.org service."""

from schemadotorg.core.exceptions import (
    SchemaDotOrgException,
    InvalidMappingValue,
    ReservedMarkerError,
    PathNotFound,
    ArrayExpansionTypeMismatch,
    RenderContextClosed,
)

__all__ = [
    "SchemaDotOrgException",
    "InvalidMappingValue",
    "ReservedMarkerError",
    "PathNotFound",
    "ArrayExpansionTypeMismatch",
    "RenderContextClosed",
]

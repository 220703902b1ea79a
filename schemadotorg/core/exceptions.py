"""
Custom exceptions for the schema.org JSON-LD service.

Mapping errors are programming errors in a caller's schema definition and
are always raised to the caller; the API layer renders them as 422 bodies.
"""

from typing import Any


class SchemaDotOrgException(Exception):
    """Base exception for all schema.org service errors."""

    def __init__(
        self,
        error: str,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        self.error = error
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to response dictionary."""
        response = {
            "error": self.error,
            "message": self.message,
        }
        if self.details:
            response["details"] = self.details
        return response


def kind_of(value: Any) -> str:
    """Name of a value's type as reported in error messages."""
    if callable(value) and not isinstance(value, type):
        return "callable"
    return type(value).__name__


class InvalidMappingValue(SchemaDotOrgException):
    """422 - A mapping value is not one of the recognised kinds."""

    def __init__(self, key: Any, value: Any, message: str | None = None):
        self.key = key
        self.kind = kind_of(value)
        super().__init__(
            error="invalid_mapping_value",
            message=message or f"Invalid mapping type `{self.kind}` for `{key}`",
            status_code=422,
            details={"key": str(key), "kind": self.kind},
        )


class ReservedMarkerError(InvalidMappingValue):
    """422 - A path begins with a reserved marker character or is empty."""

    def __init__(self, key: Any, path: str):
        self.path = path
        super().__init__(
            key,
            path,
            message=f"Path `{path}` for `{key}` is empty or begins with a reserved marker",
        )
        self.error = "reserved_marker"
        self.details["path"] = path


class PathNotFound(SchemaDotOrgException):
    """422 - A dotted path does not resolve against the model."""

    def __init__(self, path: str, segment: str):
        self.path = path
        self.segment = segment
        super().__init__(
            error="path_not_found",
            message=f"Path `{path}` not found in model (missing `{segment}`)",
            status_code=422,
            details={"path": path, "segment": segment},
        )


class ArrayExpansionTypeMismatch(SchemaDotOrgException):
    """422 - An array expansion entry is malformed or its source is not a sequence."""

    def __init__(self, key: Any, message: str):
        self.key = key
        super().__init__(
            error="array_expansion_type_mismatch",
            message=message,
            status_code=422,
            details={"key": str(key)},
        )


class RenderContextClosed(SchemaDotOrgException):
    """500 - A schema was registered after the render context was flushed."""

    def __init__(self):
        super().__init__(
            error="render_context_closed",
            message="Render context has already been flushed",
            status_code=500,
        )

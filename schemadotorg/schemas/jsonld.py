"""
Pydantic schemas for JSON-LD request/response validation.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

PathPolicyName = Literal["strict", "null", "omit"]


class SchemaEntry(BaseModel):
    """A model paired with the mapping that describes it."""

    model: Any = Field(..., description="Data the mapping paths are resolved against")
    mapping: dict[str, Any] | list[Any] = Field(
        ...,
        description="Declarative mapping, e.g. {\"PostalAddress\": [\"streetAddress\"]}",
    )

    model_config = ConfigDict(protected_namespaces=())


class GenerateRequest(SchemaEntry):
    """Request body for generating a single JSON-LD document."""

    policy: PathPolicyName | None = Field(
        default=None,
        description="Missing-path policy; defaults to the service setting",
    )


class ValidateRequest(BaseModel):
    """Request body for validating a mapping without a model."""

    mapping: dict[str, Any] | list[Any]


class ValidateResponse(BaseModel):
    """Result of a successful mapping validation."""

    valid: bool = True
    entries: int = Field(..., description="Number of entries at the top level")


class RenderRequest(BaseModel):
    """Request body for rendering several schemas into a page."""

    html: str | None = Field(
        default=None,
        description="Page to inject the scripts into; a minimal page is used when omitted",
    )
    schemas: list[SchemaEntry] = Field(default_factory=list)
    policy: PathPolicyName | None = None

"""
JSON-LD mapping engine.
Compiles declarative mappings and interprets them against models.
"""

from schemadotorg.jsonld.context import (
    SCHEMA_ORG_CONTEXT,
    STRING_LITERAL,
    ENUMERATION,
    ARRAY,
)
from schemadotorg.jsonld.mapping import MappingLevel, compile_mapping
from schemadotorg.jsonld.paths import PathPolicy, resolve_path
from schemadotorg.jsonld.transform import generate, interpret

__all__ = [
    "SCHEMA_ORG_CONTEXT",
    "STRING_LITERAL",
    "ENUMERATION",
    "ARRAY",
    "MappingLevel",
    "PathPolicy",
    "compile_mapping",
    "generate",
    "interpret",
    "resolve_path",
]

"""
schema.org JSON-LD mapping service

Turns application models into schema.org JSON-LD documents driven by
declarative mappings, and embeds them in rendered pages.
"""

from schemadotorg.jsonld.mapping import compile_mapping
from schemadotorg.jsonld.paths import PathPolicy, resolve_path
from schemadotorg.jsonld.transform import generate, interpret

__version__ = "1.0.0"

__all__ = [
    "PathPolicy",
    "compile_mapping",
    "generate",
    "interpret",
    "resolve_path",
]

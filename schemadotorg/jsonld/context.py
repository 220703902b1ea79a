"""
JSON-LD context and mapping marker definitions.

Markers are only significant as the first character of a mapping value
(literal, enumeration) or key (array expansion). Model paths must never
begin with one of them.
"""

# schema.org context for JSON-LD
SCHEMA_ORG_CONTEXT = "https://schema.org"

# Value prefix: emit the remainder verbatim, e.g. ":EUR" -> "EUR"
STRING_LITERAL = ":"

# Value prefix: schema.org enumeration member, e.g. "@InStock"
ENUMERATION = "@"

# Key prefix: expand a model sequence, e.g. {"[alumni": {"Person": [...]}}
ARRAY = "["

RESERVED_MARKERS = frozenset({STRING_LITERAL, ENUMERATION, ARRAY})

JSONLD_MEDIA_TYPE = "application/ld+json"


def enumeration_iri(value: str, context: str = SCHEMA_ORG_CONTEXT) -> str:
    """
    Expand an enumeration member to its full IRI.

    Args:
        value: Enumeration member name, e.g. "InStock"
        context: Vocabulary base IRI

    Returns:
        e.g. "https://schema.org/InStock"
    """
    return f"{context.rstrip('/')}/{value}"


def is_type_name(key: object) -> bool:
    """A mapping key naming a schema.org type begins with an uppercase letter."""
    return isinstance(key, str) and "A" <= key[:1] <= "Z"


def starts_with_marker(text: str) -> bool:
    """Whether a string begins with one of the reserved marker characters."""
    return text[:1] in RESERVED_MARKERS

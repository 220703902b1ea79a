"""
JSON-LD transformation.

Interprets a compiled mapping tree against a model to produce a
JSON-compatible structure, and wraps it as a schema.org document.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel

from schemadotorg.config import get_settings
from schemadotorg.core.exceptions import ArrayExpansionTypeMismatch, InvalidMappingValue
from schemadotorg.jsonld.context import ARRAY, enumeration_iri
from schemadotorg.jsonld.mapping import (
    ArrayNode,
    EnumerationLeaf,
    LiteralLeaf,
    MappingLevel,
    NestedMapping,
    PathLeaf,
    ReferenceLeaf,
    ScalarLeaf,
    TypeListNode,
    TypeNode,
    compile_mapping,
)
from schemadotorg.jsonld.paths import OMIT, PathPolicy, resolve_with_policy


def _typed(type_name: str, children: dict[str, Any]) -> dict[str, Any]:
    return {"@type": type_name, **children}


def _expand_array(
    model: Any,
    node: ArrayNode,
    context_key: str | None,
    policy: PathPolicy,
    context: str,
) -> Any:
    path = node.source_path or context_key
    if path is None:
        raise ArrayExpansionTypeMismatch(
            ARRAY, "Array expansion `[` has no enclosing key to take its path from"
        )

    source = resolve_with_policy(model, path, policy)
    if source is OMIT:
        return OMIT
    if source is None and policy is not PathPolicy.STRICT:
        return None
    # Models and mappings iterate over their fields, not over elements
    if isinstance(source, (str, bytes, Mapping, BaseModel)) or not isinstance(source, Iterable):
        raise ArrayExpansionTypeMismatch(
            ARRAY + path,
            f"Array expansion source `{path}` is not a sequence",
        )

    return [
        _typed(
            node.element_type,
            _interpret_level(element, node.element_mapping, context_key, policy, context),
        )
        for element in source
    ]


def _interpret_level(
    model: Any,
    level: MappingLevel,
    context_key: str | None,
    policy: PathPolicy,
    context: str,
) -> Any:
    jsonld: dict[str, Any] = {}

    for node in level:
        # Type and array entries occupy their whole level
        if isinstance(node, TypeNode):
            return _typed(
                node.type_name,
                _interpret_level(model, node.children, context_key, policy, context),
            )
        if isinstance(node, TypeListNode):
            return [
                _typed(node.type_name, _interpret_level(model, item, context_key, policy, context))
                for item in node.items
            ]
        if isinstance(node, ArrayNode):
            return _expand_array(model, node, context_key, policy, context)

        if isinstance(node, (PathLeaf, ReferenceLeaf)):
            target = node.path if isinstance(node, PathLeaf) else node.resolver
            value = resolve_with_policy(model, target, policy)
        elif isinstance(node, LiteralLeaf):
            value = node.literal_value
        elif isinstance(node, EnumerationLeaf):
            value = enumeration_iri(node.enum_value, context)
        elif isinstance(node, ScalarLeaf):
            value = node.value
        elif isinstance(node, NestedMapping):
            value = _interpret_level(model, node.children, node.output_key, policy, context)
        else:
            raise InvalidMappingValue(type(node).__name__, node)

        if value is not OMIT:
            jsonld[node.output_key] = value

    return jsonld


def _resolve_options(
    policy: PathPolicy | str | None,
    context: str | None,
) -> tuple[PathPolicy, str]:
    settings = get_settings()
    return (
        PathPolicy(policy or settings.PATH_POLICY),
        context or settings.JSONLD_CONTEXT,
    )


def interpret(
    model: Any,
    mapping: Any,
    context_key: str | None = None,
    *,
    policy: PathPolicy | str | None = None,
    context: str | None = None,
) -> Any:
    """
    Interpret a mapping against a model.

    Args:
        model: Read-only data source (dict, object, pydantic model, ...)
        mapping: Raw mapping or compiled MappingLevel
        context_key: Enclosing output key; names the model sequence for a
            bare `[` array expansion
        policy: Missing-path policy (defaults to settings.PATH_POLICY)
        context: Vocabulary IRI for enumerations (defaults to settings.JSONLD_CONTEXT)

    Returns:
        A dict for object levels or a list for array levels. None when an
        omitted array expansion is the whole mapping.
    """
    policy, context = _resolve_options(policy, context)
    result = _interpret_level(model, compile_mapping(mapping), context_key, policy, context)
    return None if result is OMIT else result


def generate(
    model: Any,
    mapping: Any,
    *,
    policy: PathPolicy | str | None = None,
    context: str | None = None,
) -> dict[str, Any]:
    """
    Generate a schema.org JSON-LD document.

    "@context" is always the first key. A mapping whose top level yields an
    array is returned as an "@graph".

    Args:
        model: Read-only data source
        mapping: Raw mapping or compiled MappingLevel
        policy: Missing-path policy (defaults to settings.PATH_POLICY)
        context: @context IRI (defaults to settings.JSONLD_CONTEXT)

    Returns:
        JSON-LD document as an ordered dict
    """
    policy, context = _resolve_options(policy, context)
    result = interpret(model, mapping, policy=policy, context=context)

    document: dict[str, Any] = {"@context": context}
    if isinstance(result, list):
        document["@graph"] = result
    elif result:
        document.update(result)
    return document

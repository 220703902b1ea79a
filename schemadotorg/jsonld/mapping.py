"""
Mapping tree compilation.

A mapping is authored as plain nested dicts and lists and compiled once
into an immutable tree of nodes which the interpreter walks for every model.

Mapping levels:
    {"name": "org", "telephone": "tel"}                  keyed entries
    ["streetAddress", {"addressLocality": "locality"}]   positional paths
                                                         mixed with keyed entries

Keys:
    "PostalAddress": {...}           type name (uppercase first letter)
    "[alumni": {"Person": [...]}     expand the model sequence at "alumni"
    "[": {"Person": [...]}           expand the sequence named by the enclosing key

Values:
    "adr.locality"    dotted model path
    ":EUR"            string literal
    "@InStock"        schema.org enumeration member
    True, 3, 9.99     emitted unchanged
    callable          called with the model (computed property)
    dict | list       nested mapping
"""

import logging
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Union

from schemadotorg.core.exceptions import (
    ArrayExpansionTypeMismatch,
    InvalidMappingValue,
    ReservedMarkerError,
)
from schemadotorg.jsonld.context import (
    ARRAY,
    ENUMERATION,
    STRING_LITERAL,
    is_type_name,
    starts_with_marker,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MappingLevel:
    """An ordered set of mapping entries producing one JSON object."""

    entries: tuple["MappingNode", ...] = ()

    def __iter__(self) -> Iterator["MappingNode"]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True, slots=True)
class TypeNode:
    """Typed object: {"@type": type_name, ...children}."""

    type_name: str
    children: MappingLevel


@dataclass(frozen=True, slots=True)
class TypeListNode:
    """Array of typed objects, one per level, all read from the same model."""

    type_name: str
    items: tuple[MappingLevel, ...]


@dataclass(frozen=True, slots=True)
class ArrayNode:
    """
    Array expansion over a model sequence.

    source_path is None when the path is taken from the enclosing output key.
    """

    source_path: str | None
    element_type: str
    element_mapping: MappingLevel


@dataclass(frozen=True, slots=True)
class PathLeaf:
    output_key: str
    path: str


@dataclass(frozen=True, slots=True)
class LiteralLeaf:
    output_key: str
    literal_value: str


@dataclass(frozen=True, slots=True)
class EnumerationLeaf:
    output_key: str
    enum_value: str


@dataclass(frozen=True, slots=True)
class ScalarLeaf:
    output_key: str
    value: bool | int | float


@dataclass(frozen=True, slots=True)
class ReferenceLeaf:
    output_key: str
    resolver: Callable[[Any], Any]


@dataclass(frozen=True, slots=True)
class NestedMapping:
    """Nested object (or array) bound to output_key, without an @type."""

    output_key: str
    children: MappingLevel


MappingNode = Union[
    TypeNode,
    TypeListNode,
    ArrayNode,
    PathLeaf,
    LiteralLeaf,
    EnumerationLeaf,
    ScalarLeaf,
    ReferenceLeaf,
    NestedMapping,
]


def _entries(level: Any, parent_key: str | None) -> Iterator[tuple[Any, Any, bool]]:
    """Yield (key, value, positional) for every entry of a raw mapping level."""
    if isinstance(level, Mapping):
        for key, value in level.items():
            yield key, value, False
    elif isinstance(level, (list, tuple)):
        for index, item in enumerate(level):
            if isinstance(item, Mapping):
                for key, value in item.items():
                    yield key, value, False
            else:
                yield index, item, True
    else:
        raise InvalidMappingValue(parent_key or "<root>", level)


def _check_path(key: Any, path: str) -> str:
    if not path or starts_with_marker(path):
        raise ReservedMarkerError(key, path)
    return path


def _object_level(key: str, level: MappingLevel) -> MappingLevel:
    """Typed objects merge their children, so the children must form an object."""
    if level.entries and isinstance(level.entries[0], (ArrayNode, TypeListNode)):
        raise ArrayExpansionTypeMismatch(
            key,
            f"`{key}` produces an object and cannot hold `{node_key(level.entries[0])}` directly",
        )
    return level


def _compile_array(key: str, value: Any) -> ArrayNode:
    if not (isinstance(value, Mapping) and len(value) == 1):
        raise ArrayExpansionTypeMismatch(
            key,
            f"Array expansion `{key}` must map to a single {{TypeName: mapping}} entry",
        )

    ((element_type, element_mapping),) = value.items()
    if not is_type_name(element_type):
        raise ArrayExpansionTypeMismatch(
            key,
            f"Array expansion `{key}` element type `{element_type}` is not a type name",
        )
    if not isinstance(element_mapping, (Mapping, list, tuple)):
        raise ArrayExpansionTypeMismatch(
            key,
            f"Array expansion `{key}` element mapping must be a dict or list",
        )

    source = key[len(ARRAY):]
    return ArrayNode(
        source_path=_check_path(key, source) if source else None,
        element_type=element_type,
        element_mapping=_object_level(element_type, _compile_level(element_mapping, None)),
    )


def _compile_type(key: str, value: Any) -> TypeNode | TypeListNode:
    if isinstance(value, (list, tuple)) and value and isinstance(value[0], (list, tuple)):
        return TypeListNode(
            type_name=key,
            items=tuple(_object_level(key, _compile_level(item, key)) for item in value),
        )
    if not isinstance(value, (Mapping, list, tuple)):
        raise InvalidMappingValue(key, value)
    return TypeNode(type_name=key, children=_object_level(key, _compile_level(value, key)))


def _compile_value(key: str, value: Any) -> MappingNode:
    """Dispatch an explicitly keyed entry on the kind of its value."""
    if isinstance(value, (Mapping, list, tuple)):
        return NestedMapping(output_key=key, children=_compile_level(value, key))

    if isinstance(value, (bool, int, float)):
        return ScalarLeaf(output_key=key, value=value)

    if isinstance(value, str):
        if value.startswith(STRING_LITERAL):
            return LiteralLeaf(output_key=key, literal_value=value[1:])
        if value.startswith(ENUMERATION):
            return EnumerationLeaf(output_key=key, enum_value=value[1:])
        return PathLeaf(output_key=key, path=_check_path(key, value))

    if callable(value):
        return ReferenceLeaf(output_key=key, resolver=value)

    raise InvalidMappingValue(key, value)


def _compile_level(level: Any, parent_key: str | None) -> MappingLevel:
    if isinstance(level, MappingLevel):
        return level

    nodes: list[MappingNode] = []
    ignored: list[str] = []
    terminal: MappingNode | None = None

    for key, value, positional in _entries(level, parent_key):
        if terminal is not None:
            ignored.append(str(value) if positional else str(key))
            continue

        if positional:
            if not isinstance(value, str):
                raise InvalidMappingValue(key, value)
            _check_path(key, value)
            nodes.append(PathLeaf(output_key=value.rsplit(".", 1)[-1], path=value))
            continue

        if not isinstance(key, str):
            raise InvalidMappingValue(key, key, message=f"Mapping key `{key}` must be a string")

        if key.startswith(ARRAY):
            terminal = _compile_array(key, value)
        elif is_type_name(key):
            terminal = _compile_type(key, value)
        else:
            nodes.append(_compile_value(key, value))

    if terminal is not None:
        ignored = [node_key(node) for node in nodes] + ignored
        if ignored:
            logger.warning(
                f"Mapping entries {ignored} ignored beside `{node_key(terminal)}`; "
                "a type or array entry occupies its whole level"
            )
        return MappingLevel(entries=(terminal,))

    return MappingLevel(entries=tuple(nodes))


def node_key(node: MappingNode) -> str:
    """Name of a node as written in the mapping, for messages."""
    if isinstance(node, (TypeNode, TypeListNode)):
        return node.type_name
    if isinstance(node, ArrayNode):
        return ARRAY + (node.source_path or "")
    return node.output_key


def compile_mapping(mapping: Any) -> MappingLevel:
    """
    Compile a raw mapping into an immutable node tree.

    Compiling validates the whole mapping up front, so a malformed mapping
    fails when it is registered rather than when a page renders. Compiled
    trees hold no model state and can be shared freely.

    Args:
        mapping: Raw mapping (dict or list) or an already compiled level

    Returns:
        Compiled MappingLevel

    Raises:
        InvalidMappingValue: If a value is not a recognised kind
        ReservedMarkerError: If a path is empty or begins with a marker
        ArrayExpansionTypeMismatch: If an array entry is malformed
    """
    return _compile_level(mapping, None)

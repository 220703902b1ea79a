"""
Tests for mapping compilation.
"""

import logging

import pytest

from schemadotorg.core.exceptions import (
    ArrayExpansionTypeMismatch,
    InvalidMappingValue,
    ReservedMarkerError,
)
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


class TestLeaves:
    """Tests for leaf dispatch on value kinds."""

    def test_positional_path_uses_last_segment(self):
        level = compile_mapping(["adr.streetAddress", "name"])

        assert level.entries == (
            PathLeaf(output_key="streetAddress", path="adr.streetAddress"),
            PathLeaf(output_key="name", path="name"),
        )

    def test_keyed_values(self):
        resolver = len
        level = compile_mapping({
            "addressLocality": "locality",
            "priceCurrency": ":EUR",
            "availability": "@InStock",
            "price": 9.99,
            "quantity": 3,
            "isGift": False,
            "sku": resolver,
        })

        assert level.entries == (
            PathLeaf(output_key="addressLocality", path="locality"),
            LiteralLeaf(output_key="priceCurrency", literal_value="EUR"),
            EnumerationLeaf(output_key="availability", enum_value="InStock"),
            ScalarLeaf(output_key="price", value=9.99),
            ScalarLeaf(output_key="quantity", value=3),
            ScalarLeaf(output_key="isGift", value=False),
            ReferenceLeaf(output_key="sku", resolver=resolver),
        )

    def test_nested_mapping(self):
        level = compile_mapping({"geo": {"latitude": "lat"}})

        assert level.entries == (
            NestedMapping(
                output_key="geo",
                children=MappingLevel((PathLeaf(output_key="latitude", path="lat"),)),
            ),
        )

    def test_jsonld_keywords_are_plain_keys(self):
        level = compile_mapping({"@id": "url"})

        assert level.entries == (PathLeaf(output_key="@id", path="url"),)

    def test_declaration_order_is_kept(self):
        level = compile_mapping(["c", {"b": "x", "a": "y"}, "d"])

        assert [node.output_key for node in level] == ["c", "b", "a", "d"]


class TestTypeAndArrayNodes:
    """Tests for type names and array expansion keys."""

    def test_type_node(self, address_mapping: dict):
        level = compile_mapping(address_mapping)

        assert len(level) == 1
        node = level.entries[0]
        assert isinstance(node, TypeNode)
        assert node.type_name == "PostalAddress"
        assert len(node.children) == 4

    def test_type_list_node(self):
        level = compile_mapping({"Person": [["name"], [{"name": ":Grace"}]]})

        node = level.entries[0]
        assert isinstance(node, TypeListNode)
        assert node.type_name == "Person"
        assert len(node.items) == 2

    def test_array_with_source_path(self):
        level = compile_mapping({"[members": {"Person": ["givenName"]}})

        assert level.entries == (
            ArrayNode(
                source_path="members",
                element_type="Person",
                element_mapping=MappingLevel((PathLeaf("givenName", "givenName"),)),
            ),
        )

    def test_bare_array_marker_defers_to_enclosing_key(self):
        level = compile_mapping({"alumni": {"[": {"Person": ["givenName"]}}})

        array = level.entries[0].children.entries[0]
        assert isinstance(array, ArrayNode)
        assert array.source_path is None

    def test_siblings_of_type_node_are_dropped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="schemadotorg.jsonld.mapping"):
            level = compile_mapping({"name": "name", "Person": ["name"], "email": "email"})

        assert len(level) == 1
        assert isinstance(level.entries[0], TypeNode)
        assert "['name', 'email']" in caplog.text

    def test_compiled_level_passes_through(self, address_mapping: dict):
        level = compile_mapping(address_mapping)

        assert compile_mapping(level) is level

    def test_compiling_does_not_mutate_mapping(self, organization_mapping: dict):
        before = repr(organization_mapping)
        compile_mapping(organization_mapping)

        assert repr(organization_mapping) == before


class TestInvalidMappings:
    """Tests for mapping errors raised at construction time."""

    def test_none_value(self):
        with pytest.raises(InvalidMappingValue) as exc_info:
            compile_mapping({"Thing": {"name": None}})

        assert exc_info.value.key == "name"
        assert exc_info.value.kind == "NoneType"

    def test_unsupported_value_kind(self):
        with pytest.raises(InvalidMappingValue) as exc_info:
            compile_mapping({"tags": {"a", "b"}})

        assert exc_info.value.kind == "set"

    def test_positional_non_string(self):
        with pytest.raises(InvalidMappingValue):
            compile_mapping(["name", 42])

    def test_non_string_key(self):
        with pytest.raises(InvalidMappingValue):
            compile_mapping({1: "name"})

    def test_type_with_scalar_value(self):
        with pytest.raises(InvalidMappingValue):
            compile_mapping({"Person": "name"})

    def test_root_must_be_dict_or_list(self):
        with pytest.raises(InvalidMappingValue):
            compile_mapping("name")

    @pytest.mark.parametrize("path", [":name", "@name", "[name", ""])
    def test_positional_reserved_marker(self, path: str):
        with pytest.raises(ReservedMarkerError):
            compile_mapping([path])

    @pytest.mark.parametrize("path", ["[members", ""])
    def test_keyed_reserved_marker(self, path: str):
        with pytest.raises(ReservedMarkerError) as exc_info:
            compile_mapping({"member": path})

        assert exc_info.value.error == "reserved_marker"

    def test_array_value_not_a_dict(self):
        with pytest.raises(ArrayExpansionTypeMismatch):
            compile_mapping({"[members": ["givenName"]})

    def test_array_value_with_several_types(self):
        with pytest.raises(ArrayExpansionTypeMismatch):
            compile_mapping({"[members": {"Person": ["name"], "Organization": ["name"]}})

    def test_array_element_type_not_capitalised(self):
        with pytest.raises(ArrayExpansionTypeMismatch):
            compile_mapping({"[members": {"person": ["name"]}})

    def test_array_element_mapping_not_a_level(self):
        with pytest.raises(ArrayExpansionTypeMismatch):
            compile_mapping({"[members": {"Person": "name"}})

    def test_type_holding_array_directly(self):
        with pytest.raises(ArrayExpansionTypeMismatch):
            compile_mapping({"Organization": {"[members": {"Person": ["name"]}}})

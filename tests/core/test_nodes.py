"""
Unit Tests for Layout Nodes

Tests for parse_node(), split_child_ref() and the node dataclasses.
"""

import pytest

from layout_toolkit.core.errors import MalformedNodeError
from layout_toolkit.core.models.nodes import (
    ComponentNode,
    GroupNode,
    parse_node,
    split_child_ref,
)


class TestSplitChildRef:
    """Tests for multiPage child entry decoding."""

    def test_split_when_page_prefix_then_returns_page_and_id(self):
        assert split_child_ref("0:name") == ("0", "name")

    def test_split_when_no_separator_then_returns_raw_id(self):
        assert split_child_ref("name") == (None, "name")

    def test_split_when_multiple_separators_then_splits_on_first(self):
        assert split_child_ref("2:a:b") == ("2", "a:b")

    def test_split_when_nothing_after_separator_then_returns_raw_entry(self):
        assert split_child_ref("3:") == (None, "3:")


class TestParseNode:
    """Tests for parse_node()."""

    def test_parse_when_component_then_returns_component_node(self):
        node = parse_node({"id": "name", "type": "Input", "required": True})

        assert isinstance(node, ComponentNode)
        assert node.id == "name"
        assert node.type == "Input"
        assert node.fields == {"type": "Input", "required": True}

    def test_parse_when_group_then_returns_group_node(self):
        node = parse_node({"id": "g", "type": "Group", "children": ["a", "b"], "maxCount": 3})

        assert isinstance(node, GroupNode)
        assert node.children == ("a", "b")
        assert node.fields == {"type": "Group", "maxCount": 3}

    def test_parse_when_missing_id_then_raises_malformed(self):
        with pytest.raises(MalformedNodeError, match="id"):
            parse_node({"type": "Input"}, path="layout[0]")

    def test_parse_when_group_missing_children_then_raises_malformed(self):
        with pytest.raises(MalformedNodeError, match="children") as exc_info:
            parse_node({"id": "g", "type": "Group"})

        assert exc_info.value.node_id == "g"

    def test_parse_when_legacy_component_key_then_renames_to_type(self):
        node = parse_node({"id": "name", "component": "Input"})

        assert node.fields == {"type": "Input"}

    def test_parse_when_lowercase_group_type_then_treated_as_component(self):
        node = parse_node({"id": "g", "type": "group", "children": ["a"]})

        assert isinstance(node, ComponentNode)

    def test_parse_when_custom_group_type_then_recognised(self):
        node = parse_node({"id": "g", "type": "Container", "children": []}, group_type="Container")

        assert isinstance(node, GroupNode)

    def test_parse_when_input_mutated_later_then_node_unchanged(self):
        data = {"id": "name", "type": "Input", "dataModelBindings": {"simpleBinding": "A"}}
        node = parse_node(data)

        data["dataModelBindings"]["simpleBinding"] = "B"

        assert node.fields["dataModelBindings"] == {"simpleBinding": "A"}


class TestGroupNode:
    """Tests for GroupNode helpers."""

    def test_child_ids_when_multi_page_then_strips_page_prefix(self):
        group = GroupNode("g", ("0:a", "1:b", "c"), {"type": "Group", "edit": {"multiPage": True}})

        assert group.is_multi_page is True
        assert group.child_ids() == ["a", "b", "c"]
        assert group.child_refs() == [("0", "a"), ("1", "b"), (None, "c")]

    def test_child_ids_when_not_multi_page_then_keeps_entries(self):
        group = GroupNode("g", ("0:a",), {"type": "Group"})

        assert group.is_multi_page is False
        assert group.child_ids() == ["0:a"]

    def test_container_fields_when_called_then_drops_type(self):
        group = GroupNode("g", ("a",), {"type": "Group", "maxCount": 2})

        assert group.container_fields() == {"maxCount": 2}

    def test_to_dict_when_called_then_restores_node(self):
        data = {"id": "g", "type": "Group", "children": ["a"], "maxCount": 2}

        assert parse_node(data).to_dict() == data

    def test_component_to_dict_when_called_then_restores_node(self):
        data = {"id": "name", "type": "Input", "dataModelBindings": {"simpleBinding": "A"}}

        assert parse_node(data).to_dict() == data

"""
Unit Tests for Node Validation

Tests for the validator module.
"""

import pytest

from layout_toolkit.core.errors import MalformedNodeError
from layout_toolkit.core.schemas.validator import validate_node


class TestValidateNode:
    """Tests for validate_node function."""

    def test_validate_when_valid_component_then_passes(self):
        validate_node({"id": "name", "type": "Input", "anything": {"nested": [1, 2]}})

    def test_validate_when_valid_group_then_passes(self):
        validate_node({"id": "g", "type": "Group", "children": ["a"], "maxCount": 0, "edit": {"multiPage": False}})

    def test_validate_when_not_object_then_raises(self):
        with pytest.raises(MalformedNodeError, match="must be an object"):
            validate_node(["id", "x"], path="layout[2]")

    def test_validate_when_missing_id_then_raises_with_path(self):
        with pytest.raises(MalformedNodeError) as exc_info:
            validate_node({"type": "Input"}, path="layout[4]")

        assert exc_info.value.path == "layout[4]"
        assert exc_info.value.errors == ["Missing field: id"]

    def test_validate_when_id_not_string_then_raises(self):
        with pytest.raises(MalformedNodeError, match="Invalid node id"):
            validate_node({"id": 12, "type": "Input"})

    def test_validate_when_id_empty_then_raises(self):
        with pytest.raises(MalformedNodeError):
            validate_node({"id": "", "type": "Input"})

    def test_validate_when_group_children_not_list_then_raises(self):
        with pytest.raises(MalformedNodeError, match="must be a list"):
            validate_node({"id": "g", "type": "Group", "children": "a"})

    def test_validate_when_group_child_not_string_then_raises(self):
        with pytest.raises(MalformedNodeError) as exc_info:
            validate_node({"id": "g", "type": "Group", "children": ["a", 3]}, path="layout[0]")

        assert exc_info.value.path == "layout[0].children[1]"

    def test_validate_when_strict_and_opaque_values_then_passes(self):
        """Only id and group children are structural; other values are carried as-is."""
        validate_node({"id": "a", "type": "Input", "edit": None, "maxCount": -1, "children": [1, 2]})
        validate_node({"id": "g", "type": "Group", "children": [], "edit": {"multiPage": "yes"}, "component": 7})

    def test_validate_when_custom_group_type_then_schema_follows_it(self):
        validate_node({"id": "g", "type": "Group", "children": [1]}, group_type="Container")

        with pytest.raises(MalformedNodeError):
            validate_node({"id": "g", "type": "Container", "children": [1]}, group_type="Container")

    def test_validate_when_not_strict_then_basic_checks_still_apply(self):
        with pytest.raises(MalformedNodeError, match="Missing field|missing required"):
            validate_node({"id": "g", "type": "Group"}, strict=False)

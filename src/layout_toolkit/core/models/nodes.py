"""
Module: nodes

Purpose:
    External layout node types. A layout document is a flat, ordered list
    of nodes; each node is either a leaf component or a group that lists
    its children by id. Parsing turns the loosely-typed JSON objects into
    a tagged union so the converter never inspects raw dicts.

Key Functions:
    - parse_node(): Validate and convert one JSON object into a Node
    - split_child_ref(): Split a multiPage "<page>:<id>" child entry
    - GroupNode.child_refs(): (page, child_id) pairs in document order
    - GroupNode.child_ids(): Bare child ids in document order

Dependencies:
    - core.schemas.validator
    - core.errors

Used By:
    - converter.classification
    - converter.extraction
    - converter.builder
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from ..schemas.validator import validate_node

logger = logging.getLogger(__name__)

DEFAULT_GROUP_TYPE = "Group"
DEFAULT_PAGE_SEPARATOR = ":"

# The external exchange format: an ordered list of JSON objects.
LayoutDocument = List[Dict[str, Any]]


def split_child_ref(entry: str, separator: str = DEFAULT_PAGE_SEPARATOR) -> Tuple[Optional[str], str]:
    """
    Split a multiPage child entry into (page, child_id).

    The child id is everything after the first separator. Entries without
    a separator, or with nothing after it, are returned unchanged with no
    page.

    Example:
        >>> split_child_ref("0:name-input")
        ('0', 'name-input')
        >>> split_child_ref("name-input")
        (None, 'name-input')
    """
    page, sep, child_id = entry.partition(separator)
    if sep and child_id:
        return page, child_id
    return None, entry


@dataclass(frozen=True)
class ComponentNode:
    """
    Leaf node of a layout document.

    Attributes:
        id: Unique node id
        fields: Every other property of the node, including `type`
    """
    id: str
    fields: Dict[str, Any] = field(default_factory=dict)

    @property
    def type(self) -> Optional[str]:
        return self.fields.get("type")

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, **copy.deepcopy(self.fields)}


@dataclass(frozen=True)
class GroupNode:
    """
    Container node of a layout document.

    Attributes:
        id: Unique node id
        children: Child entries exactly as written in the document. When
            `edit.multiPage` is set these are "<page>:<id>" pairs.
        fields: Every other property, including `type`, `maxCount` and `edit`
    """
    id: str
    children: Tuple[str, ...] = ()
    fields: Dict[str, Any] = field(default_factory=dict)

    @property
    def type(self) -> Optional[str]:
        return self.fields.get("type")

    @property
    def is_multi_page(self) -> bool:
        edit = self.fields.get("edit")
        return isinstance(edit, dict) and bool(edit.get("multiPage"))

    def child_refs(self, separator: str = DEFAULT_PAGE_SEPARATOR) -> List[Tuple[Optional[str], str]]:
        """
        Child references as (page, child_id) pairs, in document order.

        Page is always None unless the group is multiPage.
        """
        if not self.is_multi_page:
            return [(None, entry) for entry in self.children]
        return [split_child_ref(entry, separator) for entry in self.children]

    def child_ids(self, separator: str = DEFAULT_PAGE_SEPARATOR) -> List[str]:
        """Bare child ids, in document order."""
        return [child_id for _, child_id in self.child_refs(separator)]

    def container_fields(self) -> Dict[str, Any]:
        """Group properties without `id`, `children` and `type`."""
        return {k: copy.deepcopy(v) for k, v in self.fields.items() if k != "type"}

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "children": list(self.children), **copy.deepcopy(self.fields)}


Node = Union[ComponentNode, GroupNode]


def parse_node(
    data: Any,
    *,
    path: str = "",
    group_type: str = DEFAULT_GROUP_TYPE,
    strict: bool = True,
) -> Node:
    """
    Parse one JSON object into a ComponentNode or GroupNode.

    Fields are deep-copied so later edits to the model never reach back
    into the caller's document. A component that carries the legacy
    `component` key instead of `type` has it renamed.

    Args:
        data: Node object from the layout document
        path: Location used in error messages
        group_type: `type` value that marks a group
        strict: Run JSON schema validation as well as the basic checks

    Returns:
        Parsed node

    Raises:
        MalformedNodeError: If the node is structurally invalid
    """
    validate_node(data, path=path, group_type=group_type, strict=strict)

    node_id = data["id"]
    if data.get("type") == group_type:
        fields = {k: copy.deepcopy(v) for k, v in data.items() if k not in ("id", "children")}
        return GroupNode(id=node_id, children=tuple(data["children"]), fields=fields)

    fields = {k: copy.deepcopy(v) for k, v in data.items() if k != "id"}
    if "type" not in fields and "component" in fields:
        logger.warning("Node %r uses legacy 'component' key, renaming to 'type'", node_id)
        fields["type"] = fields.pop("component")
    return ComponentNode(id=node_id, fields=fields)

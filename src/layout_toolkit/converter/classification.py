"""
Module: converter.classification

Purpose:
    Split a flat layout document into top-level nodes and nodes that are
    referenced as children of some group.

Key Functions:
    - in_group_ids(): Ids referenced by any group's children
    - top_level_nodes(): Nodes not referenced by any group, in document order

Dependencies:
    - core.models.nodes

Used By:
    - converter.builder
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Set

from layout_toolkit.core.models.nodes import GroupNode, Node

from .config import ConverterConfig


def in_group_ids(nodes: Sequence[Node], config: Optional[ConverterConfig] = None) -> Set[str]:
    """
    Collect every id listed as a child of some group.

    multiPage entries are decoded to bare ids first. Ids that match no node
    are included as-is; resolving them is left to the extractor.

    Example:
        >>> in_group_ids([GroupNode("g", ("0:a",), {"type": "Group", "edit": {"multiPage": True}})])
        {'a'}
    """
    config = config or ConverterConfig()
    in_group: Set[str] = set()
    for node in nodes:
        if isinstance(node, GroupNode):
            in_group.update(node.child_ids(config.page_separator))
    return in_group


def top_level_nodes(nodes: Sequence[Node], config: Optional[ConverterConfig] = None) -> List[Node]:
    """
    Nodes that no group references, preserving document order.

    Nested groups are excluded the same way as components, since they are
    listed in their parent's children.
    """
    in_group = in_group_ids(nodes, config)
    return [node for node in nodes if node.id not in in_group]

"""
Module: converter.extraction

Purpose:
    Turn one group node, plus an index of every node in the document, into
    the model entries for the group and everything nested below it.

    Extraction does not touch a shared model. It returns a GroupExtraction
    fragment holding the new component, container and order entries, which
    the builder merges into the model it is assembling.

Key Functions:
    - extract_group(): Build the fragment for one group subtree

Key Classes:
    - GroupExtraction: Immutable fragment of model entries

Algorithm:
    Depth-first walk with an explicit stack of (group, depth, page_index)
    frames. For each group:
    1. Store its properties (minus id/children/type) as a CONTAINER
    2. Store its decoded child ids, in document order, as order[group.id]
    3. Resolve each child: components are stored directly, groups are
       pushed onto the stack one level deeper

Dependencies:
    - core.models: GroupNode, LayoutItem
    - core.errors

Used By:
    - converter.builder
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple

from layout_toolkit.core.errors import (
    DanglingReferenceError,
    DuplicateReferenceError,
    MaxDepthExceededError,
)
from layout_toolkit.core.models.entities import LayoutItem
from layout_toolkit.core.models.nodes import GroupNode, Node

from .config import ConverterConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GroupExtraction:
    """
    Model entries produced by extracting one group subtree.

    Attributes:
        group_id: Id of the group the extraction started from
        components: Component entries for every leaf in the subtree
        containers: Container entries for the group and nested groups
        order: Child id lists for the group and nested groups
        depth: Deepest group level reached (the starting group counts as
            the depth it was extracted at)
    """
    group_id: str
    components: Dict[str, LayoutItem] = field(default_factory=dict)
    containers: Dict[str, LayoutItem] = field(default_factory=dict)
    order: Dict[str, Tuple[str, ...]] = field(default_factory=dict)
    depth: int = 1

    @property
    def ids(self) -> List[str]:
        """Every id placed by this extraction, containers first."""
        return [*self.containers, *self.components]


def extract_group(
    group: GroupNode,
    nodes_by_id: Mapping[str, Node],
    *,
    depth: int = 1,
    page_index: Optional[str] = None,
    config: Optional[ConverterConfig] = None,
) -> GroupExtraction:
    """
    Extract a group and its descendants into model entries.

    Args:
        group: Group node to extract
        nodes_by_id: Every node of the document, indexed by id
        depth: Nesting depth of `group` (1 for a top-level group)
        page_index: Page prefix of `group` in its multiPage parent, if any
        config: Converter settings

    Returns:
        GroupExtraction with entries for the whole subtree

    Raises:
        DanglingReferenceError: A child id matches no node
        DuplicateReferenceError: A child id is listed twice in the subtree
        MaxDepthExceededError: Nesting goes deeper than config.max_depth

    Example:
        >>> g = GroupNode("g", ("c",), {"type": "Group"})
        >>> c = ComponentNode("c", {"type": "Input"})
        >>> extract_group(g, {"g": g, "c": c}).order
        {'g': ('c',)}
    """
    config = config or ConverterConfig()

    components: Dict[str, LayoutItem] = {}
    containers: Dict[str, LayoutItem] = {}
    order: Dict[str, Tuple[str, ...]] = {}
    parent_of: Dict[str, str] = {}
    deepest = depth

    stack: List[Tuple[GroupNode, int, Optional[str]]] = [(group, depth, page_index)]
    while stack:
        current, level, page = stack.pop()
        if level > config.max_depth:
            raise MaxDepthExceededError(current.id, level, config.max_depth)
        deepest = max(deepest, level)

        containers[current.id] = LayoutItem.container(current.container_fields(), page)

        refs = current.child_refs(config.page_separator)
        order[current.id] = tuple(child_id for _, child_id in refs)

        nested: List[Tuple[GroupNode, int, Optional[str]]] = []
        for child_page, child_id in refs:
            if child_id in parent_of or child_id == group.id:
                previous = parent_of.get(child_id, current.id)
                raise DuplicateReferenceError(child_id, (previous, current.id))
            parent_of[child_id] = current.id

            node = nodes_by_id.get(child_id)
            if node is None:
                raise DanglingReferenceError(current.id, child_id)

            if isinstance(node, GroupNode):
                nested.append((node, level + 1, child_page))
            else:
                components[child_id] = LayoutItem.component(dict(node.fields), child_page)

        # Reversed so nested groups are visited in document order
        stack.extend(reversed(nested))

    logger.debug(
        "Extracted group %r: %d containers, %d components, depth %d",
        group.id, len(containers), len(components), deepest,
    )
    return GroupExtraction(
        group_id=group.id,
        components=components,
        containers=containers,
        order=order,
        depth=deepest,
    )

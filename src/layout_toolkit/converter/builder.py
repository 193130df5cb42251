"""
Module: converter.builder

Purpose:
    Load a flat layout document into an EntityModel.

Key Functions:
    - to_internal(): Document -> EntityModel
    - parse_document(): Validate nodes and index them by id

Algorithm:
    1. Generate the synthetic root id
    2. Parse every node (MalformedNodeError, DuplicateIdError)
    3. Check group references: each child id must exist and be listed once
    4. For each top-level node, in document order: store components
       directly, extract groups with extract_group(), and append the id to
       order[root]
    5. Every document node must have been placed; anything left over only
       hangs off a group cycle (CyclicReferenceError)

    The model is assembled from local maps and only constructed once every
    step has succeeded, so a failed conversion never yields a partial model.

Dependencies:
    - core.models, core.errors
    - converter.classification, converter.extraction

Used By:
    - Editing collaborators loading a stored layout
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from layout_toolkit.core.errors import (
    CyclicReferenceError,
    DanglingReferenceError,
    DuplicateIdError,
    DuplicateReferenceError,
    MalformedNodeError,
)
from layout_toolkit.core.models.entities import EntityModel, LayoutItem
from layout_toolkit.core.models.nodes import GroupNode, Node, parse_node

from .classification import top_level_nodes
from .config import ConverterConfig
from .extraction import extract_group

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]


def new_root_id() -> str:
    """Fresh synthetic root id."""
    return str(uuid.uuid4())


def parse_document(
    document: Sequence[Any],
    config: Optional[ConverterConfig] = None,
) -> Tuple[List[Node], Dict[str, Node]]:
    """
    Parse every node of a document and index them by id.

    Args:
        document: Flat list of node objects
        config: Converter settings

    Returns:
        Tuple of (nodes in document order, id -> node)

    Raises:
        MalformedNodeError: A node is structurally invalid, or the document
            is not a list
        DuplicateIdError: Two nodes share an id
    """
    config = config or ConverterConfig()
    if isinstance(document, (str, bytes, dict)) or not isinstance(document, Sequence):
        raise MalformedNodeError(
            f"Layout document must be a list of nodes, got {type(document).__name__}",
            path="layout",
        )

    nodes: List[Node] = []
    nodes_by_id: Dict[str, Node] = {}
    for i, data in enumerate(document):
        path = f"layout[{i}]"
        node = parse_node(
            data,
            path=path,
            group_type=config.group_type,
            strict=config.validate_nodes,
        )
        if node.id in nodes_by_id:
            raise DuplicateIdError(node.id, path=path)
        nodes.append(node)
        nodes_by_id[node.id] = node
    return nodes, nodes_by_id


def _check_references(
    nodes: Sequence[Node],
    nodes_by_id: Dict[str, Node],
    config: ConverterConfig,
) -> None:
    """Every child reference must resolve, and no id may have two parents."""
    parent_of: Dict[str, str] = {}
    for node in nodes:
        if not isinstance(node, GroupNode):
            continue
        for child_id in node.child_ids(config.page_separator):
            if child_id not in nodes_by_id:
                raise DanglingReferenceError(node.id, child_id)
            if child_id in parent_of:
                raise DuplicateReferenceError(child_id, (parent_of[child_id], node.id))
            parent_of[child_id] = node.id


def to_internal(
    document: Optional[Sequence[Any]],
    hidden: Any = None,
    *,
    config: Optional[ConverterConfig] = None,
    id_factory: Optional[IdFactory] = None,
) -> EntityModel:
    """
    Convert a flat layout document into an EntityModel.

    Args:
        document: Flat node list. None or an empty list yields a model
            holding only the synthetic root.
        hidden: Opaque value stored on the model unchanged
        config: Converter settings
        id_factory: Callable returning the synthetic root id (defaults to a
            random UUID)

    Returns:
        New EntityModel

    Raises:
        MalformedNodeError: A node is structurally invalid, or the document
            is not a list (an empty dict or string included)
        DuplicateIdError: Two nodes share an id, or the root id collides
            with a node id
        DanglingReferenceError: A group lists a child that does not exist
        DuplicateReferenceError: A child is listed by more than one group
        MaxDepthExceededError: Groups nest deeper than config.max_depth
        CyclicReferenceError: Groups reference each other in a cycle

    Example:
        >>> model = to_internal(
        ...     [{"id": "c1", "type": "Group", "children": ["c2"]},
        ...      {"id": "c2", "type": "Input"}],
        ...     id_factory=lambda: "root",
        ... )
        >>> model.order
        {'root': ['c1'], 'c1': ['c2']}
    """
    config = config or ConverterConfig()
    root_id = (id_factory or new_root_id)()

    if document is None:
        return EntityModel.empty(root_id, hidden)

    nodes, nodes_by_id = parse_document(document, config)
    if not nodes:
        return EntityModel.empty(root_id, hidden)
    if root_id in nodes_by_id:
        raise DuplicateIdError(root_id)
    _check_references(nodes, nodes_by_id, config)

    components: Dict[str, LayoutItem] = {}
    containers: Dict[str, LayoutItem] = {}
    order: Dict[str, List[str]] = {root_id: []}
    deepest = 0

    for node in top_level_nodes(nodes, config):
        if isinstance(node, GroupNode):
            extraction = extract_group(node, nodes_by_id, config=config)
            components.update(extraction.components)
            containers.update(extraction.containers)
            order.update({k: list(v) for k, v in extraction.order.items()})
            deepest = max(deepest, extraction.depth)
        else:
            components[node.id] = LayoutItem.component(dict(node.fields))
        order[root_id].append(node.id)

    unplaced = [node.id for node in nodes if node.id not in components and node.id not in containers]
    if unplaced:
        raise CyclicReferenceError(unplaced)

    logger.debug(
        "Loaded layout: %d nodes, %d top-level, %d containers, depth %d (root %s)",
        len(nodes), len(order[root_id]), len(containers), deepest, root_id,
    )
    return EntityModel(
        root_id=root_id,
        components=components,
        containers=containers,
        order=order,
        hidden=hidden,
    )

"""
Module: converter.serializer

Purpose:
    Flatten an EntityModel back into the external layout document.

    Each group is written as {id, type, children, ...properties} and is
    immediately followed by its descendants, depth-first, so that every
    node referenced in a group's `children` also appears as a standalone
    node later in the same list.

Key Functions:
    - to_external(): EntityModel -> flat node list

Dependencies:
    - core.models, core.errors

Used By:
    - Storage collaborators writing the layout back
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, List, Optional, Tuple

from layout_toolkit.core.errors import MaxDepthExceededError
from layout_toolkit.core.models.entities import EntityModel, LayoutItem
from layout_toolkit.core.models.nodes import LayoutDocument

from .config import ConverterConfig

logger = logging.getLogger(__name__)


def _component_node(item_id: str, item: LayoutItem) -> Dict[str, Any]:
    return {"id": item_id, **copy.deepcopy(item.fields)}


def _group_node(
    model: EntityModel,
    group_id: str,
    item: LayoutItem,
    config: ConverterConfig,
) -> Dict[str, Any]:
    child_ids = model.order.get(group_id, [])
    edit = item.fields.get("edit")
    if isinstance(edit, dict) and edit.get("multiPage"):
        children = []
        for child_id in child_ids:
            child = model.get(child_id)
            if child is not None and child.page_index is not None:
                children.append(f"{child.page_index}{config.page_separator}{child_id}")
            else:
                children.append(child_id)
    else:
        children = list(child_ids)
    return {
        "id": group_id,
        "type": config.group_type,
        "children": children,
        **copy.deepcopy(item.fields),
    }


def to_external(
    model: Optional[EntityModel],
    *,
    config: Optional[ConverterConfig] = None,
) -> LayoutDocument:
    """
    Convert an EntityModel into a flat layout document.

    The model is checked with `EntityModel.check()` first, so nothing is
    ever dropped: an entry that is not reachable from the root, or that is
    listed by two parents, fails the whole conversion. Top-level ids are
    then walked in order[root] order. multiPage groups get their children
    re-encoded as "<page>:<id>" from each child's page_index.

    Args:
        model: Model to flatten. None yields an empty document.
        config: Converter settings

    Returns:
        New list of node dicts; nothing in it is shared with the model

    Raises:
        DuplicateIdError: An id is both a component and a container
        DanglingReferenceError: An order list names an unknown id
        DuplicateReferenceError: An id is listed by more than one parent,
            including a cycle through order
        CyclicReferenceError: An entry is not reachable from the root
        MaxDepthExceededError: Containers nest deeper than config.max_depth
    """
    config = config or ConverterConfig()
    if model is None:
        return []

    model.check()

    layout: LayoutDocument = []
    for top_id in model.top_level_ids:
        # (item_id, nesting depth) frames
        stack: List[Tuple[str, int]] = [(top_id, 1)]
        while stack:
            item_id, depth = stack.pop()

            component = model.components.get(item_id)
            if component is not None:
                layout.append(_component_node(item_id, component))
                continue

            if depth > config.max_depth:
                raise MaxDepthExceededError(item_id, depth, config.max_depth)

            layout.append(_group_node(model, item_id, model.containers[item_id], config))
            child_ids = model.order.get(item_id, [])
            stack.extend((child_id, depth + 1) for child_id in reversed(child_ids))

    logger.debug("Serialized layout: %d nodes (root %s)", len(layout), model.root_id)
    return layout

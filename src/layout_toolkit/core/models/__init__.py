"""
Core Models Package

External node types (flat document) and the internal entity model.

| External | Internal |
|----------|----------|
| `ComponentNode` | `LayoutItem` tagged COMPONENT in `components` |
| `GroupNode` | `LayoutItem` tagged CONTAINER in `containers` + `order[id]` |
| document order of top-level nodes | `order[root_id]` |
"""

from .nodes import (
    ComponentNode,
    GroupNode,
    LayoutDocument,
    Node,
    parse_node,
    split_child_ref,
)
from .entities import (
    EntityModel,
    ItemType,
    LayoutItem,
    id_exists,
    is_valid_component_id,
)

__all__ = [
    "ComponentNode",
    "GroupNode",
    "LayoutDocument",
    "Node",
    "parse_node",
    "split_child_ref",
    "EntityModel",
    "ItemType",
    "LayoutItem",
    "id_exists",
    "is_valid_component_id",
]

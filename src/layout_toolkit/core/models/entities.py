"""
Module: entities

Purpose:
    The internal, map-based layout model used while editing. Components
    and containers are stored by id; `order` holds the ordered child ids
    of every container, including a synthetic root that lists the
    top-level ids. Lookup, insert, delete and reorder by id are all
    dictionary operations.

Key Classes:
    - ItemType: COMPONENT or CONTAINER tag
    - LayoutItem: One component or container entry (immutable)
    - EntityModel: components / containers / order / hidden

Key Functions:
    - EntityModel.check(): Verify the structural invariants
    - EntityModel.parent_of(), iter_descendants(): Tree queries
    - id_exists(): Case-insensitive id lookup
    - is_valid_component_id(): Id format check

Invariants:
    - An id is a key of `components` or `containers`, never both, and is
      never the root id.
    - Every id in an `order` list is a component or container.
    - Every non-root id appears in exactly one `order` list.
    - Following `order` from the root reaches every component and container
      exactly once.

Used By:
    - converter.extraction, converter.builder, converter.serializer
    - Editing collaborators (add / remove / rename / reorder)
"""

from __future__ import annotations

import copy
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

from ..errors import (
    CyclicReferenceError,
    DanglingReferenceError,
    DuplicateIdError,
    DuplicateReferenceError,
)

logger = logging.getLogger(__name__)

VALID_COMPONENT_ID = re.compile(r"^[0-9a-zA-Z][0-9a-zA-Z-]*[0-9a-zA-Z]$")


class ItemType(str, Enum):
    """Kind of model entry."""
    COMPONENT = "COMPONENT"
    CONTAINER = "CONTAINER"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class LayoutItem:
    """
    A component or container entry of the model.

    Attributes:
        item_type: COMPONENT or CONTAINER
        fields: Node properties without `id` (and, for containers, without
            `children` and `type`). Carried opaquely.
        page_index: Page prefix the item had in a multiPage parent, if any
    """
    item_type: ItemType
    fields: Dict[str, Any] = field(default_factory=dict)
    page_index: Optional[str] = None

    @classmethod
    def component(cls, fields: Dict[str, Any], page_index: Optional[str] = None) -> LayoutItem:
        return cls(ItemType.COMPONENT, fields, page_index)

    @classmethod
    def container(cls, fields: Dict[str, Any], page_index: Optional[str] = None) -> LayoutItem:
        return cls(ItemType.CONTAINER, fields, page_index)

    @property
    def is_container(self) -> bool:
        return self.item_type == ItemType.CONTAINER

    def to_dict(self) -> Dict[str, Any]:
        """Fields plus the `itemType` tag (and `pageIndex` when set)."""
        d = {**copy.deepcopy(self.fields), "itemType": self.item_type.value}
        if self.page_index is not None:
            d["pageIndex"] = self.page_index
        return d


@dataclass
class EntityModel:
    """
    Normalized layout model.

    Created by `converter.to_internal()`, mutated in place by editors and
    flattened again by `converter.to_external()`.

    Attributes:
        root_id: Synthetic root container id, never part of the document
        components: id -> component entry
        containers: id -> container entry (the root is not included)
        order: container id (including root_id) -> ordered child ids
        hidden: Opaque value passed through from the loader

    Example:
        >>> model = EntityModel.empty("root")
        >>> model.order
        {'root': []}
    """
    root_id: str
    components: Dict[str, LayoutItem] = field(default_factory=dict)
    containers: Dict[str, LayoutItem] = field(default_factory=dict)
    order: Dict[str, List[str]] = field(default_factory=dict)
    hidden: Any = None

    def __post_init__(self) -> None:
        self.order.setdefault(self.root_id, [])

    @classmethod
    def empty(cls, root_id: str, hidden: Any = None) -> EntityModel:
        return cls(root_id=root_id, hidden=hidden)

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def top_level_ids(self) -> List[str]:
        return self.order.get(self.root_id, [])

    def get(self, item_id: str) -> Optional[LayoutItem]:
        """Component or container entry for an id, or None."""
        item = self.components.get(item_id)
        if item is None:
            item = self.containers.get(item_id)
        return item

    def __contains__(self, item_id: object) -> bool:
        return item_id in self.components or item_id in self.containers

    def __len__(self) -> int:
        return len(self.components) + len(self.containers)

    def parent_of(self, item_id: str) -> Optional[str]:
        """
        Id of the container whose order lists `item_id`.

        Returns the root id for top-level items and None for ids that are
        not placed anywhere.
        """
        for container_id, child_ids in self.order.items():
            if item_id in child_ids:
                return container_id
        return None

    def iter_descendants(self, container_id: str) -> Iterator[str]:
        """
        Iterate over every id below a container (pre-order, document order).

        Args:
            container_id: Container id or the root id

        Yields:
            Descendant ids; the container itself is not included
        """
        stack = list(reversed(self.order.get(container_id, [])))
        seen = set()
        while stack:
            item_id = stack.pop()
            if item_id in seen:
                continue
            seen.add(item_id)
            yield item_id
            if item_id in self.containers:
                stack.extend(reversed(self.order.get(item_id, [])))

    # ─────────────────────────────────────────────────────────────────────────
    # Validation
    # ─────────────────────────────────────────────────────────────────────────

    def check(self) -> None:
        """
        Verify the model invariants.

        Raises:
            DuplicateIdError: An id is both a component and a container, or
                collides with the root id
            DanglingReferenceError: An order list names an unknown id
            DuplicateReferenceError: An id is listed more than once
            CyclicReferenceError: Entries are not reachable from the root (group
                cycles, or entries no order list places)
        """
        overlap = self.components.keys() & self.containers.keys()
        if overlap:
            raise DuplicateIdError(sorted(overlap)[0])
        if self.root_id in self:
            raise DuplicateIdError(self.root_id)

        parents: Dict[str, List[str]] = {}
        for container_id, child_ids in self.order.items():
            if container_id != self.root_id and container_id not in self.containers:
                continue
            for child_id in child_ids:
                if child_id not in self:
                    raise DanglingReferenceError(container_id, child_id)
                parents.setdefault(child_id, []).append(container_id)

        for child_id, parent_ids in parents.items():
            if len(parent_ids) > 1:
                raise DuplicateReferenceError(child_id, parent_ids)

        reachable = set(self.iter_descendants(self.root_id))
        unreachable = [
            item_id for item_id in (*self.containers, *self.components) if item_id not in reachable
        ]
        if unreachable:
            raise CyclicReferenceError(unreachable)

    def to_dict(self) -> Dict[str, Any]:
        """Plain-dict view, mainly for debugging and snapshots."""
        return {
            "rootId": self.root_id,
            "components": {k: v.to_dict() for k, v in self.components.items()},
            "containers": {k: v.to_dict() for k, v in self.containers.items()},
            "order": {k: list(v) for k, v in self.order.items()},
            "hidden": self.hidden,
        }

    def __repr__(self) -> str:
        return (
            f"EntityModel(root={self.root_id!r}, components={len(self.components)}, "
            f"containers={len(self.containers)})"
        )


def id_exists(model: EntityModel, item_id: str) -> bool:
    """Check whether an id is taken, ignoring case."""
    wanted = item_id.upper()
    return any(key.upper() == wanted for key in model.containers) or any(
        key.upper() == wanted for key in model.components
    )


def is_valid_component_id(item_id: str) -> bool:
    """
    Check an id against the allowed component id format.

    Ids are alphanumeric with inner hyphens and at least two characters.
    """
    return bool(VALID_COMPONENT_ID.match(item_id))

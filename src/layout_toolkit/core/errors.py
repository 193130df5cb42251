"""
Module: core.errors

Purpose:
    Error taxonomy for layout conversion. Every error raised while loading
    or re-flattening a layout document derives from LayoutConversionError,
    so collaborators can catch a single type and surface it to whoever
    authored the document.

Key Classes:
    - LayoutConversionError: Base class (message, path, errors)
    - MalformedNodeError: Node is missing `id`, a group is missing `children`,
      or a node fails schema validation
    - DanglingReferenceError: Group child id has no matching node
    - DuplicateIdError: Two nodes share an id
    - DuplicateReferenceError: A child id is referenced more than once
    - CyclicReferenceError: Nodes that can never be reached from the top
      level (group cycles, detached model entries)
    - MaxDepthExceededError: Group nesting exceeds the configured bound

Used By:
    - core.schemas.validator
    - core.models.nodes, core.models.entities
    - converter.*
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple


class LayoutConversionError(Exception):
    """Base error for layout conversion failures."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.errors = errors or []


class MalformedNodeError(LayoutConversionError):
    """A node does not have the structure of a component or group node."""

    def __init__(
        self,
        message: str,
        path: str = "",
        errors: list[str] | None = None,
        node_id: Optional[str] = None,
    ):
        super().__init__(message, path=path, errors=errors)
        self.node_id = node_id


class DanglingReferenceError(LayoutConversionError):
    """A group lists a child id that matches no node."""

    def __init__(self, parent_id: str, child_id: str):
        super().__init__(
            f"Group {parent_id!r} references missing child {child_id!r}",
            path=f"{parent_id}.children",
        )
        self.parent_id = parent_id
        self.child_id = child_id


class DuplicateIdError(LayoutConversionError):
    """The same id is used by more than one node."""

    def __init__(self, node_id: str, path: str = ""):
        super().__init__(f"Duplicate id: {node_id!r}", path=path or node_id)
        self.node_id = node_id


class DuplicateReferenceError(LayoutConversionError):
    """A child id appears in more than one `children` list, or twice in one."""

    def __init__(self, child_id: str, parent_ids: Iterable[str]):
        self.child_id = child_id
        self.parent_ids: Tuple[str, ...] = tuple(parent_ids)
        super().__init__(
            f"Id {child_id!r} is referenced more than once "
            f"(by {', '.join(repr(p) for p in self.parent_ids)})",
            path=child_id,
        )


class CyclicReferenceError(LayoutConversionError):
    """Nodes or model entries that cannot be reached from the top level."""

    def __init__(self, node_ids: Iterable[str]):
        self.node_ids: Tuple[str, ...] = tuple(node_ids)
        super().__init__(
            f"Nodes not reachable from the top level (group cycle or detached entry): {list(self.node_ids)}",
            errors=[f"Unreachable: {node_id}" for node_id in self.node_ids],
        )


class MaxDepthExceededError(LayoutConversionError):
    """Group nesting is deeper than the configured maximum."""

    def __init__(self, group_id: str, depth: int, max_depth: int):
        super().__init__(
            f"Group {group_id!r} is nested {depth} levels deep (max {max_depth})",
            path=group_id,
        )
        self.group_id = group_id
        self.depth = depth
        self.max_depth = max_depth

"""
Module: converter.config

Purpose:
    Immutable settings for converting between the flat layout document
    and the entity model.

Key Classes:
    - ConverterConfig: Depth bound, group type, multiPage separator,
      schema validation switch

Dependencies:
    - dataclasses (std)

Used By:
    - converter.classification, converter.extraction
    - converter.builder, converter.serializer
"""

from __future__ import annotations

from dataclasses import dataclass

from layout_toolkit.core.models.nodes import DEFAULT_GROUP_TYPE, DEFAULT_PAGE_SEPARATOR


# Deepest group nesting accepted from a hand-edited document
DEFAULT_MAX_DEPTH = 64


@dataclass(frozen=True)
class ConverterConfig:
    """
    Configuration for layout conversion (immutable).

    Attributes:
        max_depth: Maximum group nesting depth. A top-level group has depth 1.
        group_type: Node `type` value that marks a group (case-sensitive)
        page_separator: Separator in multiPage child entries ("<page>:<id>")
        validate_nodes: Validate every node against the JSON schema

    Example:
        >>> ConverterConfig(max_depth=8).max_depth
        8
    """
    max_depth: int = DEFAULT_MAX_DEPTH
    group_type: str = DEFAULT_GROUP_TYPE
    page_separator: str = DEFAULT_PAGE_SEPARATOR
    validate_nodes: bool = True

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1: {self.max_depth}")
        if not self.group_type:
            raise ValueError("group_type must not be empty")
        if not self.page_separator:
            raise ValueError("page_separator must not be empty")

"""
Layout Converter

Bidirectional conversion between the flat layout document and the
EntityModel:

    to_internal(document, hidden)  -> EntityModel
    to_external(model)             -> document

Round trip: for a well-formed document `d` (unique ids, no dangling
references) `to_external(to_internal(d, h)) == d`, up to key order inside
each node.
"""

from layout_toolkit.core.errors import (
    LayoutConversionError,
    MalformedNodeError,
    DanglingReferenceError,
    DuplicateIdError,
    DuplicateReferenceError,
    CyclicReferenceError,
    MaxDepthExceededError,
)

from .config import ConverterConfig, DEFAULT_MAX_DEPTH
from .classification import in_group_ids, top_level_nodes
from .extraction import GroupExtraction, extract_group
from .builder import to_internal, parse_document, new_root_id
from .serializer import to_external

__all__ = [
    "to_internal",
    "to_external",
    "parse_document",
    "new_root_id",
    "in_group_ids",
    "top_level_nodes",
    "extract_group",
    "GroupExtraction",
    "ConverterConfig",
    "DEFAULT_MAX_DEPTH",
    "LayoutConversionError",
    "MalformedNodeError",
    "DanglingReferenceError",
    "DuplicateIdError",
    "DuplicateReferenceError",
    "CyclicReferenceError",
    "MaxDepthExceededError",
]

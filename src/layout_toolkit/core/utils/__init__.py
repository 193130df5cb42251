"""
Utils Package

Layout file framing helpers.
"""

from .serialization import (
    unwrap_layout,
    wrap_layout,
    load_layout_json,
    save_layout_json,
)

__all__ = [
    "unwrap_layout",
    "wrap_layout",
    "load_layout_json",
    "save_layout_json",
]

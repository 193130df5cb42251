"""
Layout File Utilities

Read and write stored layout files. A stored layout file wraps the flat
node list together with the opaque `hidden` expression:

    {
      "$schema": "...",
      "data": {
        "layout": [ {node}, {node}, ... ],
        "hidden": ...
      }
    }

A bare JSON list of nodes is also accepted on load.

These helpers only frame the document; turning it into a model is the
converter's job (`converter.to_internal` / `converter.to_external`).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional, Tuple

from ..errors import MalformedNodeError
from ..models.nodes import LayoutDocument


def unwrap_layout(data: Any, *, path: str = "") -> Tuple[LayoutDocument, Any]:
    """
    Extract (layout, hidden) from a loaded layout file payload.

    Args:
        data: Parsed JSON
        path: Source path, used in error messages

    Returns:
        Tuple of (node list, hidden value or None)

    Raises:
        MalformedNodeError: If the payload has no node list
    """
    if isinstance(data, list):
        return data, None

    if isinstance(data, dict):
        body = data.get("data")
        if isinstance(body, dict):
            layout = body.get("layout")
            if layout is None:
                return [], body.get("hidden")
            if isinstance(layout, list):
                return layout, body.get("hidden")

    raise MalformedNodeError(
        "Layout file must be a node list or an object with data.layout",
        path=path,
    )


def wrap_layout(
    layout: LayoutDocument,
    hidden: Any = None,
    *,
    schema_url: Optional[str] = None,
) -> dict[str, Any]:
    """Build the stored file payload for a node list."""
    payload: dict[str, Any] = {}
    if schema_url:
        payload["$schema"] = schema_url
    body: dict[str, Any] = {"layout": layout}
    if hidden is not None:
        body["hidden"] = hidden
    payload["data"] = body
    return payload


def load_layout_json(path: Path) -> Tuple[LayoutDocument, Any]:
    """
    Load a layout file.

    Args:
        path: Path to the layout JSON file

    Returns:
        Tuple of (node list, hidden value or None)

    Raises:
        FileNotFoundError: If the file doesn't exist
        MalformedNodeError: If the file is not a layout file
    """
    if not path.exists():
        raise FileNotFoundError(f"Layout file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise MalformedNodeError(
                f"Invalid JSON in layout file: {e}",
                path=str(path),
                errors=[str(e)],
            ) from e

    return unwrap_layout(data, path=str(path))


def save_layout_json(
    path: Path,
    layout: LayoutDocument,
    hidden: Any = None,
    *,
    schema_url: Optional[str] = None,
) -> None:
    """
    Save a node list as a layout file.

    Args:
        path: Output path
        layout: Flat node list
        hidden: Optional hidden expression
        schema_url: Optional `$schema` reference
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    data = wrap_layout(layout, hidden, schema_url=schema_url)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

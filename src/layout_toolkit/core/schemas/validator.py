"""
Node Validation

Validates the structure of layout nodes before conversion.

Two levels of checking:
- Basic checks (always): node is an object, has a string `id`, and a
  group node has a `children` list of strings.
- Schema checks (strict): the node is validated against
  `layout_node.schema.json` with jsonschema and every violation is reported.

Only `id` and group `children` are checked. Other property values
(`maxCount`, `edit`, bindings, ...) are never interpreted.
"""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

import jsonschema

from ..errors import MalformedNodeError


NODE_SCHEMA_NAME = "layout_node"

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}
_VALIDATORS: dict[tuple[str, str], jsonschema.Draft7Validator] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


def _get_validator(name: str, group_type: str) -> jsonschema.Draft7Validator:
    """Compiled validator for a schema and group type, built once."""
    key = (name, group_type)
    if key not in _VALIDATORS:
        schema = copy.deepcopy(_load_schema(name))
        # The group rule keys on the configured group type
        schema["if"]["properties"]["type"]["const"] = group_type
        _VALIDATORS[key] = jsonschema.Draft7Validator(schema)
    return _VALIDATORS[key]


def validate_node(
    data: Any,
    *,
    path: str = "",
    group_type: str = "Group",
    strict: bool = True,
) -> None:
    """
    Validate a single layout node.

    Args:
        data: Node as loaded from JSON
        path: Location of the node, used in error messages (e.g. "layout[3]")
        group_type: Value of `type` that marks a group node
        strict: If True, also validate against the JSON schema

    Raises:
        MalformedNodeError: If the node is not structurally valid
    """
    if not isinstance(data, dict):
        raise MalformedNodeError(
            f"Node must be an object, got {type(data).__name__}",
            path=path,
        )

    node_id = data.get("id")
    if "id" not in data:
        raise MalformedNodeError(
            "Node missing required field: id",
            path=path,
            errors=["Missing field: id"],
        )
    if not isinstance(node_id, str) or not node_id:
        raise MalformedNodeError(
            f"Invalid node id: {node_id!r} (must be a non-empty string)",
            path=f"{path}.id",
        )

    if data.get("type") == group_type:
        children = data.get("children")
        if children is None:
            raise MalformedNodeError(
                f"Group {node_id!r} missing required field: children",
                path=path,
                errors=["Missing field: children"],
                node_id=node_id,
            )
        if not isinstance(children, list):
            raise MalformedNodeError(
                f"children of group {node_id!r} must be a list",
                path=f"{path}.children",
                node_id=node_id,
            )
        for i, child in enumerate(children):
            if not isinstance(child, str) or not child:
                raise MalformedNodeError(
                    f"Invalid child reference in group {node_id!r}: {child!r}",
                    path=f"{path}.children[{i}]",
                    node_id=node_id,
                )

    if strict:
        validator = _get_validator(NODE_SCHEMA_NAME, group_type)
        violations = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])
        if violations:
            first = violations[0]
            location = ".".join(str(p) for p in first.absolute_path)
            raise MalformedNodeError(
                f"Node {node_id!r} failed schema validation: {first.message}",
                path=f"{path}.{location}" if location else path,
                errors=[e.message for e in violations],
                node_id=node_id,
            )

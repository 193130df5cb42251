"""
Schemas Package

JSON schema definitions and node validation.
"""

from .validator import validate_node, NODE_SCHEMA_NAME

__all__ = [
    "validate_node",
    "NODE_SCHEMA_NAME",
]

"""
Layout Toolkit Core Package

Shared data models, validation and error types used by the converter and
by the editing and storage collaborators around it.

**DESIGN NOTES:**

1. **Tagged node union**
   - Raw JSON objects are parsed once into `ComponentNode` / `GroupNode`
   - Unknown properties are carried opaquely, never interpreted

2. **Explicit synthetic root**
   - `EntityModel.root_id` names the root; it is never stored in
     `containers` and never written back to the document

3. **Typed errors**
   - Every failure is a `LayoutConversionError` subclass
"""

from .errors import LayoutConversionError
from .models import ComponentNode, GroupNode, EntityModel, LayoutItem, ItemType

__all__ = [
    "LayoutConversionError",
    "ComponentNode",
    "GroupNode",
    "EntityModel",
    "LayoutItem",
    "ItemType",
]

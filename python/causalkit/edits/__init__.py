"""
Edit module.

Provides the closed set of edits that can be recorded in a causal log and
the function that applies them to a document.
"""

from .base import EditBase, EditType
from .node import (
    EDIT_TYPES,
    CreateNode,
    Edit,
    MoveNode,
    RemoveNode,
    UpdateNode,
    parse_edit,
)
from .apply import apply_edit

__all__ = [
    # Base classes
    "EditBase",
    "EditType",
    # Edit variants
    "CreateNode",
    "UpdateNode",
    "MoveNode",
    "RemoveNode",
    "Edit",
    "EDIT_TYPES",
    # Functions
    "parse_edit",
    "apply_edit",
]

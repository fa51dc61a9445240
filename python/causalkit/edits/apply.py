"""
Applying edits to a document.

Edits that target a node which does not exist are no-ops: the document is
left unchanged, while the log still records the edit.
"""

from __future__ import annotations

import logging

from ..document import Document
from .base import EditBase
from .node import CreateNode, MoveNode, RemoveNode, UpdateNode

logger = logging.getLogger(__name__)


def apply_edit(edit: EditBase, document: Document) -> bool:
    """
    Apply a single edit to ``document`` in place.

    Returns:
        True if the document changed, False if the edit was a no-op.

    Raises:
        TypeError: If ``edit`` is not one of the known variants.
    """
    if isinstance(edit, CreateNode):
        document.append_node(edit.author)
        return True

    if isinstance(edit, UpdateNode):
        applied = document.update_text(edit.node_id, edit.text)
    elif isinstance(edit, MoveNode):
        applied = document.move_node(edit.node_id, edit.new_index)
    elif isinstance(edit, RemoveNode):
        applied = document.remove_node(edit.node_id)
    else:
        raise TypeError(f"Unsupported edit type: {type(edit).__name__}")

    if not applied:
        logger.debug(f"Ignoring {edit.type} for unknown node {edit.node_id}")
    return applied


__all__ = [
    "apply_edit",
]

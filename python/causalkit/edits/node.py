"""
Node edit variants.

The four edits that can be applied to a document: create, update, move and
remove a node. ``Edit`` is the discriminated union over all of them.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, Literal, Union

from pydantic import Field

from .base import EditBase, EditType

MAX_AUTHOR_LENGTH = 512
MAX_TEXT_LENGTH = 1024 * 100  # 100KB per node


class CreateNode(EditBase):
    """Append a new node; its id is assigned by the document."""

    type: Literal["create_node"] = EditType.CREATE_NODE.value
    author: str = Field(..., max_length=MAX_AUTHOR_LENGTH)


class UpdateNode(EditBase):
    """Replace the text of an existing node."""

    type: Literal["update_node"] = EditType.UPDATE_NODE.value
    node_id: int = Field(..., ge=0)
    text: str = Field(..., max_length=MAX_TEXT_LENGTH)


class MoveNode(EditBase):
    """Move an existing node to a new position."""

    type: Literal["move_node"] = EditType.MOVE_NODE.value
    node_id: int = Field(..., ge=0)
    new_index: int = Field(..., ge=0)


class RemoveNode(EditBase):
    """Remove an existing node."""

    type: Literal["remove_node"] = EditType.REMOVE_NODE.value
    node_id: int = Field(..., ge=0)


EDIT_TYPES = (CreateNode, UpdateNode, MoveNode, RemoveNode)

Edit = Annotated[
    Union[CreateNode, UpdateNode, MoveNode, RemoveNode],
    Field(discriminator="type"),
]


def parse_edit(data: Dict[str, Any]) -> Edit:
    """
    Parse a raw dictionary into a typed edit.

    Raises:
        ValueError: If the edit type is unknown or invalid.
    """
    edit_type = data.get("type")

    type_map = {
        EditType.CREATE_NODE.value: CreateNode,
        EditType.UPDATE_NODE.value: UpdateNode,
        EditType.MOVE_NODE.value: MoveNode,
        EditType.REMOVE_NODE.value: RemoveNode,
    }

    if edit_type not in type_map:
        raise ValueError(f"Unknown edit type: {edit_type}")

    return type_map[edit_type](**data)


__all__ = [
    "CreateNode",
    "UpdateNode",
    "MoveNode",
    "RemoveNode",
    "Edit",
    "EDIT_TYPES",
    "parse_edit",
]

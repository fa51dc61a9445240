"""
Edit base model.

Edits are immutable values. They carry everything needed to reapply them
to a document, so replaying the same log always produces the same result.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class EditType(str, Enum):
    """Discriminator values for the closed set of edit variants."""

    CREATE_NODE = "create_node"
    UPDATE_NODE = "update_node"
    MOVE_NODE = "move_node"
    REMOVE_NODE = "remove_node"


class EditBase(BaseModel):
    """Common configuration shared by every edit variant."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize edit to dictionary."""
        return self.model_dump()


__all__ = [
    "EditType",
    "EditBase",
]

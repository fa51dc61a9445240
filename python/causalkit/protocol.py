"""
Message types exchanged between participants.

An edit travels together with the timestamp its sender accepted it under.
These models only describe the payload; delivering it is up to the caller.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .clock import CausalTimestamp
from .config import MAX_PARTICIPANTS
from .edits import Edit, EditBase


class EditMessage(BaseModel):
    """An edit plus the causal timestamp it was accepted under."""

    model_config = ConfigDict(frozen=True)

    type: Literal["edit"] = "edit"
    sender: int = Field(..., ge=0)
    timestamp: List[int] = Field(..., min_length=1, max_length=MAX_PARTICIPANTS)
    edit: Edit

    @field_validator("timestamp")
    @classmethod
    def validate_timestamp(cls, v: List[int]) -> List[int]:
        for value in v:
            if value < 0:
                raise ValueError("Timestamp counters must be non-negative")
        return v

    @classmethod
    def create(cls, sender: int, timestamp: CausalTimestamp, edit: EditBase) -> "EditMessage":
        """Wrap an edit and its timestamp for delivery."""
        return cls(sender=sender, timestamp=timestamp.to_list(), edit=edit)

    def clock(self) -> CausalTimestamp:
        """Get the timestamp as a ``CausalTimestamp``."""
        return CausalTimestamp.from_list(self.timestamp)


# Union of all message types
Message = Union[EditMessage]


def parse_message(data: Dict[str, Any]) -> Message:
    """
    Parse a raw dictionary into a typed message.

    Raises:
        ValueError: If the message type is unknown or invalid.
    """
    msg_type = data.get("type")

    type_map = {
        "edit": EditMessage,
    }

    if msg_type not in type_map:
        raise ValueError(f"Unknown message type: {msg_type}")

    return type_map[msg_type](**data)


__all__ = [
    "EditMessage",
    "Message",
    "parse_message",
]

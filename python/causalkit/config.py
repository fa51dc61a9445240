"""
Participant configuration.

Validates the participant count and owned slot before a manager is built,
so a misconfigured participant fails at startup rather than mid-session.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

MAX_PARTICIPANTS = 1024


class ParticipantConfig(BaseModel):
    """Identity of one participant within a fixed-size system."""

    model_config = ConfigDict(frozen=True)

    participant_count: int = Field(..., ge=1, le=MAX_PARTICIPANTS)
    owned_index: int = Field(..., ge=0)
    name: str | None = Field(None, max_length=512)

    @field_validator("owned_index")
    @classmethod
    def validate_owned_index(cls, v: int, info: ValidationInfo) -> int:
        count = info.data.get("participant_count")
        if count is not None and v >= count:
            raise ValueError(f"owned_index {v} out of range for {count} participants")
        return v

    @property
    def display_name(self) -> str:
        """Name used in log messages."""
        return self.name or f"participant-{self.owned_index}"


__all__ = [
    "ParticipantConfig",
]

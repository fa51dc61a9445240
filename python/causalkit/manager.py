"""
Document manager for a single participant.

Owns the participant's causal timestamp, the ordered edit log and the
document derived from it. Every participant that has received the same set
of edits ends up with the same log order, and therefore the same document,
no matter in which order the edits arrived.
"""

from __future__ import annotations

import logging

from .clock import CausalTimestamp
from .config import ParticipantConfig
from .document import Document
from .edits import EDIT_TYPES, EditBase, apply_edit
from .log import CausalLog, LogEntry

logger = logging.getLogger(__name__)


class DocumentManager:
    """
    Manages the local state of a replicated document.

    Operations must be serialized by the caller: the insert-and-rebuild
    sequence is not safe under interleaved mutation.

    Example:
        manager = DocumentManager(participant_count=2, owned_index=0)
        timestamp = manager.apply_local(CreateNode(author="alice"))
        # send (edit, timestamp) to the other participants
    """

    def __init__(self, participant_count: int, owned_index: int):
        """
        Initialize a manager with an empty log.

        Args:
            participant_count: Number of participants in the system.
            owned_index: The timestamp slot this participant increments.

        Raises:
            ValueError: If ``owned_index`` is not a valid slot.
        """
        if not 0 <= owned_index < participant_count:
            raise ValueError(
                f"owned_index {owned_index} out of range for {participant_count} participants"
            )
        self._owned_index = owned_index
        self._timestamp = CausalTimestamp.zero(participant_count)
        self._log = CausalLog()
        self._document = Document()
        self._rebuild_count = 0

    @classmethod
    def from_config(cls, config: ParticipantConfig) -> "DocumentManager":
        """Create a manager from a validated participant configuration."""
        return cls(config.participant_count, config.owned_index)

    @property
    def owned_index(self) -> int:
        """The timestamp slot owned by this participant."""
        return self._owned_index

    @property
    def participant_count(self) -> int:
        """Number of participants in the system."""
        return len(self._timestamp)

    @property
    def timestamp(self) -> CausalTimestamp:
        """The current local timestamp."""
        return self._timestamp

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        """Snapshot of the log in order."""
        return self._log.entries

    @property
    def rebuild_count(self) -> int:
        """How many times the document was rebuilt from the log."""
        return self._rebuild_count

    def current_document(self) -> Document:
        """Get a snapshot of the current document."""
        return self._document.copy()

    def replay(self) -> Document:
        """Compute the document from scratch without touching local state."""
        return self._log.replay()

    def apply_local(self, edit: EditBase) -> CausalTimestamp:
        """
        Apply an edit originated by this participant.

        Args:
            edit: The new edit.

        Returns:
            The timestamp the edit was accepted under. It has to be sent to
            the other participants alongside the edit.

        Raises:
            TypeError: If ``edit`` is not one of the known variants.
        """
        self._check_edit(edit)
        self._timestamp = self._timestamp.increment(self._owned_index)
        self._insert(LogEntry(self._timestamp, edit))
        return self._timestamp

    def apply_external(self, edit: EditBase, timestamp: CausalTimestamp) -> None:
        """
        Apply an edit received from another participant.

        The local timestamp is advanced before it is merged with the edit's
        timestamp, so local causal progress is never lost.

        Args:
            edit: The received edit.
            timestamp: The timestamp the sender accepted the edit under.

        Raises:
            ValueError: If ``timestamp`` does not have one slot per participant.
            TypeError: If ``edit`` is not one of the known variants.
        """
        self._check_edit(edit)
        if len(timestamp) != len(self._timestamp):
            raise ValueError(
                f"Expected a timestamp of {len(self._timestamp)} slots, got {len(timestamp)}"
            )
        self._timestamp = self._timestamp.increment(self._owned_index)
        self._insert(LogEntry(timestamp, edit))
        self._timestamp = self._timestamp.merge(timestamp)

    def _check_edit(self, edit: EditBase) -> None:
        if not isinstance(edit, EDIT_TYPES):
            raise TypeError(f"Unsupported edit type: {type(edit).__name__}")

    def _insert(self, entry: LogEntry) -> None:
        """Insert an entry and bring the document up to date."""
        index = self._log.insert(entry)

        # Appended at the tail: the edit can be applied on top of the
        # current document.
        if index == len(self._log) - 1:
            apply_edit(entry.edit, self._document)
            return

        # Inserted before existing entries, which may now act on a
        # different document.
        logger.debug(
            f"Participant {self._owned_index}: {entry.timestamp} inserted at "
            f"{index} of {len(self._log)}, rebuilding document"
        )
        self._document = self._log.replay()
        self._rebuild_count += 1


__all__ = [
    "DocumentManager",
]

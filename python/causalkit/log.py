"""
Ordered log of accepted edits.

The log is kept sorted by the total order over causal timestamps after
every insertion. Entries are never removed. The document is a pure fold of
the log, in order, over an empty document.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from .clock import CausalTimestamp, Ordering, compare
from .document import Document
from .edits import EditBase, apply_edit


@dataclass(frozen=True)
class LogEntry:
    """An accepted edit paired with the timestamp it was accepted under."""

    timestamp: CausalTimestamp
    edit: EditBase

    def to_dict(self) -> dict[str, Any]:
        """Serialize entry to dictionary."""
        return {
            "timestamp": self.timestamp.to_list(),
            "edit": self.edit.to_dict(),
        }

    def __str__(self) -> str:
        return f"{self.timestamp} {self.edit!r}"


class CausalLog:
    """
    Append/insert-only sequence of log entries sorted by timestamp.

    Entries with equal timestamps keep their arrival order.
    """

    def __init__(self) -> None:
        self._entries: list[LogEntry] = []

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        """Get a snapshot of all entries in log order."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> LogEntry:
        return self._entries[index]

    def insertion_index(self, timestamp: CausalTimestamp) -> int:
        """
        Find where an entry with ``timestamp`` belongs.

        Scans backward from the tail, since late arrivals usually still sort
        last, and stops at the first entry the timestamp compares >= to.
        The result is the position right after that entry, or 0 if there is
        none.
        """
        i = len(self._entries) - 1
        while i >= 0 and compare(timestamp, self._entries[i].timestamp) is Ordering.LESS:
            i -= 1
        return i + 1

    def insert(self, entry: LogEntry) -> int:
        """
        Insert an entry at its sorted position.

        Returns:
            The index the entry was placed at.
        """
        index = self.insertion_index(entry.timestamp)
        self._entries.insert(index, entry)
        return index

    def is_ordered(self) -> bool:
        """Check that every entry compares >= its predecessor."""
        return all(
            compare(prev.timestamp, entry.timestamp) is not Ordering.GREATER
            for prev, entry in zip(self._entries, self._entries[1:])
        )

    def replay(self) -> Document:
        """Rebuild a document by applying every entry to an empty document."""
        document = Document()
        for entry in self._entries:
            apply_edit(entry.edit, document)
        return document


__all__ = [
    "LogEntry",
    "CausalLog",
]

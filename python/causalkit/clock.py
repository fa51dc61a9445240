"""
Causal timestamps for ordering edits across participants.

A causal timestamp is a fixed-length vector of counters, one slot per
participant. The slot index is the participant's permanent identity and
only that participant ever increments it.

Component-wise comparison of two vectors only yields a partial order:
concurrent edits are incomparable. To obtain one ordering that every
participant computes identically, timestamps are compared lexicographically.
This agrees with causal order whenever causal order decides, and otherwise
gives priority to the lowest differing slot (slot 0 outranks slot 1, ...).

Example:
    a = CausalTimestamp.zero(2).increment(0)   # [1, 0]
    b = CausalTimestamp.zero(2).increment(1)   # [0, 1]
    a.concurrent(b)                            # True
    compare(a, b)                              # Ordering.GREATER
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator


class Ordering(int, Enum):
    """Result of comparing two timestamps under the total order."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True)
class CausalTimestamp:
    """
    Immutable per-participant counter vector.

    Every operation returns a new timestamp; existing values are never
    mutated, so old timestamps stay valid for historical comparison.
    """

    counters: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "counters", tuple(self.counters))
        for i, value in enumerate(self.counters):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Counter at slot {i} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"Counter at slot {i} must be non-negative, got {value}")

    @classmethod
    def zero(cls, participant_count: int) -> "CausalTimestamp":
        """Create the all-zero timestamp a participant starts from."""
        if participant_count < 1:
            raise ValueError(f"participant_count must be at least 1, got {participant_count}")
        return cls((0,) * participant_count)

    @classmethod
    def from_list(cls, counters: Iterable[int]) -> "CausalTimestamp":
        """Build a timestamp from a plain list of counters."""
        return cls(tuple(counters))

    def to_list(self) -> list[int]:
        """Serialize to a plain list of counters."""
        return list(self.counters)

    def __len__(self) -> int:
        return len(self.counters)

    def __iter__(self) -> Iterator[int]:
        return iter(self.counters)

    def __getitem__(self, index: int) -> int:
        return self.counters[index]

    def increment(self, owned_index: int) -> "CausalTimestamp":
        """
        Return a copy with slot ``owned_index`` advanced by one.

        Raises:
            ValueError: If ``owned_index`` is not a valid slot.
        """
        if not 0 <= owned_index < len(self.counters):
            raise ValueError(
                f"Slot {owned_index} out of range for a timestamp of {len(self.counters)} slots"
            )
        counters = list(self.counters)
        counters[owned_index] += 1
        return CausalTimestamp(tuple(counters))

    def merge(self, other: "CausalTimestamp") -> "CausalTimestamp":
        """
        Return the slot-wise maximum of both timestamps.

        Raises:
            ValueError: If the timestamps have different lengths.
        """
        self._check_length(other)
        return CausalTimestamp(
            tuple(max(mine, theirs) for mine, theirs in zip(self.counters, other.counters))
        )

    def compare(self, other: "CausalTimestamp") -> Ordering:
        """Compare against ``other`` under the total order."""
        return compare(self, other)

    def happened_before(self, other: "CausalTimestamp") -> bool:
        """
        True if this timestamp causally precedes ``other``.

        Every slot is <= the matching slot of ``other`` and at least one
        is strictly less.
        """
        self._check_length(other)
        return self.counters != other.counters and all(
            mine <= theirs for mine, theirs in zip(self.counters, other.counters)
        )

    def concurrent(self, other: "CausalTimestamp") -> bool:
        """True if neither timestamp causally precedes the other."""
        return (
            self.counters != other.counters
            and not self.happened_before(other)
            and not other.happened_before(self)
        )

    def _check_length(self, other: "CausalTimestamp") -> None:
        if len(self.counters) != len(other.counters):
            raise ValueError(
                f"Cannot combine timestamps of {len(self.counters)} and {len(other.counters)} slots"
            )

    def __lt__(self, other: "CausalTimestamp") -> bool:
        return compare(self, other) is Ordering.LESS

    def __le__(self, other: "CausalTimestamp") -> bool:
        return compare(self, other) is not Ordering.GREATER

    def __gt__(self, other: "CausalTimestamp") -> bool:
        return compare(self, other) is Ordering.GREATER

    def __ge__(self, other: "CausalTimestamp") -> bool:
        return compare(self, other) is not Ordering.LESS

    def __str__(self) -> str:
        return "[" + ", ".join(str(value) for value in self.counters) + "]"


def compare(a: CausalTimestamp, b: CausalTimestamp) -> Ordering:
    """
    Compare two timestamps under the total order.

    Slots are scanned in increasing index order; the first slot where the
    timestamps differ decides. Equal vectors compare EQUAL.

    Raises:
        ValueError: If the timestamps have different lengths.
    """
    a._check_length(b)
    for mine, theirs in zip(a.counters, b.counters):
        if mine != theirs:
            return Ordering.GREATER if mine > theirs else Ordering.LESS
    return Ordering.EQUAL


__all__ = [
    "CausalTimestamp",
    "Ordering",
    "compare",
]

"""Shared fixtures for causalkit tests."""

from __future__ import annotations

import pytest

from causalkit import CausalTimestamp, DocumentManager


@pytest.fixture
def single_manager() -> DocumentManager:
    """A manager for a system with a single participant."""
    return DocumentManager(participant_count=1, owned_index=0)


@pytest.fixture
def manager_pair() -> tuple[DocumentManager, DocumentManager]:
    """Managers for participants 0 and 1 of a two-participant system."""
    return DocumentManager(2, 0), DocumentManager(2, 1)


def ts(*counters: int) -> CausalTimestamp:
    """Shorthand for building timestamps in tests."""
    return CausalTimestamp(tuple(counters))

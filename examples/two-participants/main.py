"""
Two Participants - Conflict Demo

Drives one local document manager while simulating a second participant
by hand, including an edit that arrives with an outdated timestamp.
Run with: python main.py
"""

import sys
import os

# Add the parent package to path for development
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "..", "python"))

from causalkit import (
    CausalTimestamp,
    CreateNode,
    DocumentManager,
    MoveNode,
    UpdateNode,
)

PARTICIPANT_COUNT = 2
LOCAL_INDEX = 0
EXTERNAL_INDEX = 1

manager = DocumentManager(PARTICIPANT_COUNT, LOCAL_INDEX)

# Timestamp of the simulated external participant
external_clock = CausalTimestamp.zero(PARTICIPANT_COUNT)


def send_edit(edit):
    """Apply a local edit and let the external participant observe it."""
    global external_clock
    timestamp = manager.apply_local(edit)

    # What apply_external does on the receiving side
    external_clock = external_clock.increment(EXTERNAL_INDEX).merge(timestamp)


def receive_edit(edit):
    """Apply an edit made by the external participant."""
    global external_clock
    external_clock = external_clock.increment(EXTERNAL_INDEX)
    manager.apply_external(edit, external_clock)


def receive_delayed_edit(edit):
    """
    Apply an external edit whose sender missed our latest edit.

    The timestamp is one behind on our slot, so our last edit sorts after
    it and wins.
    """
    counters = external_clock.to_list()
    counters[LOCAL_INDEX] -= 1
    manager.apply_external(edit, CausalTimestamp.from_list(counters))


def print_document():
    print(manager.current_document())
    print()


def main():
    # Local edits only: nodes get ids 0, 1, ... in creation order.
    send_edit(CreateNode(author="Local User 1"))
    print_document()

    send_edit(CreateNode(author="Local User 2"))
    print_document()

    send_edit(UpdateNode(node_id=0, text="Text of the first node."))
    send_edit(UpdateNode(node_id=1, text="Text of the second node."))
    print_document()

    send_edit(MoveNode(node_id=0, new_index=1))
    print_document()

    # External edits from a participant that is fully in sync.
    receive_edit(CreateNode(author="External User 1"))
    receive_edit(UpdateNode(node_id=2, text="Text of the first external node."))
    print_document()

    send_edit(MoveNode(node_id=2, new_index=0))
    receive_edit(MoveNode(node_id=2, new_index=1))
    print_document()

    # Conflict: the external move to position 1 was made without seeing our
    # move to position 0. Our move sorts last, so node 2 ends at position 0.
    send_edit(MoveNode(node_id=2, new_index=1))
    send_edit(MoveNode(node_id=2, new_index=0))
    receive_delayed_edit(MoveNode(node_id=2, new_index=1))
    print_document()

    print(f"Local timestamp: {manager.timestamp}, rebuilds: {manager.rebuild_count}")


if __name__ == "__main__":
    main()

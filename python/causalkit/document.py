"""
Document model the edit log is folded over.

A document is an ordered list of addressable nodes. It is only ever changed
by applying edits, either incrementally or during a full replay of the log.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(frozen=True)
class Node:
    """A single addressable node in a document."""

    id: int
    author: str
    text: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize node to dictionary."""
        return {"id": self.id, "author": self.author, "text": self.text}

    def __str__(self) -> str:
        return f"[{self.id}] {self.author}: {self.text}"


@dataclass
class Document:
    """
    Ordered sequence of nodes.

    Node ids come from ``next_id``, which only ever grows, so an id is never
    handed out twice even after the node carrying it was removed.
    """

    nodes: list[Node] = field(default_factory=list)
    next_id: int = 0

    def copy(self) -> "Document":
        """Return an independent snapshot of this document."""
        return Document(nodes=list(self.nodes), next_id=self.next_id)

    def find_node_index(self, node_id: int) -> int:
        """Get the position of a node, or -1 if it is not present."""
        for i, node in enumerate(self.nodes):
            if node.id == node_id:
                return i
        return -1

    def get(self, node_id: int) -> Node | None:
        """Get a node by id."""
        i = self.find_node_index(node_id)
        return self.nodes[i] if i >= 0 else None

    def append_node(self, author: str) -> Node:
        """Create a new node at the end of the document."""
        node = Node(id=self.next_id, author=author)
        self.next_id += 1
        self.nodes.append(node)
        return node

    def update_text(self, node_id: int, text: str) -> bool:
        """
        Replace the text of a node.

        Returns False if the node does not exist.
        """
        i = self.find_node_index(node_id)
        if i < 0:
            return False
        self.nodes[i] = replace(self.nodes[i], text=text)
        return True

    def move_node(self, node_id: int, new_index: int) -> bool:
        """
        Move a node to ``new_index``.

        The index is interpreted after the node has been taken out of the
        list; an index past the end places the node last. Returns False if
        the node does not exist.
        """
        i = self.find_node_index(node_id)
        if i < 0:
            return False
        node = self.nodes.pop(i)
        self.nodes.insert(min(new_index, len(self.nodes)), node)
        return True

    def remove_node(self, node_id: int) -> bool:
        """
        Remove a node.

        Returns False if the node does not exist.
        """
        i = self.find_node_index(node_id)
        if i < 0:
            return False
        del self.nodes[i]
        return True

    @property
    def node_ids(self) -> list[int]:
        """Ids of all nodes in document order."""
        return [node.id for node in self.nodes]

    def to_dict(self) -> dict[str, Any]:
        """Serialize document to dictionary."""
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "next_id": self.next_id,
        }

    def __len__(self) -> int:
        return len(self.nodes)

    def __str__(self) -> str:
        return "\n".join(str(node) for node in self.nodes)


__all__ = [
    "Node",
    "Document",
]

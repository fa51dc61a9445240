"""
In-process session of several participants.

Simulates participants that originate edits and exchange them, letting the
caller decide when, and in which order, each participant receives what the
others sent. Useful for demos and for exercising convergence.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Sequence

from .config import ParticipantConfig
from .document import Document
from .edits import EditBase
from .manager import DocumentManager
from .protocol import EditMessage, parse_message

logger = logging.getLogger(__name__)


class Participant:
    """
    A single participant with its own document manager.

    All access to the manager goes through an asyncio lock, so edits
    submitted and received concurrently are applied one at a time.
    """

    def __init__(self, config: ParticipantConfig):
        """
        Initialize a participant.

        Args:
            config: The participant's identity within the session.
        """
        self.config = config
        self._manager = DocumentManager.from_config(config)
        self._lock = asyncio.Lock()

    @property
    def index(self) -> int:
        """The participant's timestamp slot."""
        return self.config.owned_index

    @property
    def name(self) -> str:
        """Display name of the participant."""
        return self.config.display_name

    @property
    def manager(self) -> DocumentManager:
        """Get the participant's document manager."""
        return self._manager

    @property
    def document(self) -> Document:
        """Get a snapshot of the participant's document."""
        return self._manager.current_document()

    async def submit(self, edit: EditBase) -> EditMessage:
        """
        Apply a locally originated edit.

        Returns:
            The message to deliver to the other participants.
        """
        async with self._lock:
            timestamp = self._manager.apply_local(edit)
        return EditMessage.create(self.index, timestamp, edit)

    async def receive(self, message: EditMessage | dict[str, Any]) -> None:
        """
        Apply an edit sent by another participant.

        Args:
            message: The message, either typed or as a raw dictionary.
        """
        if isinstance(message, dict):
            message = parse_message(message)
        async with self._lock:
            self._manager.apply_external(message.edit, message.clock())


class Session:
    """
    Manages a fixed group of participants and the messages between them.

    Submitted edits are queued, serialized, for every other participant
    until ``deliver`` hands them over.
    """

    def __init__(self, participant_count: int, names: Sequence[str] | None = None):
        """
        Initialize a session.

        Args:
            participant_count: Number of participants to create.
            names: Optional display names, one per participant.
        """
        names = list(names) if names is not None else []
        if names and len(names) != participant_count:
            raise ValueError(f"Expected {participant_count} names, got {len(names)}")

        self._participants: list[Participant] = [
            Participant(
                ParticipantConfig(
                    participant_count=participant_count,
                    owned_index=index,
                    name=names[index] if names else None,
                )
            )
            for index in range(participant_count)
        ]
        # Serialized messages waiting for each recipient, in send order
        self._pending: dict[int, list[dict[str, Any]]] = {
            index: [] for index in range(participant_count)
        }

    @property
    def participants(self) -> list[Participant]:
        """Get all participants, ordered by index."""
        return list(self._participants)

    def participant(self, index: int) -> Participant:
        """
        Get a participant by index.

        Raises:
            KeyError: If there is no such participant.
        """
        if not 0 <= index < len(self._participants):
            raise KeyError(f"Participant {index} not in session")
        return self._participants[index]

    def document(self, index: int) -> Document:
        """Get a snapshot of a participant's document."""
        return self.participant(index).document

    def pending(self, index: int) -> list[EditMessage]:
        """Get the messages queued for a participant."""
        self.participant(index)
        return [parse_message(data) for data in self._pending[index]]

    async def submit(self, index: int, edit: EditBase) -> EditMessage:
        """
        Apply an edit at one participant and queue it for all others.

        Returns:
            The message that was queued.
        """
        message = await self.participant(index).submit(edit)
        data = message.model_dump()
        for recipient in self._pending:
            if recipient != index:
                self._pending[recipient].append(data)
        return message

    async def deliver(self, index: int, order: Sequence[int] | None = None) -> int:
        """
        Deliver queued messages to a participant.

        Args:
            index: The receiving participant.
            order: Optional permutation of queue positions giving the order
                in which queued messages arrive. Defaults to send order.

        Returns:
            Number of messages delivered.
        """
        participant = self.participant(index)
        queue = self._pending[index]
        if order is None:
            order = range(len(queue))
        elif sorted(order) != list(range(len(queue))):
            raise ValueError(f"order must be a permutation of {len(queue)} queued messages")

        batch = [queue[i] for i in order]
        self._pending[index] = []
        delivered = 0
        try:
            for data in batch:
                await participant.receive(data)
                delivered += 1
        finally:
            # Undelivered messages go back ahead of anything queued meanwhile
            self._pending[index][:0] = batch[delivered:]

        if batch:
            logger.debug(f"Delivered {len(batch)} messages to {participant.name}")
        return len(batch)

    async def deliver_all(self) -> int:
        """Deliver every queued message to every participant in send order."""
        delivered = 0
        for index in range(len(self._participants)):
            delivered += await self.deliver(index)
        return delivered

    def converged(self) -> bool:
        """Check whether all participants report the same document."""
        documents = [participant.document for participant in self._participants]
        return all(document == documents[0] for document in documents[1:])


__all__ = [
    "Participant",
    "Session",
]

"""
CausalKit - Causally ordered edit logs for replicated documents.
"""

from causalkit.clock import CausalTimestamp, Ordering, compare
from causalkit.config import ParticipantConfig
from causalkit.document import Document, Node

# Edit types
from causalkit.edits import (
    EditBase,
    EditType,
    CreateNode,
    UpdateNode,
    MoveNode,
    RemoveNode,
    Edit,
    parse_edit,
    apply_edit,
)

# Log management
from causalkit.log import CausalLog, LogEntry
from causalkit.manager import DocumentManager

# Protocol message types
from causalkit.protocol import EditMessage, Message, parse_message

# Simulated sessions
from causalkit.session import Participant, Session

__version__ = "0.1.0"

__all__ = [
    # Clock
    "CausalTimestamp",
    "Ordering",
    "compare",
    # Config
    "ParticipantConfig",
    # Document
    "Document",
    "Node",
    # Edits
    "EditBase",
    "EditType",
    "CreateNode",
    "UpdateNode",
    "MoveNode",
    "RemoveNode",
    "Edit",
    "parse_edit",
    "apply_edit",
    # Log
    "CausalLog",
    "LogEntry",
    "DocumentManager",
    # Protocol
    "EditMessage",
    "Message",
    "parse_message",
    # Session
    "Participant",
    "Session",
]

"""Conversation session data models."""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class MessageRole(str, Enum):
    """Author of a message in a conversation."""
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    """A single conversation message. Never mutated once created."""
    role: MessageRole
    content: str
    timestamp: datetime


@dataclass
class Session:
    """Conversation state for one session.

    ``messages[0]`` is always the system message.
    """
    session_id: str
    messages: list[Message]
    created_at: datetime
    last_activity: datetime
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def system_prompt(self) -> str:
        return self.messages[0].content


@dataclass(frozen=True)
class SessionStats:
    """Read-only projection of a session's counters."""
    total_user_visible_messages: int
    user_messages: int
    assistant_messages: int
    created_at: datetime
    last_activity: datetime
    metadata: dict[str, Any]

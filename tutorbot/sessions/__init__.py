"""Conversation session management."""
from tutorbot.sessions.models import Message, MessageRole, Session, SessionStats
from tutorbot.sessions.store import (
    DEFAULT_EXPIRY_MINUTES,
    DEFAULT_MAX_HISTORY,
    SessionStore,
    SessionStoreError,
)
from tutorbot.sessions.sweeper import ExpirySweeper

__all__ = [
    "DEFAULT_EXPIRY_MINUTES",
    "DEFAULT_MAX_HISTORY",
    "ExpirySweeper",
    "Message",
    "MessageRole",
    "Session",
    "SessionStats",
    "SessionStore",
    "SessionStoreError",
]

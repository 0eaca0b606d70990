"""In-memory conversation session store with bounded history."""
import copy
import logging
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Mapping, Optional
from uuid import uuid4

from tutorbot.sessions.models import Message, MessageRole, Session, SessionStats

logger = logging.getLogger(__name__)

DEFAULT_MAX_HISTORY = 20
DEFAULT_EXPIRY_MINUTES = 60
MIN_HISTORY = 2
_MAX_ID_ATTEMPTS = 5

Clock = Callable[[], datetime]
IdFactory = Callable[[], str]


class SessionStoreError(Exception):
    """Unrecoverable failure inside the session store."""


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _new_session_id() -> str:
    return f"session_{uuid4().hex}"


class SessionStore:
    """Owns every conversation session of the process.

    All operations are synchronous, so within one event loop each call is
    atomic with respect to the others. Callers only ever get copies or
    projections, never the live records.
    """

    def __init__(
        self,
        max_history: int = DEFAULT_MAX_HISTORY,
        expiry_minutes: int = DEFAULT_EXPIRY_MINUTES,
        clock: Clock = _utc_now,
        id_factory: IdFactory = _new_session_id,
    ) -> None:
        if max_history < MIN_HISTORY:
            logger.warning(
                "max_history=%d is below %d, clamping to %d",
                max_history, MIN_HISTORY, MIN_HISTORY,
            )
            max_history = MIN_HISTORY
        self._max_history = max_history
        self._expiry_minutes = expiry_minutes
        self._clock = clock
        self._id_factory = id_factory
        self._sessions: dict[str, Session] = {}

    @property
    def max_history(self) -> int:
        return self._max_history

    @property
    def expiry_minutes(self) -> int:
        return self._expiry_minutes

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def session_ids(self) -> list[str]:
        return list(self._sessions)

    def create(self, system_prompt: str) -> Session:
        """Create a session holding only the system message."""
        session_id = self._generate_id()
        now = self._clock()
        session = Session(
            session_id=session_id,
            messages=[Message(role=MessageRole.SYSTEM, content=system_prompt, timestamp=now)],
            created_at=now,
            last_activity=now,
        )
        self._sessions[session_id] = session
        logger.debug("Created session %s", session_id)
        return self._copy(session)

    def get(self, session_id: str) -> Optional[Session]:
        """Return a copy of the session, or None. Does not touch last_activity."""
        session = self._sessions.get(session_id)
        return self._copy(session) if session is not None else None

    def append(self, session_id: str, role: MessageRole | str, content: str) -> bool:
        """Append a message and trim history down to ``max_history``."""
        session = self._sessions.get(session_id)
        if session is None:
            return False
        now = self._clock()
        session.messages.append(Message(role=MessageRole(role), content=content, timestamp=now))
        session.last_activity = now
        if len(session.messages) > self._max_history:
            session.messages = [session.messages[0], *session.messages[-(self._max_history - 1):]]
        return True

    def to_completion_messages(self, session_id: str) -> list[dict[str, str]]:
        """Project the history as role/content pairs in chronological order."""
        session = self._sessions.get(session_id)
        if session is None:
            return []
        return [{"role": m.role.value, "content": m.content} for m in session.messages]

    def update_metadata(self, session_id: str, partial: Mapping[str, Any]) -> bool:
        """Shallow-merge ``partial`` into the session metadata."""
        session = self._sessions.get(session_id)
        if session is None:
            return False
        session.metadata = {**session.metadata, **copy.deepcopy(dict(partial))}
        return True

    def reset(self, session_id: str) -> bool:
        """Drop everything but the system message."""
        session = self._sessions.get(session_id)
        if session is None:
            return False
        session.messages = [session.messages[0]]
        session.last_activity = self._clock()
        return True

    def delete(self, session_id: str) -> bool:
        """Remove the session. True only if something was removed."""
        removed = self._sessions.pop(session_id, None) is not None
        if removed:
            logger.debug("Deleted session %s", session_id)
        return removed

    def stats(self, session_id: str) -> Optional[SessionStats]:
        session = self._sessions.get(session_id)
        if session is None:
            return None
        user_messages = sum(1 for m in session.messages if m.role == MessageRole.USER)
        assistant_messages = sum(1 for m in session.messages if m.role == MessageRole.ASSISTANT)
        return SessionStats(
            total_user_visible_messages=len(session.messages) - 1,
            user_messages=user_messages,
            assistant_messages=assistant_messages,
            created_at=session.created_at,
            last_activity=session.last_activity,
            metadata=copy.deepcopy(session.metadata),
        )

    def sweep_expired(self, threshold_minutes: Optional[int] = None) -> int:
        """Remove sessions idle for strictly longer than the threshold.

        Returns the number of sessions removed.
        """
        minutes = self._expiry_minutes if threshold_minutes is None else threshold_minutes
        threshold = timedelta(minutes=minutes)
        now = self._clock()
        removed = 0
        for session_id, session in list(self._sessions.items()):
            if now - session.last_activity > threshold:
                if self._sessions.pop(session_id, None) is not None:
                    removed += 1
        if removed:
            logger.info("Expired %d inactive session(s)", removed)
        return removed

    def _generate_id(self) -> str:
        for _ in range(_MAX_ID_ATTEMPTS):
            session_id = self._id_factory()
            if session_id not in self._sessions:
                return session_id
            logger.warning("Session id collision on %s, regenerating", session_id)
        logger.error("Could not generate a unique session id after %d attempts", _MAX_ID_ATTEMPTS)
        raise SessionStoreError("Unable to generate a unique session id")

    @staticmethod
    def _copy(session: Session) -> Session:
        return replace(
            session,
            messages=list(session.messages),
            metadata=copy.deepcopy(session.metadata),
        )

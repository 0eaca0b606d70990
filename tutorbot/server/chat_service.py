"""Turn-taking orchestration between the session store and the model."""
import logging
from typing import Optional, Protocol, Sequence

from tutorbot.completion.types import CompletionOptions, CompletionResult, CompletionSuccess
from tutorbot.prompts import resolve_mode, resolve_system_prompt
from tutorbot.server.errors import (
    CompletionUnavailableError,
    InvalidRequestError,
    SessionNotFoundError,
    UpstreamFailureError,
)
from tutorbot.sessions.models import MessageRole, Session
from tutorbot.sessions.store import SessionStore

logger = logging.getLogger(__name__)


class CompletionBackend(Protocol):
    def is_ready(self) -> bool: ...

    async def complete(
        self,
        messages: Sequence[dict[str, str]],
        options: Optional[CompletionOptions] = None,
    ) -> CompletionResult: ...


class ChatService:
    """Composes the session store with the completion boundary."""

    def __init__(self, store: SessionStore, completion: CompletionBackend) -> None:
        self._store = store
        self._completion = completion

    def start_session(self, mode: Optional[str], context: Optional[dict] = None) -> Session:
        """Create a session for ``mode`` and record how its prompt was built."""
        context = context or {}
        effective_mode = resolve_mode(mode)
        session = self._store.create(resolve_system_prompt(effective_mode, context))
        self._store.update_metadata(session.session_id, {"mode": effective_mode, "context": context})
        logger.info("Session %s created with mode=%s", session.session_id, effective_mode)
        return session

    async def take_turn(
        self,
        session_id: Optional[str],
        message: Optional[str],
        options: Optional[CompletionOptions] = None,
    ) -> CompletionSuccess:
        """Run one user turn against the model.

        The user message stays in history even when the model call fails,
        so the same turn can be retried. The assistant reply is appended
        only if the session still exists when the model answers.
        """
        if not session_id or not message or not message.strip():
            raise InvalidRequestError("sessionId and message are required")
        if session_id not in self._store:
            raise SessionNotFoundError(session_id)
        if not self._completion.is_ready():
            raise CompletionUnavailableError()

        self._store.append(session_id, MessageRole.USER, message)
        history = self._store.to_completion_messages(session_id)

        result = await self._completion.complete(history, options)
        if not result.success:
            logger.warning(
                "Completion failed for session %s: %s (%s)",
                session_id, result.error_message, result.error_code,
            )
            raise UpstreamFailureError(result.error_message, result.error_code)

        if not self._store.append(session_id, MessageRole.ASSISTANT, result.text):
            logger.info("Session %s vanished during completion, reply not recorded", session_id)
        return result

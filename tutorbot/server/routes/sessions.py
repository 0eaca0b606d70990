"""Session lifecycle endpoints: create, history, stats, reset, delete."""
import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Body, Path, status

from tutorbot.server.chat_service import ChatService
from tutorbot.server.errors import SessionNotFoundError
from tutorbot.server.models.common import format_timestamp
from tutorbot.server.models.requests import CreateSessionRequest
from tutorbot.server.models.responses import (
    HistoryResponse,
    MessageResponse,
    OkResponse,
    SessionCreatedResponse,
    StatsResponse,
)
from tutorbot.sessions.store import SessionStore

logger = logging.getLogger(__name__)

SessionId = Annotated[str, Path(description="Session ID")]


def create_sessions_router(store: SessionStore, service: ChatService) -> APIRouter:
    """Create the sessions router with injected dependencies."""
    router = APIRouter(prefix="/sessions", tags=["sessions"])

    @router.post("", response_model=SessionCreatedResponse, status_code=status.HTTP_201_CREATED)
    async def create_session(
        body: Annotated[Optional[CreateSessionRequest], Body()] = None,
    ) -> SessionCreatedResponse:
        """Start a conversation in the requested prompt mode."""
        body = body or CreateSessionRequest()
        session = service.start_session(body.mode, body.context)
        return SessionCreatedResponse(
            session_id=session.session_id,
            created_at=format_timestamp(session.created_at),
        )

    @router.get("/{session_id}/history", response_model=HistoryResponse)
    async def get_history(session_id: SessionId) -> HistoryResponse:
        """Return the stored messages, system prompt included, with stats."""
        session = store.get(session_id)
        stats = store.stats(session_id)
        if session is None or stats is None:
            raise SessionNotFoundError(session_id)
        return HistoryResponse(
            messages=[MessageResponse.from_message(m) for m in session.messages],
            stats=StatsResponse.from_stats(stats),
        )

    @router.get("/{session_id}/stats", response_model=StatsResponse)
    async def get_stats(session_id: SessionId) -> StatsResponse:
        stats = store.stats(session_id)
        if stats is None:
            raise SessionNotFoundError(session_id)
        return StatsResponse.from_stats(stats)

    @router.post("/{session_id}/reset", response_model=OkResponse)
    async def reset_session(session_id: SessionId) -> OkResponse:
        """Clear the conversation, keeping the system prompt."""
        if not store.reset(session_id):
            raise SessionNotFoundError(session_id)
        logger.info("Session %s reset", session_id)
        return OkResponse()

    @router.delete("/{session_id}", response_model=OkResponse)
    async def delete_session(session_id: SessionId) -> OkResponse:
        if not store.delete(session_id):
            raise SessionNotFoundError(session_id)
        logger.info("Session %s deleted", session_id)
        return OkResponse()

    return router

"""GET /health endpoint handler."""
from datetime import datetime, timezone

from fastapi import APIRouter, status

from tutorbot.server.chat_service import CompletionBackend
from tutorbot.server.models.common import format_timestamp
from tutorbot.server.models.responses import HealthResponse
from tutorbot.sessions.store import SessionStore


def create_health_router(store: SessionStore, completion: CompletionBackend) -> APIRouter:
    """Create health router with injected dependencies."""
    router = APIRouter()

    @router.get("/health", response_model=HealthResponse, status_code=status.HTTP_200_OK, tags=["status"])
    async def health_check() -> HealthResponse:
        """Report liveness and whether the completion service is configured."""
        return HealthResponse(
            timestamp=format_timestamp(datetime.now(timezone.utc)),
            completion_ready=completion.is_ready(),
            active_sessions=len(store),
        )

    return router

"""Response models for API endpoints."""
from typing import Annotated, Any, Literal, Optional

from pydantic import Field

from tutorbot.completion.types import CompletionSuccess
from tutorbot.server.models.common import CamelModel, format_timestamp
from tutorbot.sessions.models import Message, SessionStats


class HealthResponse(CamelModel):
    status: Literal["ok"] = "ok"
    timestamp: Annotated[str, Field()]
    completion_ready: bool
    active_sessions: int


class SessionCreatedResponse(CamelModel):
    session_id: Annotated[str, Field()]
    created_at: Annotated[str, Field()]


class UsageResponse(CamelModel):
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class ChatResponse(CamelModel):
    response_text: str
    usage: UsageResponse
    model: str

    @classmethod
    def from_result(cls, result: CompletionSuccess) -> "ChatResponse":
        return cls(
            response_text=result.text,
            usage=UsageResponse(
                prompt_tokens=result.usage.prompt_tokens,
                completion_tokens=result.usage.completion_tokens,
                total_tokens=result.usage.total_tokens,
            ),
            model=result.model,
        )


class MessageResponse(CamelModel):
    role: str
    content: str
    timestamp: str

    @classmethod
    def from_message(cls, message: Message) -> "MessageResponse":
        return cls(role=message.role.value, content=message.content, timestamp=format_timestamp(message.timestamp))


class StatsResponse(CamelModel):
    total_user_visible_messages: int
    user_messages: int
    assistant_messages: int
    created_at: str
    last_activity: str
    metadata: dict[str, Any]

    @classmethod
    def from_stats(cls, stats: SessionStats) -> "StatsResponse":
        return cls(
            total_user_visible_messages=stats.total_user_visible_messages,
            user_messages=stats.user_messages,
            assistant_messages=stats.assistant_messages,
            created_at=format_timestamp(stats.created_at),
            last_activity=format_timestamp(stats.last_activity),
            metadata=stats.metadata,
        )


class HistoryResponse(CamelModel):
    messages: list[MessageResponse]
    stats: StatsResponse


class OkResponse(CamelModel):
    ok: bool = True


class ModesResponse(CamelModel):
    modes: list[str]
    descriptions: dict[str, str]


class ErrorDetail(CamelModel):
    code: Annotated[
        Literal[
            "INVALID_FORMAT",
            "INVALID_REQUEST",
            "SESSION_NOT_FOUND",
            "NOT_FOUND",
            "COMPLETION_UNAVAILABLE",
            "UPSTREAM_FAILURE",
            "INTERNAL_ERROR",
        ],
        Field(),
    ]
    message: Annotated[str, Field()]
    details: Optional[dict[str, Any]] = None


class ErrorResponse(CamelModel):
    error: ErrorDetail

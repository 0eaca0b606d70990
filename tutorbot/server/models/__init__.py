"""Pydantic models for request/response validation."""
from tutorbot.server.models.requests import ChatOptions, ChatRequest, CreateSessionRequest
from tutorbot.server.models.responses import (
    ChatResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
    HistoryResponse,
    MessageResponse,
    ModesResponse,
    OkResponse,
    SessionCreatedResponse,
    StatsResponse,
    UsageResponse,
)

__all__ = [
    "ChatOptions",
    "ChatRequest",
    "CreateSessionRequest",
    "ChatResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    "HistoryResponse",
    "MessageResponse",
    "ModesResponse",
    "OkResponse",
    "SessionCreatedResponse",
    "StatsResponse",
    "UsageResponse",
]

"""Request models for API endpoints."""
from typing import Annotated, Any, Optional

from pydantic import AliasChoices, Field

from tutorbot.server.models.common import CamelModel


class CreateSessionRequest(CamelModel):
    mode: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("mode", "promptType"),
        description="Prompt mode id; unknown or missing modes use TP_ASSISTANT.",
    )
    context: dict[str, Any] = Field(
        default_factory=dict,
        description="Lab context: subject, objectives, studentLevel, constraints.",
    )


class ChatOptions(CamelModel):
    model: Optional[str] = None
    max_tokens: Annotated[Optional[int], Field(ge=1)] = None
    temperature: Annotated[Optional[float], Field(ge=0.0, le=1.0)] = None


class ChatRequest(CamelModel):
    # Presence is checked by the chat service so that a missing field is
    # reported as INVALID_REQUEST rather than a schema error.
    session_id: Optional[str] = None
    message: Optional[str] = None
    options: Optional[ChatOptions] = None

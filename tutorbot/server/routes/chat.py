"""POST /chat endpoint handler."""
from fastapi import APIRouter, status

from tutorbot.completion.types import CompletionOptions
from tutorbot.server.chat_service import ChatService
from tutorbot.server.models.requests import ChatRequest
from tutorbot.server.models.responses import ChatResponse


def create_chat_router(service: ChatService) -> APIRouter:
    """Create chat router with injected dependencies."""
    router = APIRouter()

    @router.post("/chat", response_model=ChatResponse, status_code=status.HTTP_200_OK, tags=["chat"])
    async def send_message(body: ChatRequest) -> ChatResponse:
        """Send a user message and return the model's reply.

        The whole session history is sent to the model on every turn.
        """
        options = None
        if body.options is not None:
            options = CompletionOptions(
                model=body.options.model,
                max_tokens=body.options.max_tokens,
                temperature=body.options.temperature,
            )
        result = await service.take_turn(body.session_id, body.message, options)
        return ChatResponse.from_result(result)

    return router

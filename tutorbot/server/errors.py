"""Custom exception types for the server."""
from typing import Any, Optional


class TutorBotError(Exception):
    status_code: int = 500
    error_code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidRequestError(TutorBotError):
    status_code = 400
    error_code = "INVALID_REQUEST"


class SessionNotFoundError(TutorBotError):
    status_code = 404
    error_code = "SESSION_NOT_FOUND"

    def __init__(self, session_id: str) -> None:
        super().__init__("Session not found", {"sessionId": session_id})
        self.session_id = session_id


class CompletionUnavailableError(TutorBotError):
    status_code = 503
    error_code = "COMPLETION_UNAVAILABLE"

    def __init__(self, message: str = "Completion service is not configured, check the API key") -> None:
        super().__init__(message)


class UpstreamFailureError(TutorBotError):
    status_code = 502
    error_code = "UPSTREAM_FAILURE"

    def __init__(self, provider_message: str, provider_code: str) -> None:
        super().__init__(
            "Error while communicating with the completion service",
            {"providerCode": provider_code, "providerMessage": provider_message},
        )
        self.provider_code = provider_code

"""Chat completion boundary."""
from tutorbot.completion.client import PLACEHOLDER_API_KEY, CompletionClient, api_key_configured
from tutorbot.completion.types import (
    CompletionFailure,
    CompletionOptions,
    CompletionResult,
    CompletionSuccess,
    Usage,
)

__all__ = [
    "PLACEHOLDER_API_KEY",
    "CompletionClient",
    "CompletionFailure",
    "CompletionOptions",
    "CompletionResult",
    "CompletionSuccess",
    "Usage",
    "api_key_configured",
]

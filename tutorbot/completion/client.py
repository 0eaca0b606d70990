"""Adapter for an OpenAI-compatible chat completion endpoint."""
import logging
from typing import Any, Optional, Sequence

import httpx

from tutorbot.completion.types import (
    CompletionFailure,
    CompletionOptions,
    CompletionResult,
    CompletionSuccess,
    Usage,
)

logger = logging.getLogger(__name__)

PLACEHOLDER_API_KEY = "your_openai_api_key_here"
DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_MAX_TOKENS = 1000
DEFAULT_TEMPERATURE = 0.7


def api_key_configured(api_key: str) -> bool:
    """True for a non-empty key that is not the placeholder value."""
    return bool(api_key) and api_key != PLACEHOLDER_API_KEY


class CompletionClient:
    """Sends a message history to the model and returns a tagged result.

    ``complete`` never raises: transport, provider and decoding failures are
    all returned as :class:`CompletionFailure`.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        model: str = DEFAULT_MODEL,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._api_key = api_key
        self._endpoint = base_url.rstrip("/") + "/chat/completions"
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature
        self._timeout = timeout
        self._transport = transport

    @property
    def default_model(self) -> str:
        return self._model

    def is_ready(self) -> bool:
        """True when a real (non-placeholder) API key is configured."""
        return api_key_configured(self._api_key)

    async def complete(
        self,
        messages: Sequence[dict[str, str]],
        options: Optional[CompletionOptions] = None,
    ) -> CompletionResult:
        if not self.is_ready():
            return CompletionFailure("Completion API key is not configured", "NOT_CONFIGURED")

        options = options or CompletionOptions()
        payload = {
            "model": options.model or self._model,
            "messages": list(messages),
            "max_tokens": options.max_tokens or self._max_tokens,
            "temperature": self._temperature if options.temperature is None else options.temperature,
            "n": 1,
        }
        headers = {"Authorization": f"Bearer {self._api_key}"}

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(self._endpoint, json=payload, headers=headers)
        except httpx.TimeoutException as exc:
            logger.warning("Completion request timed out: %s", exc)
            return CompletionFailure(f"Completion request timed out: {exc}", "TIMEOUT")
        except httpx.HTTPError as exc:
            logger.warning("Completion request failed: %s", exc)
            return CompletionFailure(f"Completion request failed: {exc}", "NETWORK_ERROR")

        if response.status_code >= 400:
            return self._provider_failure(response)

        try:
            return self._parse_success(response.json())
        except (ValueError, KeyError, IndexError, TypeError, AttributeError) as exc:
            logger.error("Malformed completion response: %s", exc)
            return CompletionFailure(f"Malformed completion response: {exc}", "MALFORMED_RESPONSE")

    @staticmethod
    def _parse_success(data: dict[str, Any]) -> CompletionSuccess:
        choice = data["choices"][0]["message"]
        text = choice["content"]
        if not isinstance(text, str):
            raise TypeError("message content is not a string")
        usage = data.get("usage") or {}
        if not isinstance(usage, dict):
            raise TypeError("usage is not an object")
        return CompletionSuccess(
            text=text,
            role=str(choice.get("role") or "assistant"),
            usage=Usage(
                prompt_tokens=int(usage.get("prompt_tokens", 0)),
                completion_tokens=int(usage.get("completion_tokens", 0)),
                total_tokens=int(usage.get("total_tokens", 0)),
            ),
            model=str(data.get("model") or ""),
        )

    @staticmethod
    def _provider_failure(response: httpx.Response) -> CompletionFailure:
        code = f"HTTP_{response.status_code}"
        message = response.text
        try:
            body = response.json()
        except ValueError:
            body = None
        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict):
            code = error.get("code") or error.get("type") or code
            message = error.get("message") or message
        elif isinstance(error, str):
            message = error
        logger.warning("Completion provider returned %d (%s): %s", response.status_code, code, message)
        return CompletionFailure(message or f"Provider returned {response.status_code}", str(code))

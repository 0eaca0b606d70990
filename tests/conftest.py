"""Pytest fixtures shared across test modules."""
from datetime import datetime, timedelta, timezone
from typing import Optional, Sequence

import pytest
from fastapi.testclient import TestClient

from tutorbot.completion.types import (
    CompletionFailure,
    CompletionOptions,
    CompletionResult,
    CompletionSuccess,
    Usage,
)
from tutorbot.server.app import create_app
from tutorbot.server.config import CompletionConfig, ServerConfig, SessionConfig, SweepConfig
from tutorbot.sessions.store import SessionStore


class FakeClock:
    """Manually advanced UTC clock."""

    def __init__(self, start: Optional[datetime] = None) -> None:
        self.now = start or datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now = self.now + timedelta(**kwargs)


class StubCompletion:
    """Completion backend returning queued results and recording calls."""

    def __init__(self, ready: bool = True) -> None:
        self.ready = ready
        self.results: list[CompletionResult] = []
        self.calls: list[tuple[list[dict[str, str]], Optional[CompletionOptions]]] = []

    def is_ready(self) -> bool:
        return self.ready

    def queue_success(self, text: str = "Bonne question !", model: str = "gpt-4o-mini") -> None:
        self.results.append(CompletionSuccess(
            text=text, model=model,
            usage=Usage(prompt_tokens=12, completion_tokens=8, total_tokens=20),
        ))

    def queue_failure(self, message: str = "Rate limit reached", code: str = "rate_limit_exceeded") -> None:
        self.results.append(CompletionFailure(error_message=message, error_code=code))

    async def complete(
        self,
        messages: Sequence[dict[str, str]],
        options: Optional[CompletionOptions] = None,
    ) -> CompletionResult:
        self.calls.append((list(messages), options))
        if self.results:
            return self.results.pop(0)
        return CompletionSuccess(text="ok", model="gpt-4o-mini", usage=Usage(1, 1, 2))


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> SessionStore:
    return SessionStore(max_history=20, expiry_minutes=60, clock=clock)


@pytest.fixture
def completion() -> StubCompletion:
    return StubCompletion()


@pytest.fixture
def server_config() -> ServerConfig:
    return ServerConfig(
        completion=CompletionConfig(api_key="sk-test-key-1234567890"),
        sessions=SessionConfig(max_history=20, expiry_minutes=60),
        sweep=SweepConfig(enabled=False),
    )


@pytest.fixture
def client(server_config: ServerConfig, completion: StubCompletion, store: SessionStore) -> TestClient:
    app = create_app(server_config, completion=completion, store=store)
    with TestClient(app) as c:
        yield c

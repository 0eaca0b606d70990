"""Result types for the completion boundary."""
from dataclasses import dataclass
from typing import Literal, Optional, Union


@dataclass(frozen=True)
class CompletionOptions:
    """Per-request overrides. ``None`` means use the configured default."""
    model: Optional[str] = None
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None


@dataclass(frozen=True)
class Usage:
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


@dataclass(frozen=True)
class CompletionSuccess:
    text: str
    usage: Usage
    model: str
    role: str = "assistant"
    success: Literal[True] = True


@dataclass(frozen=True)
class CompletionFailure:
    error_message: str
    error_code: str
    success: Literal[False] = False


CompletionResult = Union[CompletionSuccess, CompletionFailure]

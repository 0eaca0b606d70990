"""Server configuration."""
import logging
import os
from dataclasses import dataclass, field

from tutorbot.completion.client import (
    DEFAULT_BASE_URL,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
)
from tutorbot.sessions.store import DEFAULT_EXPIRY_MINUTES, DEFAULT_MAX_HISTORY

logger = logging.getLogger(__name__)

_RECOGNISED_BOOL_VALUES = frozenset(
    ("1", "true", "yes", "0", "false", "no")
)

DEFAULT_CORS_ORIGINS: tuple[str, ...] = (
    "https://ghinc.github.io/bot_tp_front",
    "https://ghinc.github.io",
    "http://localhost:8080",
    "http://localhost:3000",
)


@dataclass(frozen=True)
class CompletionConfig:
    """Settings for the chat completion provider.

    ``api_key`` empty or equal to the placeholder value leaves the
    completion boundary not ready; ``/chat`` then answers 503.
    """

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE
    timeout: float = 30.0


@dataclass(frozen=True)
class SessionConfig:
    max_history: int = DEFAULT_MAX_HISTORY
    expiry_minutes: int = DEFAULT_EXPIRY_MINUTES


@dataclass(frozen=True)
class SweepConfig:
    """Background expiry sweep.

    Disable with ``SWEEP_ENABLED=false`` where no long-lived background
    task may run; sweeps are then triggered on demand.
    """

    enabled: bool = True
    interval_minutes: float = 30.0


@dataclass(frozen=True)
class ServerConfig:
    completion: CompletionConfig = field(default_factory=CompletionConfig)
    sessions: SessionConfig = field(default_factory=SessionConfig)
    sweep: SweepConfig = field(default_factory=SweepConfig)
    host: str = "127.0.0.1"
    port: int = 3000
    cors_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS


def _parse_bool(value: str, default: bool) -> bool:
    """Parse a boolean environment variable with explicit default.

    Recognises ``true/1/yes`` and ``false/0/no`` (case-insensitive).
    Returns *default* when the value is empty or unset.
    Logs a warning and returns *default* for unrecognised values.
    """
    if not value:
        return default
    normalised = value.strip().lower()
    if normalised not in _RECOGNISED_BOOL_VALUES:
        logger.warning(
            "Unrecognised boolean value %r, using default %s. "
            "Expected one of: true/1/yes or false/0/no.",
            value,
            default,
        )
        return default
    return normalised in ("1", "true", "yes")


def _parse_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "")
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid integer for %s=%r, using default %d", name, raw, default)
        return default


def _parse_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "")
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Invalid number for %s=%r, using default %s", name, raw, default)
        return default


def _parse_origins(value: str) -> tuple[str, ...]:
    if not value:
        return DEFAULT_CORS_ORIGINS
    return tuple(origin.strip() for origin in value.split(",") if origin.strip())


def load_config_from_env() -> ServerConfig:
    """Build the server configuration from environment variables.

    Every setting has a safe default, so an empty environment yields a
    working server whose completion boundary is simply not ready.
    """
    return ServerConfig(
        completion=CompletionConfig(
            api_key=os.environ.get("OPENAI_API_KEY", ""),
            base_url=os.environ.get("OPENAI_BASE_URL", DEFAULT_BASE_URL),
            model=os.environ.get("OPENAI_MODEL", DEFAULT_MODEL),
            max_tokens=_parse_int("OPENAI_MAX_TOKENS", DEFAULT_MAX_TOKENS),
            temperature=_parse_float("OPENAI_TEMPERATURE", DEFAULT_TEMPERATURE),
            timeout=_parse_float("OPENAI_TIMEOUT", 30.0),
        ),
        sessions=SessionConfig(
            max_history=_parse_int("MAX_HISTORY_LENGTH", DEFAULT_MAX_HISTORY),
            expiry_minutes=_parse_int("SESSION_EXPIRY_MINUTES", DEFAULT_EXPIRY_MINUTES),
        ),
        sweep=SweepConfig(
            enabled=_parse_bool(os.environ.get("SWEEP_ENABLED", ""), default=True),
            interval_minutes=_parse_float("SWEEP_INTERVAL_MINUTES", 30.0),
        ),
        host=os.environ.get("HOST", "127.0.0.1"),
        port=_parse_int("PORT", 3000),
        cors_origins=_parse_origins(os.environ.get("ALLOWED_ORIGINS", "")),
    )

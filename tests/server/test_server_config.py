"""Tests for configuration loading from the environment."""
import pytest

from tutorbot.server.config import (
    DEFAULT_CORS_ORIGINS,
    ServerConfig,
    _parse_bool,
    load_config_from_env,
)

ENV_VARS = (
    "OPENAI_API_KEY", "OPENAI_BASE_URL", "OPENAI_MODEL", "OPENAI_MAX_TOKENS",
    "OPENAI_TEMPERATURE", "OPENAI_TIMEOUT", "MAX_HISTORY_LENGTH",
    "SESSION_EXPIRY_MINUTES", "SWEEP_ENABLED", "SWEEP_INTERVAL_MINUTES",
    "HOST", "PORT", "ALLOWED_ORIGINS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestLoadConfig:
    def test_defaults(self) -> None:
        config = load_config_from_env()
        assert config == ServerConfig()
        assert config.completion.api_key == ""
        assert config.completion.model == "gpt-4o-mini"
        assert config.completion.max_tokens == 1000
        assert config.completion.temperature == 0.7
        assert config.sessions.max_history == 20
        assert config.sessions.expiry_minutes == 60
        assert config.sweep.enabled is True
        assert config.sweep.interval_minutes == 30.0
        assert config.port == 3000
        assert config.cors_origins == DEFAULT_CORS_ORIGINS

    def test_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("OPENAI_API_KEY", "sk-live")
        monkeypatch.setenv("OPENAI_MODEL", "gpt-4o")
        monkeypatch.setenv("OPENAI_MAX_TOKENS", "256")
        monkeypatch.setenv("OPENAI_TEMPERATURE", "0.2")
        monkeypatch.setenv("MAX_HISTORY_LENGTH", "10")
        monkeypatch.setenv("SESSION_EXPIRY_MINUTES", "15")
        monkeypatch.setenv("SWEEP_ENABLED", "no")
        monkeypatch.setenv("SWEEP_INTERVAL_MINUTES", "5")
        monkeypatch.setenv("HOST", "0.0.0.0")
        monkeypatch.setenv("PORT", "8000")
        monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example ,")

        config = load_config_from_env()
        assert config.completion.api_key == "sk-live"
        assert config.completion.model == "gpt-4o"
        assert config.completion.max_tokens == 256
        assert config.completion.temperature == 0.2
        assert config.sessions.max_history == 10
        assert config.sessions.expiry_minutes == 15
        assert config.sweep.enabled is False
        assert config.sweep.interval_minutes == 5.0
        assert config.host == "0.0.0.0"
        assert config.port == 8000
        assert config.cors_origins == ("https://a.example", "https://b.example")

    def test_invalid_numbers_fall_back(self, monkeypatch) -> None:
        monkeypatch.setenv("MAX_HISTORY_LENGTH", "lots")
        monkeypatch.setenv("OPENAI_TEMPERATURE", "warm")
        config = load_config_from_env()
        assert config.sessions.max_history == 20
        assert config.completion.temperature == 0.7


class TestParseBool:
    @pytest.mark.parametrize("value,expected", [
        ("true", True), ("1", True), ("YES", True),
        ("false", False), ("0", False), (" no ", False),
    ])
    def test_recognised(self, value: str, expected: bool) -> None:
        assert _parse_bool(value, default=not expected) is expected

    def test_empty_and_unknown_use_default(self) -> None:
        assert _parse_bool("", default=True) is True
        assert _parse_bool("maybe", default=False) is False

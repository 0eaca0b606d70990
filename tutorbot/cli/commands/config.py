"""Show the effective configuration."""
from rich.console import Console

from tutorbot.cli.output import print_json, print_settings, print_warning
from tutorbot.completion.client import PLACEHOLDER_API_KEY, api_key_configured
from tutorbot.server.config import ServerConfig, load_config_from_env

console = Console()


def _redact(api_key: str) -> str:
    if not api_key:
        return "(unset)"
    if api_key == PLACEHOLDER_API_KEY:
        return "(placeholder)"
    return api_key[:3] + "..." + api_key[-4:] if len(api_key) > 10 else "***"


def _summary(config: ServerConfig) -> dict:
    api_key = config.completion.api_key
    return {
        "host": config.host,
        "port": config.port,
        "model": config.completion.model,
        "base_url": config.completion.base_url,
        "max_tokens": config.completion.max_tokens,
        "temperature": config.completion.temperature,
        "api_key": _redact(api_key),
        "completion_ready": api_key_configured(api_key),
        "max_history": config.sessions.max_history,
        "expiry_minutes": config.sessions.expiry_minutes,
        "sweep_enabled": config.sweep.enabled,
        "sweep_interval_minutes": config.sweep.interval_minutes,
        "cors_origins": list(config.cors_origins),
    }


def config_command(json_flag: bool) -> None:
    """Print configuration loaded from the environment, API key redacted."""
    summary = _summary(load_config_from_env())
    if json_flag:
        print_json(console, summary)
        return
    console.print("[bold]Configuration[/bold]")
    console.print()
    print_settings(console, summary)
    if not summary["completion_ready"]:
        console.print()
        print_warning(console, "OPENAI_API_KEY is not set, /chat will answer 503")

"""Rich terminal rendering for the tutorbot CLI."""
import json
from typing import Any, Mapping

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


def print_json(console: Console, data: Any) -> None:
    """Print ``data`` as indented JSON, keeping accented characters readable."""
    console.print_json(json.dumps(data, ensure_ascii=False, default=str))


def print_error(console: Console, message: str, hint: str | None = None) -> None:
    console.print(f"[red]Error:[/red] {message}")
    if hint:
        console.print(f"[yellow]Hint:[/yellow] {hint}")


def print_warning(console: Console, message: str) -> None:
    console.print(f"[yellow]Warning:[/yellow] {message}")


def print_modes(console: Console, descriptions: Mapping[str, str], default_mode: str) -> None:
    """Table of prompt modes, the default one marked."""
    table = Table(title="Prompt Modes")
    table.add_column("Mode", style="bold")
    table.add_column("Description")
    table.add_column("Default", justify="center")
    for mode, description in descriptions.items():
        table.add_row(mode, description, "*" if mode == default_mode else "")
    console.print(table)


def print_prompt(console: Console, title: str, prompt: str) -> None:
    """Show a prompt verbatim; brackets in prompts are not rich markup."""
    subtitle = f"{len(prompt)} chars, {prompt.count(chr(10)) + 1} lines"
    console.print(Panel(Text(prompt), title=title, subtitle=subtitle))


def print_settings(console: Console, settings: Mapping[str, Any]) -> None:
    """Two-column grid of setting name and value."""
    grid = Table.grid(padding=(0, 2))
    grid.add_column(style="cyan")
    grid.add_column()
    for key, value in settings.items():
        if isinstance(value, (list, tuple)):
            value = ", ".join(str(v) for v in value)
        grid.add_row(key, Text(str(value)))
    console.print(grid)

"""Main CLI entry point for the tutor bot."""

import typer
from rich.console import Console

from tutorbot.cli.commands.config import config_command
from tutorbot.cli.commands.prompts import modes_command, prompt_command, render_command
from tutorbot.cli.commands.serve import serve_command

app = typer.Typer(
    name="tutorbot",
    help="TP tutor bot - pedagogical chat sessions backed by a language model",
    no_args_is_help=True,
    add_completion=False,
)
console = Console()


@app.command("serve")
def serve(
    host: str = typer.Option(None, "-H", "--host", help="Bind address (default: $HOST)"),
    port: int = typer.Option(None, "-p", "--port", help="Port (default: $PORT)"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload for development"),
) -> None:
    """Run the HTTP API."""
    serve_command(host, port, reload)


@app.command("modes")
def modes(
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List the available prompt modes."""
    modes_command(json_flag)


@app.command("prompt")
def prompt(
    mode: str = typer.Option(None, "-m", "--mode", help="Prompt mode id"),
    subject: str = typer.Option(None, "-s", "--subject", help="Lab subject"),
    objectives: str = typer.Option(None, "-o", "--objectives", help="Learning objectives"),
    level: str = typer.Option(None, "-l", "--level", help="Student level"),
    constraints: str = typer.Option(None, "-c", "--constraints", help="Particular constraints"),
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the system prompt a session would start with."""
    prompt_command(mode, subject, objectives, level, constraints, json_flag)


@app.command("render")
def render(
    kind: str = typer.Argument(..., help="clarification | review | concept"),
    text: str = typer.Argument(..., help="Question, code or concept"),
    level: str = typer.Option("intermédiaire", "-l", "--level", help="Level for concept explanations"),
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Render an auxiliary instruction prompt."""
    render_command(kind, text, level, json_flag)


@app.command("config")
def config(
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the effective configuration."""
    config_command(json_flag)


def main() -> None:
    """Entry point."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled[/yellow]")
        raise typer.Exit(130)

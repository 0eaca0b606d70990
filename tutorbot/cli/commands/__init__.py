"""CLI command implementations."""
from tutorbot.cli.commands.config import config_command
from tutorbot.cli.commands.prompts import modes_command, prompt_command, render_command
from tutorbot.cli.commands.serve import serve_command

__all__ = [
    "config_command",
    "modes_command",
    "prompt_command",
    "render_command",
    "serve_command",
]

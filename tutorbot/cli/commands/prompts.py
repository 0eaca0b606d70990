"""Inspect prompt modes and render prompts."""
from typing import Optional

import typer
from rich.console import Console

from tutorbot.cli.output import print_error, print_json, print_modes, print_prompt
from tutorbot.prompts import (
    DEFAULT_MODE,
    MODE_DESCRIPTIONS,
    SYSTEM_PROMPTS,
    build_clarification_prompt,
    build_code_review_prompt,
    build_concept_explanation_prompt,
    resolve_mode,
    resolve_system_prompt,
)

console = Console()

RENDER_KINDS = ("clarification", "review", "concept")


def modes_command(json_flag: bool) -> None:
    """List prompt modes with their descriptions."""
    if json_flag:
        print_json(console, {"modes": list(SYSTEM_PROMPTS), "descriptions": MODE_DESCRIPTIONS})
        return
    print_modes(console, {mode: MODE_DESCRIPTIONS.get(mode, "") for mode in SYSTEM_PROMPTS}, DEFAULT_MODE)


def prompt_command(
    mode: Optional[str],
    subject: Optional[str],
    objectives: Optional[str],
    level: Optional[str],
    constraints: Optional[str],
    json_flag: bool,
) -> None:
    """Render the system prompt a new session would start with."""
    context = {
        "subject": subject,
        "objectives": objectives,
        "studentLevel": level,
        "constraints": constraints,
    }
    context = {k: v for k, v in context.items() if v}
    effective = resolve_mode(mode)
    prompt = resolve_system_prompt(effective, context)
    if json_flag:
        print_json(console, {"mode": effective, "context": context, "prompt": prompt})
        return
    if mode and mode != effective:
        console.print(f"[yellow]Unknown mode {mode!r}, using {effective}[/yellow]")
    print_prompt(console, effective, prompt)


def render_command(kind: str, text: str, level: str, json_flag: bool) -> None:
    """Render one of the auxiliary instruction prompts."""
    if kind == "clarification":
        prompt = build_clarification_prompt(text)
    elif kind == "review":
        prompt = build_code_review_prompt(text)
    elif kind == "concept":
        prompt = build_concept_explanation_prompt(text, level)
    else:
        print_error(console, f"Unknown prompt kind {kind!r}", hint=f"Choose one of: {', '.join(RENDER_KINDS)}")
        raise typer.Exit(code=2)
    if json_flag:
        print_json(console, {"kind": kind, "prompt": prompt})
        return
    print_prompt(console, kind, prompt)

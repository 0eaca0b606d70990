"""Prompt templates and resolution."""
from tutorbot.prompts.resolver import (
    build_clarification_prompt,
    build_code_review_prompt,
    build_concept_explanation_prompt,
    resolve_mode,
    resolve_system_prompt,
)
from tutorbot.prompts.templates import DEFAULT_MODE, MODE_DESCRIPTIONS, SYSTEM_PROMPTS

__all__ = [
    "DEFAULT_MODE",
    "MODE_DESCRIPTIONS",
    "SYSTEM_PROMPTS",
    "build_clarification_prompt",
    "build_code_review_prompt",
    "build_concept_explanation_prompt",
    "resolve_mode",
    "resolve_system_prompt",
]

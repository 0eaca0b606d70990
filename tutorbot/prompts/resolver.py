"""Build system and auxiliary prompts from a mode and a context record."""
from typing import Any, Mapping, Optional

from tutorbot.prompts.templates import CONTEXT_CLAUSES, DEFAULT_MODE, SYSTEM_PROMPTS


def resolve_mode(mode: Optional[str]) -> str:
    """Return the effective mode id, falling back to the default mode."""
    if mode and mode in SYSTEM_PROMPTS:
        return mode
    return DEFAULT_MODE


def resolve_system_prompt(mode: Optional[str], context: Optional[Mapping[str, Any]] = None) -> str:
    """Render the system prompt for ``mode`` with optional context clauses.

    Unknown modes use the default template. Context fields that are absent
    or empty add nothing.
    """
    prompt = SYSTEM_PROMPTS[resolve_mode(mode)]
    for keys, label in CONTEXT_CLAUSES:
        value = _first_present(context or {}, keys)
        if value:
            prompt += f"\n\n{label} : {value}"
    return prompt


def build_clarification_prompt(question: str) -> str:
    return (
        f'L\'étudiant a posé cette question : "{question}"\n\n'
        "Avant de répondre, pose-lui des questions de clarification pour mieux "
        "comprendre son besoin et son niveau de compréhension."
    )


def build_code_review_prompt(code: str) -> str:
    return (
        "Analyse ce code soumis par un étudiant et donne un retour constructif :\n\n"
        f"```\n{code}\n```\n\n"
        "Fournis :\n"
        "1. Les points positifs\n"
        "2. Les axes d'amélioration\n"
        "3. Des questions pour le faire réfléchir\n"
        "4. Des suggestions de ressources\n\n"
        "N'écris pas le code corrigé complet."
    )


def build_concept_explanation_prompt(concept: str, level: str = "intermédiaire") -> str:
    return (
        f'Explique le concept suivant à un niveau {level} : "{concept}"\n\n'
        "Utilise des analogies, des exemples concrets et un langage accessible."
    )


def _first_present(context: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        value = context.get(key)
        if value:
            return value
    return None

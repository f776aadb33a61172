"""Expert templates for the intent and objective pairs that have one."""

from __future__ import annotations

import re

from typing import Optional

from prompt_optimizer.constants import DEFAULT_ROLE
from prompt_optimizer.locales import is_english, language_name
from prompt_optimizer.prompting.manager import PromptManager
from prompt_optimizer.rewriting.directives import FALLBACK_LANGUAGE

DEFAULT_PROGRAMMING_LANGUAGE = "the target programming language"

_manager: Optional[PromptManager] = None


def _default_manager() -> PromptManager:
    global _manager
    if _manager is None:
        _manager = PromptManager()
    return _manager


def template_name(intent: str, objective: str) -> str:
    """``"Code Generation"`` + ``"brevity"`` -> ``code_generation_brevity.j2``."""

    slug = re.sub(r"[^a-z0-9]+", "_", intent.lower()).strip("_")
    return f"{slug}_{objective.lower()}.j2"


def render_expert_template(
    intent: str,
    objective: str,
    role: str = DEFAULT_ROLE,
    language: Optional[str] = None,
    *,
    programming_language: str = DEFAULT_PROGRAMMING_LANGUAGE,
    manager: Optional[PromptManager] = None,
) -> Optional[str]:
    """Render the expert template for ``intent``/``objective`` if one exists."""

    prompts = manager or _default_manager()
    name = template_name(intent, objective)
    if not prompts.has_template(name):
        return None
    name_for_language = None
    if language and not is_english(language):
        name_for_language = language_name(language) or FALLBACK_LANGUAGE
    return prompts.render(
        name,
        role=(role or DEFAULT_ROLE).lower(),
        language_name=name_for_language,
        programming_language=programming_language,
    )


__all__ = [
    "DEFAULT_PROGRAMMING_LANGUAGE",
    "render_expert_template",
    "template_name",
]

"""Trailing directive sentences appended after the rewritten instruction."""

from __future__ import annotations

from typing import Dict, List

from prompt_optimizer.constants import (
    CONTENT_AUDIO,
    CONTENT_IMAGE,
    CONTENT_PRESENTATION,
    CONTENT_TEXT,
    CONTENT_VIDEO,
    OBJECTIVE_BREVITY,
    OBJECTIVE_CREATIVITY,
    OBJECTIVE_PRECISION,
    OBJECTIVE_SAFETY,
    OBJECTIVE_SPEED,
    REASONING_HIGH,
    REASONING_MEDIUM,
)
from prompt_optimizer.locales import is_english, language_name
from prompt_optimizer.types import RewriteOptions

FORMAT_DIRECTIVES: Dict[str, str] = {
    CONTENT_TEXT: (
        "Structure the response with clear headings and well-organized "
        "paragraphs."
    ),
    CONTENT_VIDEO: (
        "Format the response as a video script with scene descriptions, "
        "visuals and narration."
    ),
    CONTENT_IMAGE: (
        "Format the response as a detailed image description covering "
        "composition, style and subject."
    ),
    CONTENT_AUDIO: (
        "Format the response as an audio script with narration cues and "
        "sound design notes."
    ),
    CONTENT_PRESENTATION: (
        "Format the response as a slide-by-slide presentation outline with "
        "key points for each slide."
    ),
}

BRIEF_TEXT_DIRECTIVE = "Keep the response short and formatted as plain text."

REASONING_DIRECTIVES: Dict[str, str] = {
    REASONING_HIGH: (
        "Provide detailed step-by-step reasoning and explain your "
        "methodology."
    ),
    REASONING_MEDIUM: "Include brief explanations of your approach.",
}

OBJECTIVE_DIRECTIVES: Dict[str, str] = {
    OBJECTIVE_PRECISION: (
        "Be accurate, specific, and include supporting details. Verify "
        "information and provide evidence."
    ),
    OBJECTIVE_BREVITY: (
        "Be concise and direct. Focus on essential information only."
    ),
    OBJECTIVE_CREATIVITY: (
        "Think creatively and explore multiple approaches. Consider "
        "unconventional solutions."
    ),
    OBJECTIVE_SAFETY: (
        "Consider safety implications and ethical considerations. Include "
        "warnings when appropriate."
    ),
    OBJECTIVE_SPEED: (
        "Provide quick, actionable responses. Focus on immediate practical "
        "value."
    ),
}

FALLBACK_LANGUAGE = "the specified language"


def role_declaration(role: str) -> str:
    return f"You are a {role.lower()}."


def format_directive(content_type: str, objective: str) -> str:
    if content_type == CONTENT_TEXT and objective == OBJECTIVE_BREVITY:
        return BRIEF_TEXT_DIRECTIVE
    return FORMAT_DIRECTIVES.get(content_type, FORMAT_DIRECTIVES[CONTENT_TEXT])


def language_directive(language: str) -> str:
    """Return ``"Respond in X."`` or an empty string for English.

    Codes missing from the locale tables name a generic fallback instead
    of being dropped.
    """

    if not language or is_english(language):
        return ""
    name = language_name(language) or FALLBACK_LANGUAGE
    return f"Respond in {name}."


def reasoning_directive(reasoning_level: str) -> str:
    return REASONING_DIRECTIVES.get(reasoning_level, "")


def objective_directive(objective: str) -> str:
    return OBJECTIVE_DIRECTIVES.get(objective, "")


def directive_sentences(options: RewriteOptions) -> List[str]:
    """Return the non-empty directives in their fixed order."""

    sentences = [
        format_directive(options.content_type or "", options.objective or ""),
        language_directive(options.language or ""),
        reasoning_directive(options.reasoning_level or ""),
        objective_directive(options.objective or ""),
    ]
    return [sentence for sentence in sentences if sentence]


def assemble_directives(options: RewriteOptions) -> str:
    """Concatenate the directives, each prefixed by a single space."""

    return "".join(f" {sentence}" for sentence in directive_sentences(options))


__all__ = [
    "BRIEF_TEXT_DIRECTIVE",
    "FALLBACK_LANGUAGE",
    "FORMAT_DIRECTIVES",
    "OBJECTIVE_DIRECTIVES",
    "REASONING_DIRECTIVES",
    "assemble_directives",
    "directive_sentences",
    "format_directive",
    "language_directive",
    "objective_directive",
    "reasoning_directive",
    "role_declaration",
]

"""Objective-specific word substitutions over the raw instruction.

This is table-driven text surgery, not parsing: each rule replaces a whole
word case-insensitively and unmatched text passes through untouched.
"""

from __future__ import annotations

import re

from typing import Dict, Pattern, Tuple

from prompt_optimizer.constants import (
    OBJECTIVE_BREVITY,
    OBJECTIVE_CREATIVITY,
    OBJECTIVE_PRECISION,
    OBJECTIVE_SAFETY,
    OBJECTIVE_SPEED,
)

SUBSTITUTIONS: Dict[str, Tuple[Tuple[str, str], ...]] = {
    OBJECTIVE_PRECISION: (
        ("summarize", "create a precise summary of"),
        ("explain", "explain in precise detail"),
        ("describe", "precisely describe"),
        ("analyze", "rigorously analyze"),
        ("write", "carefully write"),
    ),
    OBJECTIVE_BREVITY: (
        ("summarize", "briefly summarize"),
        ("explain", "concisely explain"),
        ("describe", "briefly describe"),
        ("analyze", "concisely analyze"),
        ("write", "concisely write"),
    ),
    OBJECTIVE_CREATIVITY: (
        ("summarize", "creatively summarize"),
        ("explain", "creatively explain"),
        ("describe", "vividly describe"),
        ("analyze", "creatively analyze"),
        ("write", "imaginatively write"),
    ),
    OBJECTIVE_SAFETY: (
        ("summarize", "responsibly summarize"),
        ("explain", "carefully explain"),
        ("describe", "accurately describe"),
        ("analyze", "cautiously analyze"),
        ("write", "responsibly write"),
    ),
    OBJECTIVE_SPEED: (
        ("summarize", "quickly summarize"),
        ("explain", "quickly explain"),
        ("describe", "quickly describe"),
        ("analyze", "quickly analyze"),
        ("write", "quickly write"),
    ),
}

_TERMINAL = (".", "!", "?")


def _compile(word: str) -> Pattern[str]:
    return re.compile(rf"\b{re.escape(word)}\b", re.IGNORECASE | re.ASCII)


_PATTERNS: Dict[str, Tuple[Tuple[Pattern[str], str], ...]] = {
    objective: tuple((_compile(word), repl) for word, repl in rules)
    for objective, rules in SUBSTITUTIONS.items()
}


def rewrite_instruction(original: str, intent: str, objective: str) -> str:
    """Apply the substitutions for ``objective`` and close the sentence.

    ``intent`` is accepted so callers can pass the full pipeline context;
    the current rule tables are keyed by objective only.
    """

    text = original or ""
    for pattern, replacement in _PATTERNS.get(objective, ()):
        text = pattern.sub(lambda _match: replacement, text)
    text = text.strip()
    if text and not text.endswith(_TERMINAL):
        text += "."
    return text


__all__ = ["SUBSTITUTIONS", "rewrite_instruction"]

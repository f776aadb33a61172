"""Fixed constraint and example tables."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from prompt_optimizer.constants import (
    CONTENT_PRESENTATION,
    CONTENT_VIDEO,
    OBJECTIVE_BREVITY,
    OBJECTIVE_CREATIVITY,
    OBJECTIVE_PRECISION,
    OBJECTIVE_SAFETY,
    OBJECTIVE_SPEED,
)
from prompt_optimizer.rewriting.intent import (
    ANALYSIS,
    CODE_GENERATION,
    CONTENT_CREATION,
    SUMMARIZATION,
)

OBJECTIVE_CONSTRAINTS: Dict[str, Tuple[str, ...]] = {
    OBJECTIVE_PRECISION: (
        "Include specific examples and evidence",
        "Use precise terminology",
        "Verify accuracy of claims",
    ),
    OBJECTIVE_BREVITY: (
        "Maximum 200 words unless specified",
        "Focus on essential information",
        "Eliminate redundancy",
    ),
    OBJECTIVE_CREATIVITY: (
        "Explore multiple approaches",
        "Use analogies and creative examples",
        "Consider unconventional solutions",
    ),
    OBJECTIVE_SAFETY: (
        "Include safety warnings when applicable",
        "Consider ethical implications",
        "Avoid harmful recommendations",
    ),
    OBJECTIVE_SPEED: (
        "Prioritize actionable information",
        "Use simple, direct language",
        "Focus on immediate solutions",
    ),
}

CONTENT_TYPE_CONSTRAINTS: Dict[str, Tuple[str, ...]] = {
    CONTENT_VIDEO: (
        "Include visual and audio descriptions",
        "Consider timing and pacing",
    ),
    CONTENT_PRESENTATION: (
        "Structure for slide format",
        "Include key points and visuals",
    ),
}

INTENT_EXAMPLES: Dict[str, Tuple[str, ...]] = {
    SUMMARIZATION: (
        "Key point 1: [Main conclusion with supporting evidence]",
        "Key point 2: [Secondary insight with context]",
    ),
    CODE_GENERATION: (
        "// Example with descriptive variable names",
        "function processUserData(userData) { return validatedResult; }",
    ),
    ANALYSIS: (
        "Strengths: [Specific positive aspects with examples]",
        "Opportunities: [Areas for improvement with actionable suggestions]",
    ),
    CONTENT_CREATION: (
        "Introduction: [Hook + context + thesis]",
        "Body: [Evidence + analysis + examples]",
    ),
}


def build_constraints(objective: str, content_type: str) -> List[str]:
    """Objective constraints followed by content-type constraints."""

    return [
        *OBJECTIVE_CONSTRAINTS.get(objective, ()),
        *CONTENT_TYPE_CONSTRAINTS.get(content_type, ()),
    ]


def build_examples(
    intent: str, requested_in_prompt: bool, objective: str
) -> Optional[List[str]]:
    """Return illustrative examples or ``None`` when none apply.

    Examples are considered when the prompt asks for them or the objective
    is precision; intents without a table entry yield ``None`` either way,
    so the result is never an empty list.
    """

    if not (requested_in_prompt or objective == OBJECTIVE_PRECISION):
        return None
    entries = INTENT_EXAMPLES.get(intent)
    if not entries:
        return None
    return list(entries)


__all__ = [
    "CONTENT_TYPE_CONSTRAINTS",
    "INTENT_EXAMPLES",
    "OBJECTIVE_CONSTRAINTS",
    "build_constraints",
    "build_examples",
]

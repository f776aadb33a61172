"""Keyword-driven intent and output-format detection."""

from __future__ import annotations

from typing import Tuple

from prompt_optimizer.constants import (
    FORMAT_BULLET_POINTS,
    FORMAT_JSON,
    FORMAT_MARKDOWN,
    FORMAT_TEXT,
    GENERAL_INTENT,
)

SUMMARIZATION = "Summarization"
TRANSLATION = "Translation"
EXPLANATION = "Explanation"
CODE_DEBUGGING = "Code Debugging"
CODE_GENERATION = "Code Generation"
ANALYSIS = "Analysis"
COMPARISON = "Comparison"
DATA_EXTRACTION = "Data Extraction"
CONTENT_CREATION = "Content Creation"
PLANNING = "Planning"
REVIEW = "Review & Evaluation"

# Order is the priority: the first substring found in the lower-cased
# prompt decides the label.
INTENT_RULES: Tuple[Tuple[str, str], ...] = (
    ("summar", SUMMARIZATION),
    ("translat", TRANSLATION),
    ("explain", EXPLANATION),
    ("debug", CODE_DEBUGGING),
    ("bug", CODE_DEBUGGING),
    ("code", CODE_GENERATION),
    ("function", CODE_GENERATION),
    ("analyz", ANALYSIS),
    ("analys", ANALYSIS),
    ("compar", COMPARISON),
    ("extract", DATA_EXTRACTION),
    ("write", CONTENT_CREATION),
    ("creat", CONTENT_CREATION),
    ("plan", PLANNING),
    ("review", REVIEW),
)

INTENT_LABELS: Tuple[str, ...] = tuple(
    dict.fromkeys(label for _, label in INTENT_RULES)
) + (GENERAL_INTENT,)

FORMAT_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("json",), FORMAT_JSON),
    (("table", "markdown"), FORMAT_MARKDOWN),
    (("bullet", "list"), FORMAT_BULLET_POINTS),
)

EXAMPLE_TRIGGERS: Tuple[str, ...] = ("example", "sample", "instance")


def classify_intent(text: str) -> str:
    """Return the intent label of the first matching rule."""

    lowered = (text or "").lower()
    for needle, label in INTENT_RULES:
        if needle in lowered:
            return label
    return GENERAL_INTENT


def detect_format(text: str) -> str:
    lowered = (text or "").lower()
    for needles, label in FORMAT_RULES:
        if any(needle in lowered for needle in needles):
            return label
    return FORMAT_TEXT


def examples_requested(text: str) -> bool:
    lowered = (text or "").lower()
    return any(trigger in lowered for trigger in EXAMPLE_TRIGGERS)


__all__ = [
    "EXAMPLE_TRIGGERS",
    "FORMAT_RULES",
    "INTENT_LABELS",
    "INTENT_RULES",
    "classify_intent",
    "detect_format",
    "examples_requested",
]

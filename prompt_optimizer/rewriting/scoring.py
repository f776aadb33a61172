"""Heuristic complexity and clarity scores.

The formulas are illustrative and kept exactly as documented:

* complexity = 10 * sentences + 15 * analytical verbs
* clarity = 80 + 5 * firm modals - 5 * hedges

Both are clamped to [0, 100].
"""

from __future__ import annotations

import re

from prompt_optimizer.constants import MAX_SCORE, MIN_SCORE

_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_ANALYTICAL = re.compile(
    r"\b(analyze|synthesize|evaluate|compare|contrast)\b",
    re.IGNORECASE | re.ASCII,
)
_FIRM = re.compile(
    r"\b(must|should|will|please)\b", re.IGNORECASE | re.ASCII
)
_HEDGE = re.compile(
    r"\b(maybe|perhaps|possibly|might)\b", re.IGNORECASE | re.ASCII
)


def clamp(value: int, low: int = MIN_SCORE, high: int = MAX_SCORE) -> int:
    return max(low, min(high, value))


def count_sentences(text: str) -> int:
    return sum(1 for part in _SENTENCE_SPLIT.split(text or "") if part.strip())


def _count(pattern: re.Pattern[str], text: str) -> int:
    return sum(1 for _ in pattern.finditer(text or ""))


def score_complexity(text: str) -> int:
    return clamp(10 * count_sentences(text) + 15 * _count(_ANALYTICAL, text))


def score_clarity(text: str) -> int:
    return clamp(80 + 5 * _count(_FIRM, text) - 5 * _count(_HEDGE, text))


__all__ = ["clamp", "count_sentences", "score_clarity", "score_complexity"]

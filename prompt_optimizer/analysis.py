"""Prompt diagnostics: quick analysis, validation and quality metrics.

These helpers sit beside the optimizer and never influence its output.
They back the CLI's ``--analyze`` report.
"""

from __future__ import annotations

import re

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from prompt_optimizer.configuration import LimitsSettings
from prompt_optimizer.rewriting.intent import classify_intent
from prompt_optimizer.rewriting.scoring import count_sentences
from prompt_optimizer.types import RewriteResult

ACTION_WORDS: Tuple[str, ...] = (
    "create", "generate", "write", "analyze", "explain", "summarize",
    "make", "build", "design", "list", "compare", "translate", "fix",
    "debug", "optimize",
)
FORMAT_WORDS: Tuple[str, ...] = (
    "json", "table", "markdown", "bullets", "list", "format", "structure",
)
VAGUE_PHRASES: Tuple[str, ...] = (
    "something", "anything", "some kind of", "whatever", "maybe",
)

QUALITY_THRESHOLDS: Tuple[Tuple[int, str], ...] = (
    (90, "excellent"),
    (75, "good"),
    (60, "fair"),
)

_ACTION_VERB = re.compile(
    r"\b(create|generate|write|analyze|explain|summarize|make|build|design"
    r"|list|compare)\b",
    re.IGNORECASE,
)
_CONTEXT = re.compile(r"\b(context|background|for|about|regarding)\b", re.I)
_SETTING = re.compile(r"\b(context|background|scenario|situation)\b", re.I)
_CRITERIA = re.compile(r"\b(criteria|measure|evaluate|success|quality)\b", re.I)


@dataclass(frozen=True)
class PromptAnalysis:
    word_count: int
    char_count: int
    sentence_count: int
    complexity: str
    has_action_words: bool
    has_specific_format: bool
    estimated_intent: str

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ValidationReport:
    warnings: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)
    score: int = 100

    @property
    def is_valid(self) -> bool:
        return not self.warnings

    def as_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["is_valid"] = self.is_valid
        return payload


@dataclass(frozen=True)
class QualityMetrics:
    efficiency: int
    specificity: int
    actionability: int
    completeness: int
    readability: int

    @property
    def overall(self) -> int:
        total = (
            self.efficiency
            + self.specificity
            + self.actionability
            + self.completeness
            + self.readability
        )
        return round(total / 5)

    def as_dict(self) -> Dict[str, int]:
        payload = asdict(self)
        payload["overall"] = self.overall
        return payload


def analyze_prompt(text: str) -> PromptAnalysis:
    """Word, sentence and keyword statistics for a raw prompt."""

    words = text.split()
    sentences = count_sentences(text)
    lowered = text.lower()
    complexity = "low"
    if len(words) > 100 and sentences > 5:
        complexity = "high"
    elif len(words) > 50 and sentences > 3:
        complexity = "medium"
    return PromptAnalysis(
        word_count=len(words),
        char_count=len(text),
        sentence_count=sentences,
        complexity=complexity,
        has_action_words=any(word in lowered for word in ACTION_WORDS),
        has_specific_format=any(word in lowered for word in FORMAT_WORDS),
        estimated_intent=classify_intent(text),
    )


def validate_prompt(
    text: str, limits: Optional[LimitsSettings] = None
) -> ValidationReport:
    """Flag prompts that are too short, too long, vague or aimless."""

    limits = limits or LimitsSettings()
    report = ValidationReport()
    lowered = text.lower()

    if len(text.strip()) < limits.min_prompt_length:
        report.warnings.append("Prompt is too short")
        report.suggestions.append(
            "Add more specific details about what you want to achieve"
        )
        report.score -= 30

    for phrase in VAGUE_PHRASES:
        if phrase in lowered:
            report.warnings.append(f'Avoid vague language: "{phrase}"')
            report.suggestions.append(
                "Be more specific about your requirements"
            )
            report.score -= 10

    if not _ACTION_VERB.search(text):
        report.warnings.append("No clear action specified")
        report.suggestions.append(
            "Start with a clear action verb (create, analyze, explain, etc.)"
        )
        report.score -= 15

    if len(text) > limits.max_prompt_length:
        report.warnings.append("Prompt might be too long")
        report.suggestions.append(
            "Consider breaking down into smaller, more focused requests"
        )
        report.score -= 10

    if len(text) > 50 and not _CONTEXT.search(text):
        report.suggestions.append(
            "Consider adding context or background information"
        )
        report.score -= 5

    report.score = max(0, report.score)
    return report


def _efficiency(original: str, rewritten: str) -> int:
    original_words = max(1, len(original.split()))
    ratio = len(rewritten.split()) / original_words
    if 1.2 <= ratio <= 2.0:
        return 100
    if ratio < 1.2:
        return round(max(60, ratio * 83))
    return round(max(40, 200 - ratio * 50))


def _specificity(prompt: str) -> int:
    lowered = prompt.lower()
    score = 60
    score += 5 * sum(
        word in lowered
        for word in (
            "specific", "exactly", "must", "should", "include", "format",
            "structure",
        )
    )
    score += 3 * sum(
        word in lowered
        for word in (
            "analyze", "create", "generate", "explain", "summarize",
            "compare",
        )
    )
    score += 4 * sum(
        word in lowered
        for word in (
            "without", "avoid", "focus on", "prioritize", "limit to",
        )
    )
    return min(100, score)


_ACTIONABILITY_RULES: Tuple[Tuple[re.Pattern[str], int], ...] = (
    (re.compile(r"\b(create|generate|write|make|build|design)\b", re.I), 15),
    (re.compile(r"\b(analyze|evaluate|assess|review)\b", re.I), 15),
    (re.compile(r"\b(list|enumerate|identify|extract)\b", re.I), 10),
    (
        re.compile(
            r"\b(format|structure|table|json|markdown|bullets)\b", re.I
        ),
        10,
    ),
    (re.compile(r"\b(as a|you are a|acting as)\b", re.I), 10),
)


def _actionability(prompt: str) -> int:
    score = 50
    for pattern, bonus in _ACTIONABILITY_RULES:
        if pattern.search(prompt):
            score += bonus
    return min(100, score)


def _completeness(prompt: str, result: Optional[RewriteResult]) -> int:
    score = 70
    if result is not None and result.constraints:
        score += 10
    if result is not None and result.examples:
        score += 10
    if _SETTING.search(prompt):
        score += 5
    if _CRITERIA.search(prompt):
        score += 5
    return min(100, score)


def _readability(prompt: str) -> int:
    sentences = count_sentences(prompt)
    words = len(prompt.split())
    average = words / sentences if sentences else float("inf")
    score = 80.0
    if 15 <= average <= 25:
        score += 20
    elif average < 15:
        score += max(0, 20 - (15 - average) * 2)
    else:
        score -= min(20, (average - 25) * 2)
    return round(min(100, max(0, score)))


def quality_metrics(
    original: str, rewritten: str, result: Optional[RewriteResult] = None
) -> QualityMetrics:
    """Score a rewrite on five 0-100 axes."""

    return QualityMetrics(
        efficiency=_efficiency(original, rewritten),
        specificity=_specificity(rewritten),
        actionability=_actionability(rewritten),
        completeness=_completeness(rewritten, result),
        readability=_readability(rewritten),
    )


def quality_level(score: int) -> str:
    for threshold, label in QUALITY_THRESHOLDS:
        if score >= threshold:
            return label
    return "poor"


__all__ = [
    "PromptAnalysis",
    "QualityMetrics",
    "ValidationReport",
    "analyze_prompt",
    "quality_level",
    "quality_metrics",
    "validate_prompt",
]

from __future__ import annotations

from prompt_optimizer.analysis import (
    analyze_prompt,
    quality_level,
    quality_metrics,
    validate_prompt,
)
from prompt_optimizer.configuration import LimitsSettings
from prompt_optimizer.optimizer import optimize


def test_analyze_prompt_statistics() -> None:
    analysis = analyze_prompt("Summarize this article as a bullet list.")
    assert analysis.word_count == 7
    assert analysis.sentence_count == 1
    assert analysis.complexity == "low"
    assert analysis.has_action_words is True
    assert analysis.has_specific_format is True
    assert analysis.estimated_intent == "Summarization"


def test_analyze_prompt_complexity_bands() -> None:
    medium = " ".join(["Review the quarterly numbers carefully today."] * 9)
    assert analyze_prompt(medium).complexity == "medium"

    high = " ".join(["Review the quarterly numbers carefully today."] * 21)
    assert analyze_prompt(high).complexity == "high"


def test_validate_prompt_short_and_aimless() -> None:
    report = validate_prompt("hi")
    assert report.score == 55
    assert report.is_valid is False
    assert "Prompt is too short" in report.warnings
    assert "No clear action specified" in report.warnings


def test_validate_prompt_clean_prompt() -> None:
    report = validate_prompt("Write a short story about a dragon")
    assert report.score == 100
    assert report.is_valid is True
    assert report.suggestions == []


def test_validate_prompt_vague_language() -> None:
    report = validate_prompt("Write something maybe")
    assert report.score == 80
    assert len(report.warnings) == 2


def test_validate_prompt_respects_limits() -> None:
    limits = LimitsSettings(min_prompt_length=1, max_prompt_length=20)
    report = validate_prompt("Write a haiku about the autumn rain", limits)
    assert "Prompt might be too long" in report.warnings
    assert report.score == 90


def test_quality_metrics_for_precision_summary() -> None:
    original = "Summarize this article"
    result = optimize(original)
    metrics = quality_metrics(original, result.rewritten_prompt, result)

    assert metrics.efficiency == 40
    assert metrics.actionability == 85
    assert metrics.completeness == 90
    assert 0 <= metrics.overall <= 100
    assert metrics.as_dict()["overall"] == metrics.overall


def test_quality_metrics_without_result() -> None:
    metrics = quality_metrics("Plan a trip", "Plan a trip to Rome.")
    assert metrics.completeness == 70


def test_quality_level_thresholds() -> None:
    assert quality_level(95) == "excellent"
    assert quality_level(75) == "good"
    assert quality_level(60) == "fair"
    assert quality_level(59) == "poor"

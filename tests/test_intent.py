from __future__ import annotations

import pytest

from prompt_optimizer.rewriting.intent import (
    INTENT_LABELS,
    classify_intent,
    detect_format,
    examples_requested,
)


@pytest.mark.parametrize(
    "prompt, expected",
    [
        ("Summarize this article", "Summarization"),
        ("Translate this paragraph to German", "Translation"),
        ("Explain quantum computing", "Explanation"),
        ("Debug my login handler", "Code Debugging"),
        ("There is a bug in this loop", "Code Debugging"),
        ("Generate code for a REST client", "Code Generation"),
        ("Analyze the quarterly numbers", "Analysis"),
        ("Give me an analysis of churn", "Analysis"),
        ("Compare Rust and Go", "Comparison"),
        ("Extract all email addresses", "Data Extraction"),
        ("Write a poem", "Content Creation"),
        ("Create a landing page headline", "Content Creation"),
        ("Plan a three-day trip to Lisbon", "Planning"),
        ("Review my cover letter", "Review & Evaluation"),
        ("Hello there", "General Task"),
        ("", "General Task"),
    ],
)
def test_classify_intent(prompt: str, expected: str) -> None:
    assert classify_intent(prompt) == expected


def test_summarization_outranks_analysis() -> None:
    assert classify_intent("please summarize and analyze this") == (
        "Summarization"
    )


def test_explanation_outranks_code() -> None:
    assert classify_intent("Explain this code to me") == "Explanation"


def test_classification_is_case_insensitive() -> None:
    assert classify_intent("SUMMARIZE THE REPORT") == "Summarization"


def test_intent_labels_are_unique_and_end_with_general() -> None:
    assert len(INTENT_LABELS) == len(set(INTENT_LABELS))
    assert INTENT_LABELS[-1] == "General Task"


@pytest.mark.parametrize(
    "prompt, expected",
    [
        ("Return the result as JSON", "JSON"),
        ("Put it in a markdown table", "Markdown"),
        ("Give me a bullet summary", "BulletPoints"),
        ("List the main risks", "BulletPoints"),
        ("Tell me a story", "Text"),
    ],
)
def test_detect_format(prompt: str, expected: str) -> None:
    assert detect_format(prompt) == expected


def test_examples_requested() -> None:
    assert examples_requested("Show an Example of recursion")
    assert examples_requested("give me a sample")
    assert examples_requested("for instance")
    assert not examples_requested("Summarize this article")

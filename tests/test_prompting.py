from __future__ import annotations

from pathlib import Path

import pytest

from prompt_optimizer.prompting import (
    PromptManager,
    render_expert_template,
    template_name,
)


def test_template_name_slugs_intent() -> None:
    assert template_name("Code Generation", "Precision") == (
        "code_generation_precision.j2"
    )
    assert template_name("Summarization", "brevity") == (
        "summarization_brevity.j2"
    )


def test_bundled_templates_cover_expert_pairs() -> None:
    names = PromptManager().list_templates()
    for intent in ("summarization", "analysis", "code_generation", "translation"):
        for objective in ("precision", "brevity", "creativity"):
            assert f"{intent}_{objective}.j2" in names


def test_render_expert_template_fills_role() -> None:
    text = render_expert_template("Summarization", "brevity", "Data Analyst")
    assert text is not None
    assert text.startswith(
        "As a data analyst, provide a concise summary in exactly 3 bullet "
        "points"
    )
    assert "Respond in" not in text


def test_render_expert_template_adds_language_line() -> None:
    text = render_expert_template(
        "Summarization", "brevity", "Editor", language="es-ES"
    )
    assert text is not None
    assert text.endswith("Respond in Spanish.")

    english = render_expert_template(
        "Summarization", "brevity", "Editor", language="en-GB"
    )
    assert english is not None
    assert not english.endswith("Respond in English.")


def test_render_expert_template_programming_language() -> None:
    text = render_expert_template(
        "Code Generation",
        "precision",
        programming_language="Rust",
    )
    assert text is not None
    assert "Rust" in text


def test_render_expert_template_missing_pair_returns_none() -> None:
    assert render_expert_template("Planning", "precision") is None
    assert render_expert_template("Summarization", "speed") is None


def test_override_directory_replaces_bundled_template(tmp_path: Path) -> None:
    (tmp_path / "summarization_brevity.j2").write_text(
        "Custom summary for {{ role }}."
    )
    manager = PromptManager(extra_dirs=[tmp_path])
    text = render_expert_template(
        "Summarization", "brevity", "Editor", manager=manager
    )
    assert text == "Custom summary for editor."
    assert manager.search_paths[0] == tmp_path


def test_prompt_manager_errors(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        PromptManager(tmp_path / "nope")
    with pytest.raises(FileNotFoundError):
        PromptManager(extra_dirs=[tmp_path / "nope"])
    with pytest.raises(FileNotFoundError):
        PromptManager().render("does_not_exist.j2")

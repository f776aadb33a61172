from __future__ import annotations

import json

from pathlib import Path

import pytest

from prompt_optimizer import cli
from prompt_optimizer.configuration import CONFIG_ENV_VAR


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


def test_cli_prints_rewritten_prompt(capsys: pytest.CaptureFixture) -> None:
    assert cli.main(["Summarize this article"]) == 0
    out = capsys.readouterr().out.strip()
    assert out.startswith(
        "You are a subject-matter expert. create a precise summary of this "
        "article."
    )


def test_cli_json_output(capsys: pytest.CaptureFixture) -> None:
    code = cli.main(
        [
            "Summarize the report as a table",
            "--json",
            "--objective",
            "brevity",
            "--lang",
            "it-IT",
        ]
    )
    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["intent"] == "Summarization"
    assert payload["parameters"]["format"] == "Markdown"
    assert payload["parameters"]["language"] == "it-IT"
    assert "Respond in Italian." in payload["rewritten_prompt"]
    assert "examples" not in payload


def test_cli_strict_rejects_unknown_option(
    capsys: pytest.CaptureFixture,
) -> None:
    code = cli.main(["Plan a launch", "--objective", "turbo", "--strict"])
    assert code == 2
    assert "Invalid option" in capsys.readouterr().err


def test_cli_lenient_unknown_option_uses_default(
    capsys: pytest.CaptureFixture,
) -> None:
    assert cli.main(["Plan a launch", "--objective", "turbo", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["parameters"]["objective"] == "precision"


def test_cli_reads_prompt_file(
    tmp_path: Path, capsys: pytest.CaptureFixture
) -> None:
    prompt_file = tmp_path / "prompt.txt"
    prompt_file.write_text("Explain recursion\n", encoding="utf-8")
    assert cli.main(["--file", str(prompt_file), "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["intent"] == "Explanation"
    assert payload["metadata"]["original_length"] == len("Explain recursion\n")


def test_cli_missing_config_is_an_error(
    capsys: pytest.CaptureFixture,
) -> None:
    assert cli.main(["Plan a launch", "--config", "missing.yaml"]) == 2
    assert "Configuration error" in capsys.readouterr().err


def test_cli_config_defaults_apply(
    tmp_path: Path, capsys: pytest.CaptureFixture
) -> None:
    config = tmp_path / "optimizer.yaml"
    config.write_text(
        "optimizer:\n  defaults:\n    objective: brevity\n"
        "    reasoning_level: low\n",
        encoding="utf-8",
    )
    assert cli.main(["Summarize the memo", "--config", str(config)]) == 0
    out = capsys.readouterr().out
    assert "briefly summarize the memo." in out


def test_cli_explore_reports_paths(capsys: pytest.CaptureFixture) -> None:
    assert cli.main(["Summarize this article", "--explore", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    paths = payload["exploration"]["paths"]
    assert [path["strategy"] for path in paths] == [
        "structural",
        "contextual",
        "role_based",
    ]
    assert all(path["id"].startswith(path["strategy"]) for path in paths)
    assert payload["exploration"]["summary"].startswith("Explored 3")


def test_cli_template_and_analysis(capsys: pytest.CaptureFixture) -> None:
    code = cli.main(
        [
            "Summarize this article",
            "--objective",
            "brevity",
            "--template",
            "--analyze",
            "--json",
        ]
    )
    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["expert_template"].startswith(
        "As a subject-matter expert, provide a concise summary"
    )
    assert payload["analysis"]["prompt"]["estimated_intent"] == (
        "Summarization"
    )
    assert "quality_level" in payload["analysis"]


def test_cli_share_round_trip(capsys: pytest.CaptureFixture) -> None:
    assert cli.main(
        ["Describe a sunset", "--objective", "creativity", "--share", "--json"]
    ) == 0
    first = json.loads(capsys.readouterr().out)
    token = first["share_token"]

    assert cli.main(["--from-share", token, "--json"]) == 0
    second = json.loads(capsys.readouterr().out)
    assert second["rewritten_prompt"] == first["rewritten_prompt"]
    assert second["parameters"]["objective"] == "creativity"


def test_cli_bad_share_token(capsys: pytest.CaptureFixture) -> None:
    assert cli.main(["--from-share", "%%%"]) == 2
    assert "Invalid share token" in capsys.readouterr().err


def test_cli_history_round_trip(
    tmp_path: Path, capsys: pytest.CaptureFixture
) -> None:
    history_file = tmp_path / "history.json"
    assert cli.main(["--list-history", "--history-file", str(history_file)]) == 0
    assert "No history yet." in capsys.readouterr().err

    assert cli.main(
        ["Write a limerick", "--history", "--history-file", str(history_file)]
    ) == 0
    capsys.readouterr()

    assert cli.main(["--list-history", "--history-file", str(history_file)]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 1
    entry = json.loads(lines[0])
    assert entry["prompt"] == "Write a limerick"
    assert entry["favorite"] is False


def test_cli_lists_locales(capsys: pytest.CaptureFixture) -> None:
    assert cli.main(["--list-locales"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0].startswith("English: en-US, en-GB")


def test_cli_missing_prompt_file(
    tmp_path: Path, capsys: pytest.CaptureFixture
) -> None:
    missing = tmp_path / "nope.txt"
    assert cli.main(["--file", str(missing)]) == 2
    assert "Could not read prompt" in capsys.readouterr().err

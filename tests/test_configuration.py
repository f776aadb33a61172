from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from prompt_optimizer.configuration import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_PATH,
    OptimizerSettings,
    build_optimizer_settings,
    load_config,
    load_settings,
    resolve_config_path,
)
from prompt_optimizer.exceptions import ConfigurationError


def test_build_optimizer_settings_reads_sections(tmp_path: Path) -> None:
    config = {
        "optimizer": {
            "defaults": {
                "language": "ja-JP",
                "objective": "Creativity",
                "reasoning_level": "high",
                "role": "Technical writer",
                "content_type": "image",
            },
            "options": {"strict": True},
            "limits": {"max_history_items": "7"},
            "history": {"enabled": True, "path": "state/history.json"},
            "exploration": {"enabled": True},
            "logging": {"level": "debug", "file": "logs/optimizer.log"},
        }
    }
    settings = build_optimizer_settings(config, config_root=tmp_path)

    assert settings.defaults.language == "ja-JP"
    assert settings.defaults.objective == "creativity"
    assert settings.defaults.role == "Technical writer"
    assert settings.strict is True
    assert settings.limits.max_history_items == 7
    assert settings.limits.max_prompt_length == 5000
    assert settings.history.enabled is True
    assert settings.history.path == (tmp_path / "state/history.json").resolve()
    assert settings.exploration.enabled is True
    assert settings.logging.level == "DEBUG"
    assert settings.logging.file == (tmp_path / "logs/optimizer.log").resolve()


def test_missing_sections_use_builtin_defaults() -> None:
    settings = build_optimizer_settings({})
    assert settings == OptimizerSettings()
    assert settings.defaults.objective == "precision"
    assert settings.history.path is None


def test_invalid_default_objective_is_rejected() -> None:
    with pytest.raises(ConfigurationError):
        build_optimizer_settings(
            {"optimizer": {"defaults": {"objective": "turbo"}}}
        )


def test_invalid_limit_is_rejected() -> None:
    with pytest.raises(ConfigurationError):
        build_optimizer_settings(
            {"optimizer": {"limits": {"max_prompt_length": "lots"}}}
        )


def test_load_config_errors(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        load_config(tmp_path / "missing.yaml")

    broken = tmp_path / "broken.yaml"
    broken.write_text("optimizer: [unclosed\n")
    with pytest.raises(ConfigurationError):
        load_config(broken)

    scalar = tmp_path / "scalar.yaml"
    scalar.write_text("just a string\n")
    with pytest.raises(ConfigurationError):
        load_config(scalar)

    empty = tmp_path / "empty.yaml"
    empty.write_text("")
    assert load_config(empty) == {}


def test_load_settings_resolves_paths_relative_to_config(
    tmp_path: Path,
) -> None:
    config_path = tmp_path / "cfg" / "optimizer.yaml"
    config_path.parent.mkdir()
    config_path.write_text(
        yaml.safe_dump(
            {"optimizer": {"history": {"path": "history.json"}}}
        )
    )
    settings = load_settings(config_path)
    assert settings.history.path == (
        tmp_path / "cfg" / "history.json"
    ).resolve()


def test_resolve_config_path_precedence(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    assert resolve_config_path() is None
    assert load_settings() == OptimizerSettings()

    monkeypatch.setenv(CONFIG_ENV_VAR, "from-env.yaml")
    assert resolve_config_path() == Path("from-env.yaml")
    assert resolve_config_path("explicit.yaml") == Path("explicit.yaml")

    monkeypatch.delenv(CONFIG_ENV_VAR)
    DEFAULT_CONFIG_PATH.parent.mkdir(parents=True)
    DEFAULT_CONFIG_PATH.write_text("optimizer: {}\n")
    assert resolve_config_path() == DEFAULT_CONFIG_PATH


def test_bundled_default_config_matches_builtin_defaults() -> None:
    root = Path(__file__).resolve().parents[1]
    settings = load_settings(root / "configs" / "default_config.yaml")
    assert settings.defaults == OptimizerSettings().defaults
    assert settings.strict is False

"""Typed helpers for parsing prompt optimizer configuration dictionaries."""

from __future__ import annotations

import os

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from prompt_optimizer.constants import (
    CONTENT_TYPES,
    DEFAULT_CONTENT_TYPE,
    DEFAULT_LANGUAGE,
    DEFAULT_OBJECTIVE,
    DEFAULT_REASONING_LEVEL,
    DEFAULT_ROLE,
    OBJECTIVES,
    REASONING_LEVELS,
)
from prompt_optimizer.exceptions import ConfigurationError
from prompt_optimizer.types import RewriteOptions

DEFAULT_CONFIG_PATH = Path("configs/default_config.yaml")
CONFIG_ENV_VAR = "PROMPT_OPTIMIZER_CONFIG"


def _ensure_path(
    value: Optional[str | Path], *, config_root: Path
) -> Optional[Path]:
    if value is None or value == "":
        return None
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = (config_root / path).resolve()
    return path


def _choice(
    section: Dict[str, Any], key: str, default: str, allowed
) -> str:
    value = section.get(key)
    if value is None:
        return default
    text = str(value).strip().lower()
    if text not in allowed:
        raise ConfigurationError(
            f"defaults.{key} must be one of {', '.join(allowed)}; "
            f"got {value!r}"
        )
    return text


def _int(section: Dict[str, Any], key: str, default: int) -> int:
    value = section.get(key, default)
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(
            f"'{key}' must be an integer; got {value!r}"
        ) from exc


@dataclass(frozen=True)
class LimitsSettings:
    min_prompt_length: int = 5
    max_prompt_length: int = 5000
    max_history_items: int = 50


@dataclass(frozen=True)
class HistorySettings:
    enabled: bool = False
    path: Optional[Path] = None


@dataclass(frozen=True)
class ExplorationSettings:
    enabled: bool = False


@dataclass(frozen=True)
class LoggingSettings:
    level: str = "INFO"
    file: Optional[Path] = None


def _builtin_defaults() -> RewriteOptions:
    return RewriteOptions(
        language=DEFAULT_LANGUAGE,
        objective=DEFAULT_OBJECTIVE,
        reasoning_level=DEFAULT_REASONING_LEVEL,
        role=DEFAULT_ROLE,
        content_type=DEFAULT_CONTENT_TYPE,
    )


@dataclass(frozen=True)
class OptimizerSettings:
    defaults: RewriteOptions = field(default_factory=_builtin_defaults)
    strict: bool = False
    limits: LimitsSettings = field(default_factory=LimitsSettings)
    history: HistorySettings = field(default_factory=HistorySettings)
    exploration: ExplorationSettings = field(
        default_factory=ExplorationSettings
    )
    logging: LoggingSettings = field(default_factory=LoggingSettings)


def build_optimizer_settings(
    config: Optional[Dict[str, Any]], *, config_root: Optional[Path] = None
) -> OptimizerSettings:
    """Parse the ``optimizer`` section of a config mapping."""

    root = config_root or Path.cwd()
    opt_cfg = (config or {}).get("optimizer") or {}
    if not isinstance(opt_cfg, dict):
        raise ConfigurationError("'optimizer' section must be a mapping")

    defaults_cfg = dict(opt_cfg.get("defaults") or {})
    role = str(defaults_cfg.get("role") or DEFAULT_ROLE).strip()
    defaults = RewriteOptions(
        language=str(defaults_cfg.get("language") or DEFAULT_LANGUAGE),
        objective=_choice(
            defaults_cfg, "objective", DEFAULT_OBJECTIVE, OBJECTIVES
        ),
        reasoning_level=_choice(
            defaults_cfg,
            "reasoning_level",
            DEFAULT_REASONING_LEVEL,
            REASONING_LEVELS,
        ),
        role=role or DEFAULT_ROLE,
        content_type=_choice(
            defaults_cfg, "content_type", DEFAULT_CONTENT_TYPE, CONTENT_TYPES
        ),
    )

    options_cfg = dict(opt_cfg.get("options") or {})
    limits_cfg = dict(opt_cfg.get("limits") or {})
    limits = LimitsSettings(
        min_prompt_length=_int(limits_cfg, "min_prompt_length", 5),
        max_prompt_length=_int(limits_cfg, "max_prompt_length", 5000),
        max_history_items=_int(limits_cfg, "max_history_items", 50),
    )

    history_cfg = dict(opt_cfg.get("history") or {})
    history = HistorySettings(
        enabled=bool(history_cfg.get("enabled", False)),
        path=_ensure_path(history_cfg.get("path"), config_root=root),
    )

    exploration_cfg = dict(opt_cfg.get("exploration") or {})
    logging_cfg = dict(opt_cfg.get("logging") or {})
    return OptimizerSettings(
        defaults=defaults,
        strict=bool(options_cfg.get("strict", False)),
        limits=limits,
        history=history,
        exploration=ExplorationSettings(
            enabled=bool(exploration_cfg.get("enabled", False))
        ),
        logging=LoggingSettings(
            level=str(logging_cfg.get("level", "INFO")).upper(),
            file=_ensure_path(logging_cfg.get("file"), config_root=root),
        ),
    )


def load_config(config_path: Path) -> Dict[str, Any]:
    """Read a YAML config file, raising ``ConfigurationError`` on failure."""

    if not config_path.exists():
        raise ConfigurationError(f"Config file '{config_path}' not found.")
    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigurationError(
            f"Config file '{config_path}' is not valid YAML: {exc}"
        ) from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file '{config_path}' must contain a mapping"
        )
    return data


def resolve_config_path(explicit: Optional[str | Path] = None) -> Optional[Path]:
    """Pick the config path from an argument, the environment or the default.

    Returns ``None`` when nothing was requested and the default file does
    not exist, so callers can fall back to built-in settings.
    """

    if explicit:
        return Path(explicit).expanduser()
    env_value = os.environ.get(CONFIG_ENV_VAR)
    if env_value:
        return Path(env_value).expanduser()
    if DEFAULT_CONFIG_PATH.exists():
        return DEFAULT_CONFIG_PATH
    return None


def load_settings(
    config_path: Optional[str | Path] = None,
) -> OptimizerSettings:
    path = resolve_config_path(config_path)
    if path is None:
        return OptimizerSettings()
    config = load_config(path)
    return build_optimizer_settings(
        config, config_root=path.resolve().parent
    )


__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATH",
    "ExplorationSettings",
    "HistorySettings",
    "LimitsSettings",
    "LoggingSettings",
    "OptimizerSettings",
    "build_optimizer_settings",
    "load_config",
    "load_settings",
    "resolve_config_path",
]

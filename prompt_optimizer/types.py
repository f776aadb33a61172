"""Core dataclasses used throughout the prompt optimizer."""

from __future__ import annotations

import json

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional, Tuple

# Keys accepted by ``RewriteOptions.from_mapping`` besides the field names.
_OPTION_ALIASES: Dict[str, str] = {
    "defaultLanguage": "language",
    "default_language": "language",
    "lang": "language",
    "goal": "objective",
    "reasoning": "reasoning_level",
    "reasoningLevel": "reasoning_level",
    "contentType": "content_type",
    "ctype": "content_type",
}


@dataclass(frozen=True)
class RewriteOptions:
    """Caller-supplied configuration for a rewrite.

    Every field is optional. ``None`` means "use the configured default";
    :func:`prompt_optimizer.optimizer.resolve_options` fills the gaps.
    """

    language: Optional[str] = None
    objective: Optional[str] = None
    reasoning_level: Optional[str] = None
    role: Optional[str] = None
    content_type: Optional[str] = None

    @classmethod
    def from_mapping(
        cls, data: Optional[Mapping[str, Any]]
    ) -> "RewriteOptions":
        """Build options from a dict, accepting camelCase and legacy keys."""

        if not data:
            return cls()
        known = {item.name for item in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in data.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in known or value is None:
                continue
            values.setdefault(name, str(value))
        return cls(**values)

    def merged(self, **overrides: Optional[str]) -> "RewriteOptions":
        """Return a copy with non-``None`` overrides applied."""

        changes = {
            key: value for key, value in overrides.items() if value is not None
        }
        return replace(self, **changes) if changes else self

    def as_dict(self) -> Dict[str, Optional[str]]:
        return {item.name: getattr(self, item.name) for item in fields(self)}


@dataclass(frozen=True)
class ResultParameters:
    """Resolved options echoed back with the detected output format."""

    role: str
    language: str
    objective: str
    reasoning_level: str
    content_type: str
    format: str

    def as_dict(self) -> Dict[str, str]:
        return {item.name: getattr(self, item.name) for item in fields(self)}


@dataclass(frozen=True)
class ResultMetadata:
    """Length accounting and heuristic scores for a rewrite."""

    original_length: int
    rewritten_length: int
    complexity_score: int
    clarity_score: int

    @property
    def total_score(self) -> int:
        return self.complexity_score + self.clarity_score

    def as_dict(self) -> Dict[str, int]:
        return {item.name: getattr(self, item.name) for item in fields(self)}


@dataclass(frozen=True)
class RewriteResult:
    """Structured output of a single rewrite.

    ``examples`` is either ``None`` or a non-empty tuple. ``None`` is
    omitted from the serialized form entirely.
    """

    intent: str
    rewritten_prompt: str
    parameters: ResultParameters
    constraints: Tuple[str, ...]
    metadata: ResultMetadata
    examples: Optional[Tuple[str, ...]] = None

    def as_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "intent": self.intent,
            "rewritten_prompt": self.rewritten_prompt,
            "parameters": self.parameters.as_dict(),
            "constraints": list(self.constraints),
        }
        if self.examples is not None:
            payload["examples"] = list(self.examples)
        payload["metadata"] = self.metadata.as_dict()
        return payload

    def to_json(self, *, indent: Optional[int] = 2) -> str:
        return json.dumps(self.as_dict(), indent=indent, ensure_ascii=False)


__all__ = [
    "ResultMetadata",
    "ResultParameters",
    "RewriteOptions",
    "RewriteResult",
]

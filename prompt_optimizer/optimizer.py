"""Prompt optimizer pipeline that wires the rewriting stages together."""

from __future__ import annotations

import logging

from typing import Any, Mapping, Optional, Tuple, Union

from prompt_optimizer.configuration import OptimizerSettings
from prompt_optimizer.constants import (
    CONTENT_TYPES,
    OBJECTIVES,
    REASONING_LEVELS,
)
from prompt_optimizer.exceptions import InvalidOption
from prompt_optimizer.rewriting import (
    assemble_directives,
    build_constraints,
    build_examples,
    classify_intent,
    detect_format,
    examples_requested,
    rewrite_instruction,
    role_declaration,
    score_clarity,
    score_complexity,
)
from prompt_optimizer.types import (
    ResultMetadata,
    ResultParameters,
    RewriteOptions,
    RewriteResult,
)

LOGGER = logging.getLogger(__name__)

OptionsLike = Union[RewriteOptions, Mapping[str, Any], None]

_ENUM_FIELDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("objective", OBJECTIVES),
    ("reasoning_level", REASONING_LEVELS),
    ("content_type", CONTENT_TYPES),
)


def _coerce_options(options: OptionsLike) -> RewriteOptions:
    if options is None:
        return RewriteOptions()
    if isinstance(options, RewriteOptions):
        return options
    return RewriteOptions.from_mapping(options)


def _text(value: Any) -> str:
    return "" if value is None else str(value).strip()


def resolve_options(
    options: OptionsLike = None,
    *,
    defaults: Optional[RewriteOptions] = None,
    strict: bool = False,
) -> RewriteOptions:
    """Fill missing options from ``defaults`` and normalize enum values.

    Out-of-range enum values fall back to the default with a warning, or
    raise :class:`InvalidOption` when ``strict`` is set.
    """

    base = defaults or OptimizerSettings().defaults
    given = _coerce_options(options)
    resolved = {}

    for name, allowed in _ENUM_FIELDS:
        raw = getattr(given, name)
        value = _text(raw).lower()
        if not value:
            resolved[name] = getattr(base, name)
        elif value in allowed:
            resolved[name] = value
        elif strict:
            raise InvalidOption(name, raw, allowed)
        else:
            LOGGER.warning(
                "Unknown %s %r; using default %r",
                name,
                raw,
                getattr(base, name),
            )
            resolved[name] = getattr(base, name)

    language = _text(given.language)
    role = _text(given.role)
    return RewriteOptions(
        language=language or base.language,
        objective=resolved["objective"],
        reasoning_level=resolved["reasoning_level"],
        role=role or base.role,
        content_type=resolved["content_type"],
    )


class PromptOptimizer:
    """Deterministic rewriter turning a raw prompt into a structured result."""

    def __init__(self, settings: Optional[OptimizerSettings] = None) -> None:
        self.settings = settings or OptimizerSettings()

    def resolve(self, options: OptionsLike = None) -> RewriteOptions:
        return resolve_options(
            options,
            defaults=self.settings.defaults,
            strict=self.settings.strict,
        )

    def optimize(
        self,
        raw_prompt: Optional[str],
        options: OptionsLike = None,
        *,
        addendum: str = "",
    ) -> RewriteResult:
        """Rewrite ``raw_prompt``.

        ``addendum`` is a sentence placed after the rewritten instruction and
        before the directives. It is scored with the rest of the prompt but
        never classified or rewritten.
        """

        text = raw_prompt or ""
        resolved = self.resolve(options)
        objective = resolved.objective or ""
        content_type = resolved.content_type or ""

        intent = classify_intent(text)
        LOGGER.debug("Classified intent as %s", intent)

        instruction = rewrite_instruction(text, intent, objective)
        head = " ".join(
            part
            for part in (
                role_declaration(resolved.role or ""),
                instruction,
                addendum.strip(),
            )
            if part
        )
        rewritten = f"{head}{assemble_directives(resolved)}".strip()

        constraints = build_constraints(objective, content_type)
        examples = build_examples(
            intent, examples_requested(text), objective
        )

        metadata = ResultMetadata(
            original_length=len(text),
            rewritten_length=len(rewritten),
            complexity_score=score_complexity(rewritten),
            clarity_score=score_clarity(rewritten),
        )
        LOGGER.debug(
            "Rewrote prompt (%d -> %d chars, complexity=%d, clarity=%d)",
            metadata.original_length,
            metadata.rewritten_length,
            metadata.complexity_score,
            metadata.clarity_score,
        )
        return RewriteResult(
            intent=intent,
            rewritten_prompt=rewritten,
            parameters=ResultParameters(
                role=resolved.role or "",
                language=resolved.language or "",
                objective=objective,
                reasoning_level=resolved.reasoning_level or "",
                content_type=content_type,
                format=detect_format(text),
            ),
            constraints=tuple(constraints),
            metadata=metadata,
            examples=tuple(examples) if examples is not None else None,
        )


def optimize(
    raw_prompt: Optional[str],
    options: OptionsLike = None,
    *,
    settings: Optional[OptimizerSettings] = None,
    **overrides: Optional[str],
) -> RewriteResult:
    """Rewrite ``raw_prompt`` with the given options.

    Keyword overrides (``objective="brevity"``) are applied on top of
    ``options``.
    """

    merged = _coerce_options(options)
    if overrides:
        merged = merged.merged(
            **RewriteOptions.from_mapping(overrides).as_dict()
        )
    return PromptOptimizer(settings).optimize(raw_prompt, merged)


__all__ = ["PromptOptimizer", "optimize", "resolve_options"]

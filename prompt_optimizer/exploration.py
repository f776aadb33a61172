"""Multi-path presentation layer over the deterministic optimizer.

Each strategy contributes one sentence that the same
:class:`~prompt_optimizer.optimizer.PromptOptimizer` places after the
rewritten instruction. Intent, examples and length accounting always come
from the raw prompt. The path whose ``complexity_score + clarity_score``
is highest wins; the first strategy wins ties. There is no search, pruning
or backtracking here: path IDs are display labels only and never influence
content or scores.
"""

from __future__ import annotations

import uuid

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from prompt_optimizer.optimizer import OptionsLike, PromptOptimizer
from prompt_optimizer.types import RewriteResult

IdFactory = Callable[[], str]

MAX_PATH_SCORE = 200


def _default_id() -> str:
    return uuid.uuid4().hex[:12]


@dataclass(frozen=True)
class Strategy:
    key: str
    name: str
    focus: str
    sentence: Callable[[str], str]


def _structural(role: str) -> str:
    return (
        "Follow this structure: 1) Analyze the request, 2) Develop your "
        "approach, 3) Execute systematically, 4) Validate your output."
    )


def _contextual(role: str) -> str:
    return (
        "You should consider relevant background, constraints, and success "
        "criteria."
    )


def _role_based(role: str) -> str:
    return (
        "Apply your professional expertise and industry knowledge as a "
        f"{role.lower()}."
    )


STRATEGIES: Tuple[Strategy, ...] = (
    Strategy(
        "structural",
        "Structural Optimization",
        "structure and clarity",
        _structural,
    ),
    Strategy(
        "contextual",
        "Contextual Enhancement",
        "context and specificity",
        _contextual,
    ),
    Strategy(
        "role_based",
        "Role-Based Optimization",
        "role-specific enhancement",
        _role_based,
    ),
)


@dataclass(frozen=True)
class ExplorationPath:
    id: str
    strategy: str
    name: str
    focus: str
    result: RewriteResult

    @property
    def score(self) -> int:
        return self.result.metadata.total_score

    @property
    def confidence(self) -> float:
        return round(self.score / MAX_PATH_SCORE, 2)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "strategy": self.strategy,
            "name": self.name,
            "focus": self.focus,
            "score": self.score,
            "confidence": self.confidence,
            "result": self.result.as_dict(),
        }


@dataclass(frozen=True)
class ExplorationReport:
    selected: ExplorationPath
    paths: Tuple[ExplorationPath, ...]
    original_length: int

    @property
    def result(self) -> RewriteResult:
        return self.selected.result

    @property
    def average_score(self) -> float:
        return sum(path.score for path in self.paths) / len(self.paths)

    @property
    def alternatives(self) -> List[str]:
        return [
            f"{path.strategy}: score {path.score}/{MAX_PATH_SCORE}"
            for path in self.paths
            if path is not self.selected
        ]

    def summary(self) -> str:
        delta = self.selected.score - self.average_score
        return (
            f"Explored {len(self.paths)} optimization paths. Selected "
            f"{self.selected.name} with score "
            f"{self.selected.score}/{MAX_PATH_SCORE} "
            f"({delta:+.1f} against the average)."
        )

    def as_dict(self) -> Dict[str, Any]:
        return {
            "selected": self.selected.as_dict(),
            "paths": [path.as_dict() for path in self.paths],
            "original_length": self.original_length,
            "summary": self.summary(),
            "alternatives": self.alternatives,
        }


def explore(
    raw_prompt: Optional[str],
    options: OptionsLike = None,
    *,
    optimizer: Optional[PromptOptimizer] = None,
    strategies: Sequence[Strategy] = STRATEGIES,
    id_factory: IdFactory = _default_id,
) -> ExplorationReport:
    """Run every strategy through the optimizer and pick the best path."""

    if not strategies:
        raise ValueError("At least one exploration strategy is required")
    engine = optimizer or PromptOptimizer()
    resolved = engine.resolve(options)
    text = raw_prompt or ""
    paths = []
    for strategy in strategies:
        paths.append(
            ExplorationPath(
                id=f"{strategy.key}_{id_factory()}",
                strategy=strategy.key,
                name=strategy.name,
                focus=strategy.focus,
                result=engine.optimize(
                    text,
                    resolved,
                    addendum=strategy.sentence(resolved.role or ""),
                ),
            )
        )
    selected = max(paths, key=lambda path: path.score)
    return ExplorationReport(
        selected=selected,
        paths=tuple(paths),
        original_length=len(text),
    )


__all__ = [
    "ExplorationPath",
    "ExplorationReport",
    "STRATEGIES",
    "Strategy",
    "explore",
]

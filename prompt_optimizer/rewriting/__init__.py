"""Table-driven rewriting stages used by the optimizer pipeline."""

from prompt_optimizer.rewriting.constraints import (
    build_constraints,
    build_examples,
)
from prompt_optimizer.rewriting.directives import (
    assemble_directives,
    role_declaration,
)
from prompt_optimizer.rewriting.instruction import rewrite_instruction
from prompt_optimizer.rewriting.intent import (
    classify_intent,
    detect_format,
    examples_requested,
)
from prompt_optimizer.rewriting.scoring import score_clarity, score_complexity

__all__ = [
    "assemble_directives",
    "build_constraints",
    "build_examples",
    "classify_intent",
    "detect_format",
    "examples_requested",
    "rewrite_instruction",
    "role_declaration",
    "score_clarity",
    "score_complexity",
]

"""Prompt optimizer package entry point."""

from .exceptions import (
    ConfigurationError,
    HistoryError,
    InvalidOption,
    OptimizerError,
)
from .optimizer import PromptOptimizer, optimize, resolve_options
from .rewriting import classify_intent
from .types import (
    ResultMetadata,
    ResultParameters,
    RewriteOptions,
    RewriteResult,
)

__all__ = [
    "ConfigurationError",
    "HistoryError",
    "InvalidOption",
    "OptimizerError",
    "PromptOptimizer",
    "ResultMetadata",
    "ResultParameters",
    "RewriteOptions",
    "RewriteResult",
    "classify_intent",
    "optimize",
    "resolve_options",
]

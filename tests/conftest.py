"""Expose the project root on sys.path for pytest runs."""

from __future__ import annotations

import sys

from pathlib import Path

import pytest

from prompt_optimizer.optimizer import PromptOptimizer

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture()
def optimizer() -> PromptOptimizer:
    """Return an optimizer with built-in defaults and lenient options."""

    return PromptOptimizer()

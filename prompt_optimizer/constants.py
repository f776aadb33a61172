"""Shared option names and defaults."""

from __future__ import annotations

from typing import Tuple

OBJECTIVE_PRECISION = "precision"
OBJECTIVE_BREVITY = "brevity"
OBJECTIVE_CREATIVITY = "creativity"
OBJECTIVE_SAFETY = "safety"
OBJECTIVE_SPEED = "speed"

OBJECTIVES: Tuple[str, ...] = (
    OBJECTIVE_PRECISION,
    OBJECTIVE_BREVITY,
    OBJECTIVE_CREATIVITY,
    OBJECTIVE_SAFETY,
    OBJECTIVE_SPEED,
)

REASONING_LOW = "low"
REASONING_MEDIUM = "medium"
REASONING_HIGH = "high"

REASONING_LEVELS: Tuple[str, ...] = (
    REASONING_LOW,
    REASONING_MEDIUM,
    REASONING_HIGH,
)

CONTENT_TEXT = "text"
CONTENT_VIDEO = "video"
CONTENT_IMAGE = "image"
CONTENT_AUDIO = "audio"
CONTENT_PRESENTATION = "presentation"

CONTENT_TYPES: Tuple[str, ...] = (
    CONTENT_TEXT,
    CONTENT_VIDEO,
    CONTENT_IMAGE,
    CONTENT_AUDIO,
    CONTENT_PRESENTATION,
)

DEFAULT_LANGUAGE = "en-US"
DEFAULT_OBJECTIVE = OBJECTIVE_PRECISION
DEFAULT_REASONING_LEVEL = REASONING_MEDIUM
DEFAULT_ROLE = "Subject-matter expert"
DEFAULT_CONTENT_TYPE = CONTENT_TEXT

GENERAL_INTENT = "General Task"

FORMAT_JSON = "JSON"
FORMAT_MARKDOWN = "Markdown"
FORMAT_BULLET_POINTS = "BulletPoints"
FORMAT_TEXT = "Text"

MAX_SCORE = 100
MIN_SCORE = 0

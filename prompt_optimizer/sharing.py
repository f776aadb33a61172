"""Share tokens and plain-text / JSON exports of a rewrite."""

from __future__ import annotations

import base64
import binascii
import json

from typing import Any, Dict, Tuple

from prompt_optimizer.exceptions import OptimizerError
from prompt_optimizer.types import RewriteOptions, RewriteResult


def encode_share_state(prompt: str, options: RewriteOptions) -> str:
    """Pack the prompt and options into a URL-safe base64 token."""

    state = {"prompt": prompt, **options.as_dict()}
    raw = json.dumps(state, ensure_ascii=False, separators=(",", ":"))
    return base64.urlsafe_b64encode(raw.encode("utf-8")).decode("ascii")


def decode_share_state(token: str) -> Tuple[str, RewriteOptions]:
    try:
        raw = base64.urlsafe_b64decode(token.encode("ascii"))
        state: Dict[str, Any] = json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeError, ValueError) as exc:
        raise OptimizerError(f"Invalid share token: {exc}") from exc
    if not isinstance(state, dict):
        raise OptimizerError("Invalid share token: expected an object")
    prompt = str(state.pop("prompt", "") or "")
    return prompt, RewriteOptions.from_mapping(state)


def export_text(result: RewriteResult) -> str:
    return result.rewritten_prompt


def export_json(result: RewriteResult) -> str:
    return result.to_json(indent=2)


__all__ = [
    "decode_share_state",
    "encode_share_state",
    "export_json",
    "export_text",
]

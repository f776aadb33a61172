"""CLI entrypoint for the prompt optimizer."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from prompt_optimizer.analysis import (
    analyze_prompt,
    quality_level,
    quality_metrics,
    validate_prompt,
)
from prompt_optimizer.configuration import OptimizerSettings, load_settings
from prompt_optimizer.exceptions import (
    ConfigurationError,
    HistoryError,
    InvalidOption,
    OptimizerError,
)
from prompt_optimizer.exploration import ExplorationReport, explore
from prompt_optimizer.history import JsonFileStore, PromptHistory
from prompt_optimizer.locales import locale_groups
from prompt_optimizer.logging import configure_logging, setup_file_logger
from prompt_optimizer.optimizer import PromptOptimizer
from prompt_optimizer.prompting import render_expert_template
from prompt_optimizer.sharing import decode_share_state, encode_share_state
from prompt_optimizer.types import RewriteOptions, RewriteResult

DEFAULT_HISTORY_PATH = Path(".prompt_optimizer/history.json")
LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Rewrite a free-form prompt into a structured prompt with "
            "intent, constraints and examples."
        )
    )
    parser.add_argument(
        "prompt",
        nargs="?",
        type=str,
        help="Prompt text. Reads --file or stdin when omitted.",
    )
    parser.add_argument(
        "--file",
        type=str,
        help="Read the prompt from this file.",
    )
    parser.add_argument(
        "--language",
        "--lang",
        dest="language",
        type=str,
        help="Response locale, e.g. en-US or fr-FR.",
    )
    parser.add_argument(
        "--objective",
        type=str,
        help="precision, brevity, creativity, safety or speed.",
    )
    parser.add_argument(
        "--reasoning",
        dest="reasoning_level",
        type=str,
        help="Reasoning depth: low, medium or high.",
    )
    parser.add_argument(
        "--role",
        type=str,
        help="Persona declared at the start of the prompt.",
    )
    parser.add_argument(
        "--content-type",
        dest="content_type",
        type=str,
        help="text, video, image, audio or presentation.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full result as JSON.",
    )
    parser.add_argument(
        "--explore",
        action="store_true",
        help="Compare framing strategies and keep the best-scoring one.",
    )
    parser.add_argument(
        "--template",
        action="store_true",
        help="Also render the expert template for the detected intent.",
    )
    parser.add_argument(
        "--analyze",
        action="store_true",
        help="Include prompt analysis, validation and quality metrics.",
    )
    parser.add_argument(
        "--share",
        action="store_true",
        help="Print a share token for the prompt and options.",
    )
    parser.add_argument(
        "--from-share",
        type=str,
        help="Load the prompt and options from a share token.",
    )
    parser.add_argument(
        "--history",
        action="store_true",
        help="Record the result in the history file.",
    )
    parser.add_argument(
        "--list-history",
        action="store_true",
        help="Print stored history entries and exit.",
    )
    parser.add_argument(
        "--list-locales",
        action="store_true",
        help="Print the supported response locales and exit.",
    )
    parser.add_argument(
        "--history-file",
        type=str,
        help="History file (default: .prompt_optimizer/history.json).",
    )
    parser.add_argument(
        "--config",
        type=str,
        help=(
            "Path to a YAML config. Defaults to $PROMPT_OPTIMIZER_CONFIG "
            "or configs/default_config.yaml when present."
        ),
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject unknown option values instead of using defaults.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Override the configured log level.",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Also write logs to this rotating file.",
    )
    return parser


def _read_prompt(args: argparse.Namespace) -> Optional[str]:
    if args.prompt is not None:
        return args.prompt
    if args.file:
        return Path(args.file).read_text(encoding="utf-8")
    if not sys.stdin.isatty():
        return sys.stdin.read()
    return None


def _history(
    args: argparse.Namespace, settings: OptimizerSettings
) -> PromptHistory:
    if args.history_file:
        path = Path(args.history_file)
    else:
        path = settings.history.path or DEFAULT_HISTORY_PATH
    return PromptHistory(
        JsonFileStore(path), max_items=settings.limits.max_history_items
    )


def _list_history(history: PromptHistory) -> int:
    entries = history.entries
    if not entries:
        print("No history yet.", file=sys.stderr)
        return 0
    for entry in entries:
        print(
            json.dumps(
                {
                    "id": entry.id,
                    "prompt": entry.prompt,
                    "rewritten_prompt": entry.rewritten_prompt,
                    "favorite": entry.favorite,
                },
                ensure_ascii=False,
            )
        )
    return 0


def _analysis_payload(
    prompt: str, result: RewriteResult, settings: OptimizerSettings
) -> Dict[str, Any]:
    metrics = quality_metrics(prompt, result.rewritten_prompt, result)
    return {
        "prompt": analyze_prompt(prompt).as_dict(),
        "validation": validate_prompt(prompt, settings.limits).as_dict(),
        "quality": metrics.as_dict(),
        "quality_level": quality_level(metrics.overall),
    }


def _render(
    args: argparse.Namespace,
    prompt: str,
    options: RewriteOptions,
    result: RewriteResult,
    report: Optional[ExplorationReport],
    settings: OptimizerSettings,
) -> None:
    template = None
    if args.template:
        params = result.parameters
        template = render_expert_template(
            result.intent, params.objective, params.role, params.language
        )
    analysis = None
    if args.analyze:
        analysis = _analysis_payload(prompt, result, settings)
    token = encode_share_state(prompt, options) if args.share else None

    if args.json:
        payload = result.as_dict()
        if report is not None:
            payload["exploration"] = {
                "summary": report.summary(),
                "paths": [
                    {
                        "id": path.id,
                        "strategy": path.strategy,
                        "score": path.score,
                    }
                    for path in report.paths
                ],
            }
        if args.template:
            payload["expert_template"] = template
        if analysis is not None:
            payload["analysis"] = analysis
        if token is not None:
            payload["share_token"] = token
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    print(result.rewritten_prompt)
    if report is not None:
        print(f"\n[exploration] {report.summary()}")
    if args.template:
        fallback = "No expert template for this intent."
        print(f"\n[template] {template or fallback}")
    if analysis is not None:
        quality = analysis["quality"]
        print(
            f"\n[analysis] intent={result.intent} "
            f"overall={quality['overall']} ({analysis['quality_level']})"
        )
        for warning in analysis["validation"]["warnings"]:
            print(f"  warning: {warning}")
    if token is not None:
        print(f"\n[share] {token}")


def main(argv: Optional[list[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    load_dotenv()

    try:
        settings = load_settings(args.config)
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    if args.strict:
        settings = replace(settings, strict=True)

    configure_logging(args.log_level or settings.logging.level)
    log_file = args.log_file or settings.logging.file
    if log_file:
        setup_file_logger(Path(log_file), level=settings.logging.level)

    if args.list_locales:
        for group, locales in locale_groups().items():
            codes = ", ".join(locale.code for locale in locales)
            print(f"{group}: {codes}")
        return 0

    history = _history(args, settings)
    if args.list_history:
        try:
            return _list_history(history)
        except HistoryError as exc:
            print(f"History error: {exc}", file=sys.stderr)
            return 1

    options = RewriteOptions()
    prompt: Optional[str]
    if args.from_share:
        try:
            prompt, options = decode_share_state(args.from_share)
        except OptimizerError as exc:
            print(str(exc), file=sys.stderr)
            return 2
    else:
        try:
            prompt = _read_prompt(args)
        except OSError as exc:
            print(f"Could not read prompt: {exc}", file=sys.stderr)
            return 2
    if prompt is None:
        parser.error("a prompt is required (argument, --file or stdin)")

    options = options.merged(
        language=args.language,
        objective=args.objective,
        reasoning_level=args.reasoning_level,
        role=args.role,
        content_type=args.content_type,
    )

    optimizer = PromptOptimizer(settings)
    report: Optional[ExplorationReport] = None
    try:
        if args.explore or settings.exploration.enabled:
            report = explore(prompt, options, optimizer=optimizer)
            result = report.result
        else:
            result = optimizer.optimize(prompt, options)
    except InvalidOption as exc:
        print(f"Invalid option: {exc}", file=sys.stderr)
        return 2

    _render(args, prompt, options, result, report, settings)

    if args.history or settings.history.enabled:
        try:
            entry = history.add(prompt, result)
        except HistoryError as exc:
            print(f"History error: {exc}", file=sys.stderr)
            return 1
        LOGGER.info("Saved history entry %s", entry.id)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

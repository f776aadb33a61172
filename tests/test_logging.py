from __future__ import annotations

import logging

from pathlib import Path

from prompt_optimizer.logging import configure_logging, setup_file_logger


def test_setup_file_logger_is_idempotent(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "optimizer.log"
    logger = setup_file_logger(log_file, name="prompt_optimizer.test_file")
    setup_file_logger(log_file, name="prompt_optimizer.test_file")

    assert len(logger.handlers) == 1
    logger.info("rewrote prompt")
    logger.handlers[0].flush()
    assert "rewrote prompt" in log_file.read_text(encoding="utf-8")

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_configure_logging_sets_package_level() -> None:
    configure_logging("debug")
    assert logging.getLogger("prompt_optimizer").level == logging.DEBUG
    configure_logging("INFO")

"""Tests for filebundler.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from filebundler.logging import configure_logging, enable_debug, get_logger


def test_get_logger_nests_under_package_logger() -> None:
    assert get_logger().name == "filebundler"
    assert get_logger("stores.bundle").name == "filebundler.stores.bundle"


def test_configure_logging_is_idempotent(tmp_path: Path) -> None:
    log_file = tmp_path / "bundler.log"

    configure_logging(verbose=True, log_file=log_file)
    logger = configure_logging(verbose=True, log_file=log_file)
    get_logger("bundler").debug("traced")
    for handler in logger.handlers:
        handler.flush()

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    assert "traced" in log_file.read_text(encoding="utf-8")
    for handler in list(logger.handlers):
        handler.close()


def test_debug_logger_lowers_package_level() -> None:
    logger = get_logger("fileset", debug=True)

    assert logger.isEnabledFor(logging.DEBUG)
    assert logging.getLogger("filebundler").level == logging.DEBUG


def test_enable_debug_defers_to_existing_root_handlers() -> None:
    # pytest's capture handlers sit on the root logger during a test.
    package_logger = enable_debug()

    assert package_logger.handlers == []


def test_plain_logger_leaves_level_untouched() -> None:
    get_logger("bundler")

    assert logging.getLogger("filebundler").level == logging.NOTSET

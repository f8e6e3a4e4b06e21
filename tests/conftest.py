from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from tests._fixtures.webroot_builder import WebRootBuilder


@pytest.fixture
def webroot(tmp_path: Path) -> WebRootBuilder:
    """Provide a reusable web root rooted at the pytest tmp_path."""
    return WebRootBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_filebundler_logger() -> Iterator[None]:
    """Undo configure_logging() so caplog keeps seeing filebundler records."""
    yield
    logger = logging.getLogger("filebundler")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)

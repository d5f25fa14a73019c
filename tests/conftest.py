"""Shared pytest fixtures and configuration for the userdb test suite.

Guidelines
----------
* No network access in any test.
* Store files live under ``tmp_path`` only.
* Core tests must be pure — no side effects.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

from userdb.cli.logging_setup import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo handler/propagation changes made by ``configure_logging``."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    """Path of a store file that does not exist yet."""
    return tmp_path / "t.json"


@pytest.fixture
def write_store(store_path: Path) -> Callable[[Any], Path]:
    """Write *payload* (JSON-encoded unless already a string) to the store file."""

    def _write(payload: Any) -> Path:
        text = payload if isinstance(payload, str) else json.dumps(payload)
        store_path.write_text(text, encoding="utf-8")
        return store_path

    return _write


@pytest.fixture
def read_store(store_path: Path) -> Callable[[], Any]:
    """Decode the store file's JSON content."""

    def _read() -> Any:
        return json.loads(store_path.read_text(encoding="utf-8"))

    return _read

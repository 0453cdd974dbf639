"""Tests for logging configuration at startup."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from blindfold.ui.bootstrap import LOG_LEVEL_ENV, configure_logging


@pytest.fixture(autouse=True)
def _restore_root_level() -> Iterator[None]:
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def test_explicit_level() -> None:
    assert configure_logging("debug") == logging.DEBUG
    assert logging.getLogger().level == logging.DEBUG


def test_level_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, "info")
    assert configure_logging() == logging.INFO


def test_unknown_level_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    assert configure_logging("chatty") == logging.WARNING
    assert configure_logging() == logging.WARNING

"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from blindfold.core.move import MoveRecord
from blindfold.core.types import parse_square
from blindfold.game.recorder import MoveRecorder

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


def _play(recorder: MoveRecorder, *moves: str) -> list[MoveRecord]:
    """Play ``"e2e4"``-style moves, failing loudly on a rejected one."""
    records: list[MoveRecord] = []
    for move in moves:
        record = recorder.try_move(parse_square(move[:2]), parse_square(move[2:4]))
        assert record is not None, f"move {move} was rejected"
        records.append(record)
    return records


@pytest.fixture
def recorder() -> MoveRecorder:
    return MoveRecorder()


@pytest.fixture
def play() -> Callable[..., list[MoveRecord]]:
    """Helper that plays coordinate moves on a recorder."""
    return _play


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _cleanup_qt_widgets(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Ensure UI tests do not leak top-level widgets into the next test."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()

"""Tests for app settings and applying them to UI components."""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

from blindfold.core.enums import NotationMode
from blindfold.ui.settings import (
    CUSTOM_GAMES_FILE_ENV,
    GAMES_FILE_ENV,
    AppSettings,
    apply_settings,
)
from blindfold.ui.styles.theme import BoardTheme


class _StubScene:
    def __init__(self) -> None:
        self.theme: BoardTheme | None = None
        self.coordinates: bool | None = None
        self.legal_moves: bool | None = None

    def set_theme(self, theme: BoardTheme) -> None:
        self.theme = theme

    def set_show_coordinates(self, visible: bool) -> None:
        self.coordinates = visible

    def set_show_legal_moves(self, visible: bool) -> None:
        self.legal_moves = visible


class _StubMovePanel:
    def __init__(self) -> None:
        self.values: list[bool] = []

    def set_use_figurine_notation(self, enabled: bool) -> None:
        self.values.append(enabled)


def test_apply_settings_updates_components() -> None:
    settings = AppSettings(
        board_theme="Green",
        show_coordinates=False,
        use_figurine_notation=False,
        notation_mode=NotationMode.COMPATIBLE,
    )
    scene = _StubScene()
    move_panel = _StubMovePanel()
    recorder = SimpleNamespace(notation_mode=NotationMode.STANDARD)
    host = SimpleNamespace(
        _settings=settings,
        _board_view=SimpleNamespace(board_scene=scene),
        _move_panel=move_panel,
        _recorder=recorder,
    )

    apply_settings(host)

    assert scene.theme == BoardTheme.green()
    assert scene.coordinates is False
    assert scene.legal_moves is True
    assert move_panel.values == [False]
    assert recorder.notation_mode == NotationMode.COMPATIBLE


def test_unknown_theme_falls_back_to_default() -> None:
    assert BoardTheme.by_name("Neon") == BoardTheme.default()


def test_from_env_overrides_storage_paths(tmp_path: Path) -> None:
    settings = AppSettings.from_env(
        {
            GAMES_FILE_ENV: str(tmp_path / "games.json"),
            CUSTOM_GAMES_FILE_ENV: str(tmp_path / "mine.json"),
        }
    )
    assert settings.games_file == tmp_path / "games.json"
    assert settings.custom_games_file == tmp_path / "mine.json"


def test_from_env_defaults() -> None:
    settings = AppSettings.from_env({})
    assert settings.games_file is None
    assert settings.custom_games_file.name == "custom-games.json"

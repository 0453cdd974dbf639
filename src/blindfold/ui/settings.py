"""Application settings and how they are pushed into the widgets."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from blindfold.core.enums import NotationMode
from blindfold.ui.styles.theme import BoardTheme

GAMES_FILE_ENV = "BLINDFOLD_GAMES_FILE"
CUSTOM_GAMES_FILE_ENV = "BLINDFOLD_CUSTOM_GAMES_FILE"


def _default_custom_games_file() -> Path:
    return Path.home() / ".blindfold" / "custom-games.json"


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True

    # Notation
    use_figurine_notation: bool = True
    notation_mode: NotationMode = NotationMode.STANDARD

    # Storage; no games file means the built-in games
    games_file: Path | None = None
    custom_games_file: Path = field(default_factory=_default_custom_games_file)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppSettings:
        """Defaults with storage paths overridden from the environment."""
        env = os.environ if environ is None else environ
        settings = cls()
        if env.get(GAMES_FILE_ENV):
            settings.games_file = Path(env[GAMES_FILE_ENV]).expanduser()
        if env.get(CUSTOM_GAMES_FILE_ENV):
            settings.custom_games_file = Path(env[CUSTOM_GAMES_FILE_ENV]).expanduser()
        return settings


def apply_settings(host: Any) -> None:
    """Push ``host._settings`` into the board scene, panels and recorder."""
    s = host._settings

    scene = host._board_view.board_scene
    scene.set_theme(BoardTheme.by_name(s.board_theme))
    scene.set_show_coordinates(s.show_coordinates)
    scene.set_show_legal_moves(s.show_legal_moves)

    host._move_panel.set_use_figurine_notation(s.use_figurine_notation)
    host._recorder.notation_mode = s.notation_mode

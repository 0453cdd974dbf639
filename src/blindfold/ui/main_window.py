"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QMenu,
    QMessageBox,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from blindfold.core.move import MoveRecord
from blindfold.game.recorder import MoveRecorder
from blindfold.game.replay import GameReplay
from blindfold.storage import (
    GameRecord,
    GameStore,
    load_games,
    merge_games,
    record_from_history,
    save_pgn_file,
)
from blindfold.ui.board.board_view import BoardView
from blindfold.ui.dialogs.save_game_dialog import SaveGameDialog
from blindfold.ui.panels.commentary_panel import CommentaryPanel
from blindfold.ui.panels.move_panel import MovePanel
from blindfold.ui.panels.navigation_panel import NavigationPanel
from blindfold.ui.settings import AppSettings, apply_settings

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Authoring board plus a list of stored games to replay.

    With no game selected the board records a new game; selecting a game
    from the list switches to read-only replay of that game.
    """

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Blindfold")
        self.setMinimumSize(900, 640)
        self.resize(1150, 750)

        self._settings = settings if settings is not None else AppSettings.from_env()
        self._recorder = MoveRecorder(self._settings.notation_mode)
        self._store = GameStore(self._settings.custom_games_file)
        self._games: list[GameRecord] = []
        self._custom_ids: set[str] = set()
        self._replay: GameReplay | None = None
        self._replay_record: GameRecord | None = None

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        apply_settings(self)

        self._reload_games()
        self._start_recording()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        # Game list (left)
        left = QVBoxLayout()
        left.addWidget(QLabel("Games"))
        self._game_list = QListWidget()
        left.addWidget(self._game_list, stretch=1)
        left_widget = QWidget()
        left_widget.setLayout(left)
        left_widget.setFixedWidth(220)
        root.addWidget(left_widget)

        # Board (center)
        self._board_view = BoardView(self._recorder)
        root.addWidget(self._board_view, stretch=3)

        # Right panel
        right = QVBoxLayout()
        right.setSpacing(6)

        self._move_panel = MovePanel()
        right.addWidget(self._move_panel, stretch=1)

        self._commentary_panel = CommentaryPanel()
        right.addWidget(self._commentary_panel)

        self._navigation_panel = NavigationPanel()
        right.addWidget(self._navigation_panel)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(300)
        root.addWidget(right_widget)

        # Status bar
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel("Ready")
        self._status.addWidget(self._status_label)

    def _add_action(
        self,
        menu: QMenu,
        text: str,
        shortcut: str,
        slot: Callable[[], object],
    ) -> QAction:
        action = QAction(text, self)
        if shortcut:
            action.setShortcut(shortcut)
        action.triggered.connect(slot)
        menu.addAction(action)
        return action

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        self._menu_game = menu_bar.addMenu("&Game")
        assert self._menu_game is not None
        self._act_new_game = self._add_action(
            self._menu_game, "New Game", "Ctrl+N", self._on_new_game
        )
        self._act_save_game = self._add_action(
            self._menu_game, "Save Game…", "Ctrl+S", self._on_save_game
        )
        self._act_delete_game = self._add_action(
            self._menu_game, "Delete Game", "", self._on_delete_game
        )
        self._act_export_pgn = self._add_action(
            self._menu_game, "Export PGN…", "Ctrl+E", self._on_export_pgn
        )
        self._menu_game.addSeparator()
        self._act_flip = self._add_action(
            self._menu_game, "Flip Board", "F", self._on_flip
        )
        self._menu_game.addSeparator()
        self._act_quit = self._add_action(self._menu_game, "Quit", "Ctrl+Q", self.close)
        self._act_quit.setMenuRole(QAction.MenuRole.QuitRole)

        self._menu_navigate = menu_bar.addMenu("&Navigate")
        assert self._menu_navigate is not None
        self._act_first = self._add_action(
            self._menu_navigate, "First Move", "Home", self._on_first
        )
        self._act_previous = self._add_action(
            self._menu_navigate, "Previous Move", "Left", self._on_previous
        )
        self._act_next = self._add_action(
            self._menu_navigate, "Next Move", "Right", self._on_next
        )
        self._act_last = self._add_action(
            self._menu_navigate, "Last Move", "End", self._on_last
        )

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._board_view.move_recorded.connect(self._on_move_recorded)
        self._move_panel.move_clicked.connect(self._on_move_clicked)
        self._commentary_panel.commentary_changed.connect(self._on_commentary_changed)
        self._game_list.currentRowChanged.connect(self._on_game_selected)

        nav = self._navigation_panel
        nav.first_clicked.connect(self._on_first)
        nav.previous_clicked.connect(self._on_previous)
        nav.next_clicked.connect(self._on_next)
        nav.last_clicked.connect(self._on_last)
        nav.new_game_clicked.connect(self._on_new_game)
        nav.save_clicked.connect(self._on_save_game)
        nav.flip_clicked.connect(self._on_flip)

    # ── Game list ────────────────────────────────────────────────────────

    def _reload_games(self) -> None:
        """Re-read the games file and the custom store into the list."""
        stored = load_games(self._settings.games_file)
        try:
            custom = self._store.list()
        except (OSError, ValueError) as exc:
            _LOGGER.warning("Could not read custom games: %s", exc)
            custom = []
        self._custom_ids = {record.id for record in custom}
        self._games = merge_games(stored, custom)

        self._game_list.blockSignals(True)
        try:
            self._game_list.clear()
            for record in self._games:
                label = record.name
                if record.id in self._custom_ids:
                    label += "  (custom)"
                item = QListWidgetItem(label)
                item.setToolTip(record.description or record.name)
                item.setData(Qt.ItemDataRole.UserRole, record.id)
                self._game_list.addItem(item)
        finally:
            self._game_list.blockSignals(False)

    def _on_game_selected(self, row: int) -> None:
        if 0 <= row < len(self._games):
            self.open_game(self._games[row])

    # ── Modes ────────────────────────────────────────────────────────────

    @property
    def is_replaying(self) -> bool:
        return self._replay is not None

    def open_game(self, record: GameRecord) -> None:
        """Switch to replay of *record*, starting from the initial position."""
        self._replay = GameReplay.from_record(record)
        self._replay_record = record
        self._board_view.board_scene.set_interactive(False)
        self._commentary_panel.set_read_only(True)
        self._sync_view()

        message = f"Replaying {record.name}"
        if self._replay.fallbacks:
            message += f" ({len(self._replay.fallbacks)} moves resolved by guess)"
        self._status_label.setText(message)

    def _start_recording(self) -> None:
        self._replay = None
        self._replay_record = None
        self._recorder.reset()
        self._board_view.board_scene.set_recorder(self._recorder)
        self._commentary_panel.set_read_only(False)

        self._game_list.blockSignals(True)
        self._game_list.setCurrentRow(-1)
        self._game_list.blockSignals(False)

        self._sync_view()
        self._status_label.setText("Recording a new game. White to move.")

    # ── View synchronisation ─────────────────────────────────────────────

    def _sync_view(self) -> None:
        """Bring board, move list, commentary and buttons in line."""
        if self._replay is not None and self._replay_record is not None:
            replay = self._replay
            scene = self._board_view.board_scene
            scene.set_board(replay.board)
            scene.highlight_last_move(replay.current_move)
            cursor, total = replay.cursor, replay.ply_count
            notations = list(self._replay_record.moves_notation)
            text, label = self._stored_commentary(self._replay_record, cursor)
        else:
            self._board_view.board_scene.refresh()
            cursor, total = self._recorder.cursor, self._recorder.ply_count
            notations = self._recorder.notation_list()
            text, label = self._recorder.current_commentary(), ""

        active = cursor - 1 if cursor else None
        self._move_panel.set_moves(notations)
        self._move_panel.set_active_ply(active)
        self._commentary_panel.set_ply(active, text, label)
        self._navigation_panel.update_state(cursor, total)

        recording = self._replay is None
        self._navigation_panel.set_save_enabled(recording and total > 0)
        self._act_save_game.setEnabled(recording and total > 0)
        self._act_delete_game.setEnabled(
            self._replay_record is not None
            and self._replay_record.id in self._custom_ids
        )
        self._act_export_pgn.setEnabled(total > 0)

    @staticmethod
    def _stored_commentary(record: GameRecord, cursor: int) -> tuple[str, str]:
        if cursor == 0 or cursor > len(record.moves_detailed):
            return "", ""
        entry = record.moves_detailed[cursor - 1]
        text = entry.get("commentary") or entry.get("description") or ""
        return str(text), f"Move {entry.get('move_number', (cursor + 1) // 2)}"

    # ── Recorder events ──────────────────────────────────────────────────

    def _on_move_recorded(self, record: MoveRecord) -> None:
        self._sync_view()
        self._status_label.setText(
            f"{record.move_number}. {record.notation} ({record.description}). "
            f"{str(self._recorder.side_to_move).capitalize()} to move."
        )

    def _on_commentary_changed(self, ply: int, text: str) -> None:
        if self._replay is None and ply < self._recorder.ply_count:
            self._recorder.set_commentary(ply, text)

    # ── Navigation ───────────────────────────────────────────────────────

    def _navigator(self) -> GameReplay | MoveRecorder:
        return self._replay if self._replay is not None else self._recorder

    def _on_first(self) -> None:
        self._navigator().first()
        self._sync_view()

    def _on_previous(self) -> None:
        self._navigator().previous()
        self._sync_view()

    def _on_next(self) -> None:
        self._navigator().next()
        self._sync_view()

    def _on_last(self) -> None:
        self._navigator().last()
        self._sync_view()

    def _on_move_clicked(self, ply: int) -> None:
        self._navigator().go_to(ply + 1)
        self._sync_view()

    def _on_flip(self) -> None:
        scene = self._board_view.board_scene
        scene.set_flipped(not scene.is_flipped())
        self._sync_view()

    # ── Game actions ─────────────────────────────────────────────────────

    def _on_new_game(self) -> None:
        self._start_recording()

    def _on_save_game(self) -> None:
        if self._replay is not None or not self._recorder.ply_count:
            return
        details = SaveGameDialog.ask(self)
        if details is None:
            return
        self.save_current_game(details.name, **details.as_kwargs())

    def save_current_game(self, name: str, **details: str) -> GameRecord | None:
        """Store the authored game; ``None`` (after a warning) on failure."""
        try:
            record = record_from_history(self._recorder.history, name, **details)
            stored = self._store.save(record)
        except (OSError, ValueError) as exc:
            QMessageBox.warning(
                self, "Save Game", f"Could not save the game:\n{exc}"
            )
            return None

        self._reload_games()
        self._status_label.setText(f"Saved “{stored.name}”")
        return stored

    def _on_delete_game(self) -> None:
        record = self._replay_record
        if record is None or record.id not in self._custom_ids:
            return
        answer = QMessageBox.question(
            self,
            "Delete Game",
            f"Delete “{record.name}” from your saved games?",
        )
        if answer == QMessageBox.StandardButton.Yes:
            self.delete_game(record.id)

    def delete_game(self, game_id: str) -> bool:
        """Remove a custom game; returns to recording when it was on display."""
        try:
            deleted = self._store.delete(game_id)
        except (OSError, ValueError) as exc:
            QMessageBox.warning(
                self, "Delete Game", f"Could not delete the game:\n{exc}"
            )
            return False
        if not deleted:
            self._status_label.setText("Game not found")
            return False

        showing = self._replay_record is not None and self._replay_record.id == game_id
        self._reload_games()
        if showing:
            self._start_recording()
        self._status_label.setText("Game deleted")
        return True

    def current_record(self) -> GameRecord | None:
        """Game on display as a record (unsaved authored games included)."""
        if self._replay_record is not None:
            return self._replay_record
        if not self._recorder.ply_count:
            return None
        return record_from_history(
            self._recorder.history, "Untitled game", game_id="unsaved"
        )

    def _on_export_pgn(self) -> None:
        record = self.current_record()
        if record is None:
            return
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            "Export PGN",
            "game.pgn",
            "PGN files (*.pgn);;All files (*)",
        )
        if not file_path:
            return
        try:
            save_path = save_pgn_file(record, Path(file_path))
        except OSError as exc:
            QMessageBox.warning(self, "Export PGN", f"Could not export:\n{exc}")
            return
        self._status_label.setText(f"Exported {save_path.name}")

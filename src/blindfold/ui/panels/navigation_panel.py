"""NavigationPanel — history navigation and session buttons."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtBoundSignal, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget


class NavigationPanel(QWidget):
    """First / back / forward / final buttons plus new, save and flip."""

    first_clicked = pyqtSignal()
    previous_clicked = pyqtSignal()
    next_clicked = pyqtSignal()
    last_clicked = pyqtSignal()
    new_game_clicked = pyqtSignal()
    save_clicked = pyqtSignal()
    flip_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.update_state(0, 0)

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        btn_font = QFont()
        btn_font.setPointSize(10)

        self._position_label = QLabel()
        self._position_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._position_label)

        nav_row = QHBoxLayout()
        self._btn_first = self._make_button("⏮", btn_font, self.first_clicked)
        self._btn_previous = self._make_button("◀", btn_font, self.previous_clicked)
        self._btn_next = self._make_button("▶", btn_font, self.next_clicked)
        self._btn_last = self._make_button("⏭", btn_font, self.last_clicked)
        for btn in (self._btn_first, self._btn_previous, self._btn_next, self._btn_last):
            nav_row.addWidget(btn)
        layout.addLayout(nav_row)

        action_row = QHBoxLayout()
        self._btn_new = self._make_button("New Game", btn_font, self.new_game_clicked)
        self._btn_save = self._make_button("Save Game", btn_font, self.save_clicked)
        self._btn_flip = self._make_button("Flip", btn_font, self.flip_clicked)
        for btn in (self._btn_new, self._btn_save, self._btn_flip):
            action_row.addWidget(btn)
        layout.addLayout(action_row)

    @staticmethod
    def _make_button(text: str, font: QFont, signal: pyqtBoundSignal) -> QPushButton:
        btn = QPushButton(text)
        btn.setFont(font)
        btn.setMinimumHeight(32)
        btn.clicked.connect(signal)
        return btn

    def update_state(self, cursor: int, total: int) -> None:
        """Enable buttons for a cursor in ``0..total``."""
        self._btn_first.setEnabled(cursor > 0)
        self._btn_previous.setEnabled(cursor > 0)
        self._btn_next.setEnabled(cursor < total)
        self._btn_last.setEnabled(cursor < total)
        if total:
            self._position_label.setText(f"Move {cursor} / {total}")
        else:
            self._position_label.setText("Start position")

    def set_save_enabled(self, enabled: bool) -> None:
        self._btn_save.setEnabled(enabled)

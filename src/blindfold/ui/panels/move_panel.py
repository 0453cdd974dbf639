"""MovePanel — numbered move list with clickable plies."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QSizePolicy,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from blindfold.core.enums import Color

# Unicode figurine symbols: white = outline, black = filled
_FIGURINE: dict[Color, dict[str, str]] = {
    Color.WHITE: {"K": "♔", "Q": "♕", "R": "♖", "B": "♗", "N": "♘"},
    Color.BLACK: {"K": "♚", "Q": "♛", "R": "♜", "B": "♝", "N": "♞"},
}

_BUTTON_STYLE = """
QToolButton {
    background: transparent;
    color: #d4d4d4;
    border: 1px solid transparent;
    border-radius: 4px;
    padding: 2px 8px;
    text-align: left;
    font-size: 13px;
}
QToolButton:hover {
    background: #3c3c3c;
    border-color: #555;
}
QToolButton[activeMove="true"] {
    background: #264f78;
    border-color: #3b79b7;
    color: #f0f6ff;
}
"""


def _figurine_san(san: str, color: Color) -> str:
    """Replace the leading piece letter in *san* with *color*'s figurine."""
    table = _FIGURINE[color]
    if san and san[0] in table:
        return table[san[0]] + san[1:]
    return san


class MovePanel(QWidget):
    """Shows the game's notation list, two plies per numbered row.

    Signals:
        move_clicked(int): 0-based ply of the clicked move.
    """

    move_clicked = pyqtSignal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._notations: list[str] = []
        self._move_buttons: dict[int, QToolButton] = {}
        self._active_ply: int | None = None
        self._use_figurine_notation = True
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._header = QLabel("Moves")
        self._header.setFont(QFont("Helvetica Neue", 12, QFont.Weight.Bold))
        self._header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._header)

        self._list = QListWidget()
        self._list.setAlternatingRowColors(True)
        self._list.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        layout.addWidget(self._list)

    # ── Public API ───────────────────────────────────────────────────────

    def clear(self) -> None:
        self._notations.clear()
        self._move_buttons.clear()
        self._active_ply = None
        self._list.clear()

    def set_moves(self, notations: Sequence[str], active_ply: int | None = None) -> None:
        """Rebuild the list; *active_ply* defaults to the last move."""
        self._notations = list(notations)
        if active_ply is None and self._notations:
            active_ply = len(self._notations) - 1
        self._active_ply = active_ply
        self._rebuild_list()

    def add_move(self, notation: str) -> None:
        self._notations.append(notation)
        self._active_ply = len(self._notations) - 1
        self._rebuild_list()

    def set_active_ply(self, ply: int | None) -> None:
        """Mark *ply* as the move the board currently shows (``None``: start)."""
        if ply is not None and not 0 <= ply < len(self._notations):
            ply = None
        self._active_ply = ply
        for move_ply, btn in self._move_buttons.items():
            btn.setProperty("activeMove", move_ply == ply)
            style = btn.style()
            if style is not None:
                style.unpolish(btn)
                style.polish(btn)
            btn.update()

    def set_use_figurine_notation(self, enabled: bool) -> None:
        """Toggle move text between figurines and plain piece letters."""
        if self._use_figurine_notation == enabled:
            return
        self._use_figurine_notation = enabled
        self._rebuild_list()

    # ── Internals ────────────────────────────────────────────────────────

    def _create_move_button(self, text: str, ply: int) -> QToolButton:
        btn = QToolButton()
        btn.setText(text)
        btn.setCursor(Qt.CursorShape.PointingHandCursor)
        btn.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        btn.setProperty("activeMove", False)
        btn.setStyleSheet(_BUTTON_STYLE)
        btn.clicked.connect(
            lambda _checked=False, move_ply=ply: self._on_move_clicked(move_ply)
        )
        return btn

    def _on_move_clicked(self, ply: int) -> None:
        self.set_active_ply(ply)
        self.move_clicked.emit(ply)

    def _format(self, notation: str, color: Color) -> str:
        if self._use_figurine_notation:
            return _figurine_san(notation, color)
        return notation

    def _rebuild_list(self) -> None:
        self._list.clear()
        self._move_buttons.clear()
        for ply in range(0, len(self._notations), 2):
            row_widget = QWidget()
            row_layout = QHBoxLayout(row_widget)
            row_layout.setContentsMargins(6, 2, 6, 2)
            row_layout.setSpacing(8)

            num_label = QLabel(f"{ply // 2 + 1}.")
            num_label.setFixedWidth(28)
            num_label.setAlignment(
                Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
            )
            row_layout.addWidget(num_label)

            for side_ply, color in ((ply, Color.WHITE), (ply + 1, Color.BLACK)):
                if side_ply < len(self._notations):
                    btn = self._create_move_button(
                        self._format(self._notations[side_ply], color), side_ply
                    )
                    row_layout.addWidget(btn, 1)
                    self._move_buttons[side_ply] = btn
                else:
                    spacer = QWidget()
                    spacer.setSizePolicy(
                        QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed
                    )
                    row_layout.addWidget(spacer, 1)

            item = QListWidgetItem()
            item.setSizeHint(row_widget.sizeHint())
            self._list.addItem(item)
            self._list.setItemWidget(item, row_widget)

        self.set_active_ply(self._active_ply)
        self._list.scrollToBottom()

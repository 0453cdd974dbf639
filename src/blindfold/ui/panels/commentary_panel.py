"""CommentaryPanel — commentary editor for the move on display."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QPlainTextEdit, QVBoxLayout, QWidget


class CommentaryPanel(QWidget):
    """Edits the commentary of one ply.

    Signals:
        commentary_changed(int, str): 0-based ply and its new text.
    """

    commentary_changed = pyqtSignal(int, str)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._ply: int | None = None
        self._read_only = False
        self._setup_ui()
        self.set_ply(None)

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._title = QLabel()
        self._title.setFont(QFont("Helvetica Neue", 11, QFont.Weight.Bold))
        layout.addWidget(self._title)

        self._editor = QPlainTextEdit()
        self._editor.setPlaceholderText("Add commentary for this move…")
        self._editor.setMaximumHeight(120)
        self._editor.textChanged.connect(self._on_text_changed)
        layout.addWidget(self._editor)

    @property
    def ply(self) -> int | None:
        return self._ply

    def text(self) -> str:
        return self._editor.toPlainText()

    def set_read_only(self, read_only: bool) -> None:
        """Replay mode shows stored commentary without editing."""
        self._read_only = read_only
        self._editor.setReadOnly(read_only or self._ply is None)

    def set_ply(self, ply: int | None, text: str = "", label: str = "") -> None:
        """Show *text* for *ply* without emitting ``commentary_changed``."""
        self._ply = ply
        self._title.setText(label or ("Commentary" if ply is None else f"Ply {ply + 1}"))
        self._editor.blockSignals(True)
        try:
            self._editor.setPlainText(text)
        finally:
            self._editor.blockSignals(False)
        self._editor.setReadOnly(self._read_only or ply is None)

    def _on_text_changed(self) -> None:
        if self._ply is None or self._read_only:
            return
        self.commentary_changed.emit(self._ply, self._editor.toPlainText())

"""SaveGameDialog — name and details for an authored game."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLabel,
    QLineEdit,
    QPlainTextEdit,
    QVBoxLayout,
    QWidget,
)

RESULTS = ("In progress", "White wins", "Black wins", "Draw")


class _SaveGameDetails:
    """Plain data returned by SaveGameDialog."""

    __slots__ = (
        "name",
        "white_player",
        "black_player",
        "opening",
        "result",
        "description",
    )

    def __init__(
        self,
        name: str,
        white_player: str = "",
        black_player: str = "",
        opening: str = "",
        result: str = "",
        description: str = "",
    ) -> None:
        self.name = name
        self.white_player = white_player
        self.black_player = black_player
        self.opening = opening
        self.result = result
        self.description = description

    def as_kwargs(self) -> dict[str, str]:
        """Keyword arguments for :func:`record_from_history` (name excluded)."""
        return {
            "white_player": self.white_player,
            "black_player": self.black_player,
            "opening": self.opening,
            "result": self.result,
            "description": self.description,
        }


class SaveGameDialog(QDialog):
    """Modal form asking for the game name and optional details."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setMinimumWidth(380)
        self.setWindowTitle("Save Game")
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )

        self._details: _SaveGameDetails | None = None
        self._setup_ui()

    def _setup_ui(self) -> None:
        main = QVBoxLayout(self)
        form = QFormLayout()
        form.setSpacing(10)

        self._edit_name = QLineEdit()
        self._edit_name.setPlaceholderText("Required")
        form.addRow("Game name", self._edit_name)

        self._edit_white = QLineEdit()
        self._edit_white.setPlaceholderText("White")
        form.addRow("White player", self._edit_white)

        self._edit_black = QLineEdit()
        self._edit_black.setPlaceholderText("Black")
        form.addRow("Black player", self._edit_black)

        self._edit_opening = QLineEdit()
        self._edit_opening.setPlaceholderText("Custom Opening")
        form.addRow("Opening", self._edit_opening)

        self._combo_result = QComboBox()
        self._combo_result.addItems(RESULTS)
        form.addRow("Result", self._combo_result)

        self._edit_description = QPlainTextEdit()
        self._edit_description.setMaximumHeight(80)
        form.addRow("Description", self._edit_description)
        main.addLayout(form)

        self._error = QLabel()
        self._error.setStyleSheet("color: #e06c6c;")
        self._error.setVisible(False)
        main.addWidget(self._error)

        self._buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Save | QDialogButtonBox.StandardButton.Cancel
        )
        self._buttons.accepted.connect(self._on_accept)
        self._buttons.rejected.connect(self.reject)
        main.addWidget(self._buttons)

    def _on_accept(self) -> None:
        name = self._edit_name.text().strip()
        if not name:
            self._error.setText("Please enter a name for the game.")
            self._error.setVisible(True)
            return
        self._details = _SaveGameDetails(
            name=name,
            white_player=self._edit_white.text(),
            black_player=self._edit_black.text(),
            opening=self._edit_opening.text(),
            result=self._combo_result.currentText(),
            description=self._edit_description.toPlainText(),
        )
        self.accept()

    @property
    def details(self) -> _SaveGameDetails | None:
        return self._details

    @staticmethod
    def ask(parent: QWidget | None = None) -> _SaveGameDetails | None:
        dlg = SaveGameDialog(parent)
        if dlg.exec() == QDialog.DialogCode.Accepted:
            return dlg.details
        return None

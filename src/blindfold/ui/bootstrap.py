"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)

LOG_LEVEL_ENV = "BLINDFOLD_LOG_LEVEL"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> int:
    """Configure root logging from *level* or ``BLINDFOLD_LOG_LEVEL``.

    Unknown level names fall back to ``WARNING``.  Returns the level applied.
    """
    name = (level or os.environ.get(LOG_LEVEL_ENV) or "WARNING").strip().upper()
    resolved = logging.getLevelName(name)
    known = isinstance(resolved, int)
    if not known:
        resolved = logging.WARNING
    logging.basicConfig(level=resolved, format=_LOG_FORMAT)
    logging.getLogger().setLevel(resolved)
    if not known:
        _LOGGER.warning("Unknown log level %r; using WARNING", name)
    return resolved


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from blindfold.ui.styles.theme import APP_STYLE

    app.setApplicationName("Blindfold")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from blindfold.ui.main_window import MainWindow
    from blindfold.ui.settings import AppSettings

    configure_logging()
    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(AppSettings.from_env())
    window.show()

    return app.exec()

"""PieceItem — draggable glyph piece on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QBrush, QCursor, QFont, QPen
from PyQt6.QtWidgets import QGraphicsItem, QGraphicsSimpleTextItem

from blindfold.core.enums import Color
from blindfold.core.piece import Piece
from blindfold.core.types import Square
from blindfold.ui.styles.theme import BoardTheme


class PieceItem(QGraphicsSimpleTextItem):
    """A single chess piece drawn as a Unicode glyph.

    Both colours use the solid glyph and differ only in fill, which keeps the
    two sets the same size.  Stores its logical *square* for drag & drop.
    """

    _FONT_RATIO = 0.78

    def __init__(
        self,
        piece: Piece,
        square: Square,
        tile_size: int,
        theme: BoardTheme,
    ) -> None:
        super().__init__(Piece(Color.BLACK, piece.piece_type).symbol)
        self.piece = piece
        self.square = square
        self._tile_size = tile_size
        self._offset = QPointF(0.0, 0.0)
        self._drag_origin: QPointF | None = None

        fill = theme.white_piece if piece.color == Color.WHITE else theme.black_piece
        self.setBrush(QBrush(fill))
        self.setPen(QPen(theme.piece_outline, 1.0))
        self._update_size(tile_size)

        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsMovable, False)
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)

    @property
    def offset(self) -> QPointF:
        """Top-left offset that centres the glyph inside its tile."""
        return self._offset

    def enable_drag(self, enabled: bool) -> None:
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsMovable, enabled)
        if enabled:
            self.setCursor(QCursor(Qt.CursorShape.OpenHandCursor))
        else:
            self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))

    def start_drag(self) -> None:
        self._drag_origin = self.pos()
        self.setZValue(10)
        self.setCursor(QCursor(Qt.CursorShape.ClosedHandCursor))
        self.setOpacity(0.85)

    def cancel_drag(self) -> None:
        """Snap back to the square the drag started from."""
        if self._drag_origin is not None:
            self.setPos(self._drag_origin)
        self._finish_drag()

    def finish_drag(self) -> None:
        self._finish_drag()

    def _finish_drag(self) -> None:
        self._drag_origin = None
        self.setZValue(1)
        self.setCursor(QCursor(Qt.CursorShape.OpenHandCursor))
        self.setOpacity(1.0)

    def _update_size(self, size: int) -> None:
        self._tile_size = size
        font = QFont()
        font.setPixelSize(max(1, int(size * self._FONT_RATIO)))
        self.setFont(font)
        bounds = self.boundingRect()
        self._offset = QPointF(
            (size - bounds.width()) / 2.0,
            (size - bounds.height()) / 2.0,
        )

"""BoardScene — QGraphicsScene that draws the chessboard and routes gestures."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from blindfold.core.board import Board
from blindfold.core.move import MoveRecord, ParsedMove
from blindfold.core.types import Square, file_of, make_square, rank_of
from blindfold.game.recorder import MoveRecorder
from blindfold.ui.board.piece_item import PieceItem
from blindfold.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights and piece items.

    With a :class:`MoveRecorder` attached and interaction enabled, clicks and
    drags are submitted to the recorder; otherwise the scene only displays
    whatever board it is given.

    Signals:
        move_recorded(MoveRecord): Emitted after the recorder accepts a move.
    """

    move_recorded = pyqtSignal(object)

    TILE = 80  # px per square

    def __init__(
        self,
        recorder: MoveRecorder | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._recorder = recorder
        self._board: Board | None = None
        self._flipped = False

        # Interaction state
        self._selected_sq: Square | None = None
        self._legal_targets: list[Square] = []
        self._dragging_item: PieceItem | None = None
        self._interactive = recorder is not None
        self._show_coordinates = True
        self._show_legal_moves = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._last_move_highlights: list[QGraphicsRectItem] = []
        self._legal_dot_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Square, PieceItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()
        if recorder is not None:
            self.refresh()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def recorder(self) -> MoveRecorder | None:
        return self._recorder

    def set_recorder(self, recorder: MoveRecorder | None) -> None:
        """Attach the authoring session whose board is shown and edited."""
        self._recorder = recorder
        self._interactive = recorder is not None
        if recorder is not None:
            self.refresh()

    def refresh(self) -> None:
        """Redraw from the recorder's cursor position."""
        if self._recorder is None:
            return
        recorder = self._recorder
        self.set_board(recorder.display_board)
        last = recorder.history[recorder.cursor - 1] if recorder.cursor else None
        self.highlight_last_move(last)

    def set_board(self, board: Board) -> None:
        """Display *board* (full redraw of pieces)."""
        self._board = board.copy()
        self._clear_selection()
        self._sync_pieces()

    def set_interactive(self, interactive: bool) -> None:
        self._interactive = interactive
        if not interactive:
            self._clear_selection()

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._draw_board()
        self._sync_pieces()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._sync_pieces()

    def set_show_coordinates(self, visible: bool) -> None:
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        self._show_legal_moves = visible
        if not visible:
            self._clear_items(self._legal_dot_items)

    def highlight_last_move(self, move: MoveRecord | ParsedMove | None) -> None:
        """Highlight origin/destination of the move that led to the position."""
        self._clear_items(self._last_move_highlights)
        if move is None:
            return
        for sq, color in [
            (move.from_sq, self._theme.last_move_from),
            (move.to_sq, self._theme.last_move_to),
        ]:
            rect = self._make_highlight(sq, color)
            rect.setZValue(0.5)
            self._last_move_highlights.append(rect)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont()
        font.setPixelSize(max(9, t // 7))

        for sq in range(64):
            f, r = file_of(sq), rank_of(sq)
            vf, vr = self._visual_coords(f, r)
            is_dark = (f + r) % 2 == 0
            color = self._theme.dark_square if is_dark else self._theme.light_square
            rect = QGraphicsRectItem(vf * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            text_color = self._theme.coord_dark if is_dark else self._theme.coord_light
            # Rank numbers on the left edge, file letters on the bottom edge
            if vf == 0:
                self._add_coord(str(r + 1), font, text_color, vf * t + 2, vr * t + 1)
            if vr == 7:
                self._add_coord(
                    chr(ord("a") + f), font, text_color, vf * t + t - 12, vr * t + t - 16
                )

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord(
        self, label: str, font: QFont, color: QColor, x: float, y: float
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the displayed board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()
        self._dragging_item = None

        if self._board is None:
            return

        t = self.TILE
        for sq, piece in self._board:
            item = PieceItem(piece, sq, t, self._theme)
            vf, vr = self._visual_coords(file_of(sq), rank_of(sq))
            item.setPos(vf * t + item.offset.x(), vr * t + item.offset.y())
            self.addItem(item)
            self._piece_items[sq] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def _accepts_input(self) -> bool:
        return (
            self._interactive
            and self._recorder is not None
            and self._recorder.is_at_live_end
        )

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None or not self._accepts_input():
            return super().mousePressEvent(event)

        sq = self._pos_to_square(event.scenePos())
        if sq is None:
            self._clear_selection()
            return super().mousePressEvent(event)

        # Clicking a highlighted target completes a click-click move
        if self._selected_sq is not None and sq in self._legal_targets:
            self._submit(self._selected_sq, sq)
            return

        if self._select_square(sq):
            item = self._piece_items.get(sq)
            if item is not None:
                item.enable_drag(True)
                item.start_drag()
                self._dragging_item = item

        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if self._dragging_item is not None and event is not None:
            item = self._dragging_item
            drop_sq = self._pos_to_square(event.scenePos())

            if (
                drop_sq is not None
                and drop_sq != item.square
                and drop_sq in self._legal_targets
            ):
                item.finish_drag()
                item.enable_drag(False)
                self._dragging_item = None
                self._submit(item.square, drop_sq)
                return

            # Invalid drop: snap back and keep the selection
            item.cancel_drag()
            item.enable_drag(False)
            self._dragging_item = None

        super().mouseReleaseEvent(event)

    def _submit(self, from_sq: Square, to_sq: Square) -> MoveRecord | None:
        """Hand a completed gesture to the recorder and redraw."""
        if self._recorder is None:
            return None
        record = self._recorder.try_move(from_sq, to_sq)
        self._clear_selection()
        self.refresh()
        if record is not None:
            self.move_recorded.emit(record)
        return record

    # ── Selection / highlights ───────────────────────────────────────────

    def _select_square(self, sq: Square) -> bool:
        self._clear_selection()
        if self._recorder is None or not self._recorder.select(sq):
            return False
        self._selected_sq = sq
        self._legal_targets = self._recorder.legal_destinations(sq)

        rect = self._make_highlight(sq, self._theme.highlight_from)
        self._highlight_items.append(rect)

        if self._show_legal_moves:
            for target in self._legal_targets:
                dot = self._make_highlight(target, self._theme.highlight_to)
                self._legal_dot_items.append(dot)
        return True

    def _clear_selection(self) -> None:
        self._selected_sq = None
        self._legal_targets = []
        if self._recorder is not None:
            self._recorder.clear_selection()
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_dot_items)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, file: int, rank: int) -> tuple[int, int]:
        """Convert board file/rank to visual column/row."""
        if self._flipped:
            return 7 - file, rank
        return file, 7 - rank

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        if self._flipped:
            f, r = 7 - col, row
        else:
            f, r = col, 7 - row
        return make_square(f, r)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vf, vr = self._visual_coords(file_of(sq), rank_of(sq))
        rect = QGraphicsRectItem(vf * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect

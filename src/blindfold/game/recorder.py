"""Interactive move recorder — the authoring session for a custom game."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum, auto

from blindfold.core.board import Board
from blindfold.core.enums import (
    CastleSide,
    Color,
    Disambiguation,
    NotationMode,
    PieceType,
)
from blindfold.core.move import (
    MoveRecord,
    castling_king_squares,
    castling_rook_squares,
)
from blindfold.core.notation.parser import MoveParser
from blindfold.core.notation.san import (
    castling_notation,
    generate_notation,
    origin_hints,
    piece_notation,
)
from blindfold.core.piece import Piece
from blindfold.core.rules import Rules
from blindfold.core.types import Square, file_of, square_name

_LOGGER = logging.getLogger(__name__)


class RecorderPhase(IntEnum):
    """Selection state of the authoring board."""

    EMPTY = auto()
    SOURCE_SELECTED = auto()


def replay_record(board: Board, record: MoveRecord) -> None:
    """Play an already-recorded move onto *board* in place."""
    if record.is_en_passant and record.en_passant_square is not None:
        board[record.en_passant_square] = None
    board.move_piece(record.from_sq, record.to_sq)
    if record.castling is not None:
        rook_from, rook_to = castling_rook_squares(record.color, record.castling)
        board.move_piece(rook_from, rook_to)


@dataclass
class MoveRecorder:
    """Owns the live board, side to move and append-only history of a session.

    Illegal attempts are rejected silently: selection is cleared and nothing
    else changes.  Navigation only moves a cursor; the board shown for a
    cursor is always re-derived from the starting position.
    """

    notation_mode: NotationMode = NotationMode.STANDARD
    board: Board = field(default_factory=Board.initial, init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    phase: RecorderPhase = field(default=RecorderPhase.EMPTY, init=False)
    selected_square: Square | None = field(default=None, init=False)
    cursor: int = field(default=0, init=False)
    _history: list[MoveRecord] = field(default_factory=list, init=False)
    # Mirrors the roster a replay of the notation list will see.
    _parser: MoveParser = field(default_factory=MoveParser, init=False, repr=False)

    # ── Lifecycle ────────────────────────────────────────────────────────

    def reset(self) -> None:
        """Abandon the session and start again from the initial position."""
        self.board = Board.initial()
        self.side_to_move = Color.WHITE
        self.cursor = 0
        self._history.clear()
        self._parser.reset()
        self.clear_selection()

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def history(self) -> tuple[MoveRecord, ...]:
        return tuple(self._history)

    @property
    def ply_count(self) -> int:
        return len(self._history)

    @property
    def last_move(self) -> MoveRecord | None:
        return self._history[-1] if self._history else None

    @property
    def is_at_live_end(self) -> bool:
        """Whether the cursor shows the latest position (moves allowed)."""
        return self.cursor == len(self._history)

    def notation_list(self) -> list[str]:
        return [record.notation for record in self._history]

    def is_valid_move(
        self,
        from_sq: Square,
        to_sq: Square,
        piece: Piece | None = None,
    ) -> bool:
        """Geometry legality on the live board, en passant included."""
        return Rules.is_valid_move(self.board, from_sq, to_sq, piece, self.last_move)

    def legal_destinations(self, square: Square) -> list[Square]:
        """Where the side to move's piece on *square* may go.

        Castling targets are included for a king on its home square.
        """
        piece = self.board[square]
        if piece is None or piece.color != self.side_to_move or not self.is_at_live_end:
            return []
        targets = Rules.valid_destinations(self.board, square, self.last_move)
        if piece.piece_type == PieceType.KING:
            for side in CastleSide:
                king_from, king_to = castling_king_squares(piece.color, side)
                if square == king_from and Rules.can_castle(
                    self.board, piece.color, side
                ):
                    targets.append(king_to)
        return targets

    # ── Selection ────────────────────────────────────────────────────────

    def select(self, square: Square) -> bool:
        """Select the side to move's piece on *square*; otherwise deselect."""
        piece = self.board[square]
        if piece is None or piece.color != self.side_to_move or not self.is_at_live_end:
            self.clear_selection()
            return False
        self.selected_square = square
        self.phase = RecorderPhase.SOURCE_SELECTED
        return True

    def clear_selection(self) -> None:
        self.selected_square = None
        self.phase = RecorderPhase.EMPTY

    def move_selected_to(self, square: Square) -> MoveRecord | None:
        """Complete a click-click gesture from the current selection."""
        if self.selected_square is None:
            return None
        return self.try_move(self.selected_square, square)

    # ── Move application ─────────────────────────────────────────────────

    def try_move(self, from_sq: Square, to_sq: Square) -> MoveRecord | None:
        """Apply *from_sq* → *to_sq* if legal; return the new record.

        A king sliding two files along its home rank is treated as castling.
        """
        piece = self.board[from_sq]
        record: MoveRecord | None = None
        if (
            piece is not None
            and piece.color == self.side_to_move
            and self.is_at_live_end
        ):
            side = self._castling_gesture(piece, from_sq, to_sq)
            if side is not None:
                record = self.castle(side)
            elif self.is_valid_move(from_sq, to_sq, piece):
                record = self._apply(from_sq, to_sq, piece)

        if record is None:
            _LOGGER.debug(
                "Rejected %s%s for %s",
                square_name(from_sq),
                square_name(to_sq),
                self.side_to_move,
            )
        self.clear_selection()
        return record

    def castle(self, side: CastleSide) -> MoveRecord | None:
        """Castle the side to move; ``None`` when king/rook/path forbid it."""
        color = self.side_to_move
        if not self.is_at_live_end or not Rules.can_castle(self.board, color, side):
            self.clear_selection()
            return None

        king_from, king_to = castling_king_squares(color, side)
        rook_from, rook_to = castling_rook_squares(color, side)
        self.board.move_piece(king_from, king_to)
        self.board.move_piece(rook_from, rook_to)

        record = MoveRecord(
            move_number=self._next_move_number(),
            color=color,
            from_sq=king_from,
            to_sq=king_to,
            piece_type=PieceType.KING,
            notation=castling_notation(side),
            castling=side,
        )
        self._append(record)
        return record

    def _castling_gesture(
        self, piece: Piece, from_sq: Square, to_sq: Square
    ) -> CastleSide | None:
        if piece.piece_type != PieceType.KING:
            return None
        for side in CastleSide:
            if (from_sq, to_sq) == castling_king_squares(piece.color, side):
                return side
        return None

    def _apply(self, from_sq: Square, to_sq: Square, piece: Piece) -> MoveRecord:
        last_move = self.last_move
        captured = self.board[to_sq]
        is_capture = captured is not None

        ep_square: Square | None = None
        if (
            piece.piece_type == PieceType.PAWN
            and not is_capture
            and file_of(from_sq) != file_of(to_sq)
        ):
            ep_square = Rules.en_passant_capture(from_sq, to_sq, last_move)
            if ep_square is not None:
                captured = self.board[ep_square]
        takes = is_capture or ep_square is not None

        candidates: list[Square] = []
        if piece.piece_type != PieceType.PAWN:
            candidates = Rules.candidate_sources(self.board, piece, to_sq, last_move)

        self.board.move_piece(from_sq, to_sq)
        if ep_square is not None:
            self.board[ep_square] = None

        notation = generate_notation(
            piece.piece_type,
            from_sq,
            to_sq,
            takes,
            candidates=candidates,
            mode=self.notation_mode,
        )
        if self.notation_mode == NotationMode.STANDARD and candidates:
            notation = self._replayable_notation(
                notation, piece, from_sq, to_sq, takes
            )
        record = MoveRecord(
            move_number=self._next_move_number(),
            color=piece.color,
            from_sq=from_sq,
            to_sq=to_sq,
            piece_type=piece.piece_type,
            notation=notation,
            is_capture=takes,
            is_en_passant=ep_square is not None,
            captured_piece=captured,
            en_passant_square=ep_square,
        )
        self._append(record)
        return record

    def _replayable_notation(
        self,
        notation: str,
        piece: Piece,
        from_sq: Square,
        to_sq: Square,
        is_capture: bool,
    ) -> str:
        """Widen the origin hint until replay resolves *notation* to *from_sq*.

        The replay parser tests candidates by geometry alone, so a rival
        that is blocked here may still look like the origin there.
        """
        white_to_move = piece.color == Color.WHITE
        options = [notation] + [
            piece_notation(piece.piece_type, hint, to_sq, is_capture)
            for hint in origin_hints(from_sq)
        ]
        for option in options:
            parsed = self._parser.parse_move(option, white_to_move=white_to_move)
            if (
                parsed.from_sq == from_sq
                and parsed.disambiguation == Disambiguation.RESOLVED
            ):
                return option
        _LOGGER.debug("No hint makes %s replay from %s", notation, square_name(from_sq))
        return options[-1]

    def _next_move_number(self) -> int:
        return len(self._history) // 2 + 1

    def _append(self, record: MoveRecord) -> None:
        self._history.append(record)
        white_to_move = record.color == Color.WHITE
        self._parser.apply(self._parser.parse_move(record.notation, white_to_move))
        self.cursor = len(self._history)
        self.side_to_move = self.side_to_move.opposite
        self.clear_selection()

    # ── Commentary ───────────────────────────────────────────────────────

    def set_commentary(self, ply: int, text: str) -> None:
        """Attach *text* to the move at 0-based *ply*."""
        if not 0 <= ply < len(self._history):
            raise IndexError(f"No move at ply {ply}")
        self._history[ply].commentary = text

    def current_commentary(self) -> str:
        """Commentary of the move the cursor rests on (empty at the start)."""
        if self.cursor == 0:
            return ""
        return self._history[self.cursor - 1].commentary

    # ── Navigation ───────────────────────────────────────────────────────

    def position_at(self, ply: int) -> Board:
        """Board after the first *ply* moves, replayed from the start."""
        if not 0 <= ply <= len(self._history):
            raise IndexError(f"Ply {ply} outside 0..{len(self._history)}")
        board = Board.initial()
        for record in self._history[:ply]:
            replay_record(board, record)
        return board

    @property
    def display_board(self) -> Board:
        """Board for the current cursor."""
        if self.is_at_live_end:
            return self.board.copy()
        return self.position_at(self.cursor)

    def go_to(self, ply: int) -> Board:
        board = self.position_at(ply)
        self.cursor = ply
        self.clear_selection()
        return board

    def first(self) -> Board:
        return self.go_to(0)

    def previous(self) -> Board:
        return self.go_to(max(0, self.cursor - 1))

    def next(self) -> Board:
        return self.go_to(min(len(self._history), self.cursor + 1))

    def last(self) -> Board:
        return self.go_to(len(self._history))

"""PieceRoster — per-color index of where each piece type stands.

The replay parser resolves origin squares from this index instead of a full
board.  King and queen are tracked as a single square; the other types as an
ordered list so that the first entry can serve as a fallback.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from blindfold.core.enums import Color, PieceType
from blindfold.core.piece import Piece
from blindfold.core.types import Square, make_square, square_name

if TYPE_CHECKING:
    from blindfold.core.board import Board
    from blindfold.core.move import ParsedMove

_LOGGER = logging.getLogger(__name__)

SINGLE_OCCUPANCY = frozenset({PieceType.KING, PieceType.QUEEN})

_HOME_FILES: dict[PieceType, tuple[int, ...]] = {
    PieceType.KING: (4,),
    PieceType.QUEEN: (3,),
    PieceType.ROOK: (0, 7),
    PieceType.BISHOP: (2, 5),
    PieceType.KNIGHT: (1, 6),
    PieceType.PAWN: tuple(range(8)),
}

_Entry = Square | list[Square] | None


def home_squares(color: Color, piece_type: PieceType) -> list[Square]:
    """Starting squares of *color*'s *piece_type*."""
    rank = color.pawn_start_rank if piece_type == PieceType.PAWN else color.home_rank
    return [make_square(f, rank) for f in _HOME_FILES[piece_type]]


class PieceRoster:
    """Mutable per-color map: piece type → square (K, Q) or squares (R, B, N, P)."""

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: dict[Color, dict[PieceType, _Entry]] = {
            color: {
                ptype: (None if ptype in SINGLE_OCCUPANCY else [])
                for ptype in PieceType
            }
            for color in Color
        }

    # -- Factories ------------------------------------------------------------

    @classmethod
    def initial(cls) -> PieceRoster:
        """Roster for the standard starting position."""
        roster = cls()
        for color in Color:
            for ptype in PieceType:
                squares = home_squares(color, ptype)
                if ptype in SINGLE_OCCUPANCY:
                    roster._entries[color][ptype] = squares[0]
                else:
                    roster._entries[color][ptype] = squares
        return roster

    @classmethod
    def from_board(cls, board: Board) -> PieceRoster:
        """Index an arbitrary board (first king/queen found wins)."""
        roster = cls()
        for sq, piece in board:
            entry = roster._entries[piece.color][piece.piece_type]
            if isinstance(entry, list):
                entry.append(sq)
            elif entry is None:
                roster._entries[piece.color][piece.piece_type] = sq
        return roster

    # -- Queries --------------------------------------------------------------

    def entry(self, color: Color, piece_type: PieceType) -> _Entry:
        """Raw entry: a square, a list of squares, or ``None``."""
        return self._entries[color][piece_type]

    def squares(self, color: Color, piece_type: PieceType) -> list[Square]:
        entry = self._entries[color][piece_type]
        if entry is None:
            return []
        if isinstance(entry, list):
            return list(entry)
        return [entry]

    def occupant(self, square: Square) -> Piece | None:
        """Piece the roster believes stands on *square*."""
        for color, by_type in self._entries.items():
            for ptype, entry in by_type.items():
                if entry == square or (isinstance(entry, list) and square in entry):
                    return Piece(color, ptype)
        return None

    # -- Mutation -------------------------------------------------------------

    def update(
        self,
        piece_type: PieceType,
        from_sq: Square,
        to_sq: Square,
        color: Color,
    ) -> None:
        """Relocate *color*'s *piece_type* from *from_sq* to *to_sq*.

        List entries are replaced in place; a missing origin leaves the list
        untouched.  Scalar entries are overwritten.
        """
        if from_sq == to_sq:
            return
        entry = self._entries[color][piece_type]
        if isinstance(entry, list):
            try:
                entry[entry.index(from_sq)] = to_sq
            except ValueError:
                _LOGGER.debug(
                    "No %s %s on %s to relocate",
                    color,
                    piece_type.name.lower(),
                    square_name(from_sq),
                )
        else:
            self._entries[color][piece_type] = to_sq

    def remove(self, square: Square) -> Piece | None:
        """Evict whichever piece is indexed at *square*; return it."""
        for color, by_type in self._entries.items():
            for ptype, entry in by_type.items():
                if isinstance(entry, list):
                    if square in entry:
                        entry.remove(square)
                        return Piece(color, ptype)
                elif entry == square:
                    by_type[ptype] = None
                    return Piece(color, ptype)
        return None

    def apply(self, move: ParsedMove) -> None:
        """Bring the roster in line with *move* having been played.

        Removes the captured piece (including en-passant victims), relocates
        the mover and, for castling, the rook.
        """
        captured = move.captured_square
        if captured is not None:
            occupant = self.occupant(captured)
            if occupant is not None and occupant.color != move.color:
                self.remove(captured)
        self.update(move.piece_type, move.from_sq, move.to_sq, move.color)
        rook_move = move.rook_move
        if rook_move is not None:
            self.update(PieceType.ROOK, rook_move[0], rook_move[1], move.color)

    def copy(self) -> PieceRoster:
        clone = PieceRoster()
        clone._entries = {
            color: {
                ptype: (list(entry) if isinstance(entry, list) else entry)
                for ptype, entry in by_type.items()
            }
            for color, by_type in self._entries.items()
        }
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PieceRoster):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        parts: list[str] = []
        for color in Color:
            for ptype in PieceType:
                names = ",".join(square_name(sq) for sq in self.squares(color, ptype))
                if names:
                    parts.append(f"{Piece(color, ptype)}:{names}")
        return f"PieceRoster({' '.join(parts)})"

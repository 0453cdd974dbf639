"""Move value objects: authored history records and replay-parser results."""

from __future__ import annotations

from dataclasses import dataclass

from blindfold.core.enums import CastleSide, Color, Disambiguation, PieceType
from blindfold.core.piece import Piece
from blindfold.core.types import Square, file_of, make_square, rank_of, square_name

_KING_TARGET_FILE: dict[CastleSide, int] = {
    CastleSide.KINGSIDE: 6,
    CastleSide.QUEENSIDE: 2,
}
_ROOK_FILES: dict[CastleSide, tuple[int, int]] = {
    CastleSide.KINGSIDE: (7, 5),
    CastleSide.QUEENSIDE: (0, 3),
}


def castling_king_squares(color: Color, side: CastleSide) -> tuple[Square, Square]:
    """King origin/destination for castling, e.g. e1→g1."""
    rank = color.home_rank
    return make_square(4, rank), make_square(_KING_TARGET_FILE[side], rank)


def castling_rook_squares(color: Color, side: CastleSide) -> tuple[Square, Square]:
    """Rook origin/destination for castling, e.g. h1→f1."""
    rank = color.home_rank
    rook_from, rook_to = _ROOK_FILES[side]
    return make_square(rook_from, rank), make_square(rook_to, rank)


@dataclass(slots=True)
class MoveRecord:
    """A single authored move in the recorder history.

    Everything except ``commentary`` is fixed once the record is appended.
    """

    move_number: int
    color: Color
    from_sq: Square
    to_sq: Square
    piece_type: PieceType
    notation: str
    is_capture: bool = False
    is_en_passant: bool = False
    castling: CastleSide | None = None
    captured_piece: Piece | None = None
    en_passant_square: Square | None = None
    commentary: str = ""

    @property
    def piece(self) -> Piece:
        return Piece(self.color, self.piece_type)

    @property
    def is_castling(self) -> bool:
        return self.castling is not None

    @property
    def is_double_pawn_step(self) -> bool:
        return (
            self.piece_type == PieceType.PAWN
            and abs(rank_of(self.to_sq) - rank_of(self.from_sq)) == 2
            and file_of(self.to_sq) == file_of(self.from_sq)
        )

    @property
    def description(self) -> str:
        """Readable summary, e.g. ``"Q from h5 to f7 (captures p)"``."""
        origin, target = square_name(self.from_sq), square_name(self.to_sq)
        text = f"{self.piece} from {origin} to {target}"
        if self.is_capture and self.captured_piece is not None:
            if self.is_en_passant and self.en_passant_square is not None:
                text += (
                    f" (en passant captures {self.captured_piece}"
                    f" on {square_name(self.en_passant_square)})"
                )
            else:
                text += f" (captures {self.captured_piece})"
        if self.commentary.strip():
            text += f" - {self.commentary.strip()}"
        return text


@dataclass(frozen=True, slots=True)
class ParsedMove:
    """A notation token resolved against the replay roster.

    Carries everything a :class:`MoveRecord` does except the move number and
    commentary, which the caller knows from context.
    """

    piece_type: PieceType
    color: Color
    from_sq: Square
    to_sq: Square
    notation: str
    is_capture: bool = False
    is_en_passant: bool = False
    castling: CastleSide | None = None
    en_passant_square: Square | None = None
    captured_piece: Piece | None = None
    disambiguation: Disambiguation = Disambiguation.RESOLVED

    @property
    def is_castling(self) -> bool:
        return self.castling is not None

    @property
    def captured_square(self) -> Square | None:
        """Square whose occupant is removed by this move, if any."""
        if self.is_en_passant:
            return self.en_passant_square
        if self.is_capture:
            return self.to_sq
        return None

    @property
    def rook_move(self) -> tuple[Square, Square] | None:
        """Implied rook relocation for castling moves."""
        if self.castling is None:
            return None
        return castling_rook_squares(self.color, self.castling)

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"

"""Piece value object and its letter / glyph forms."""

from __future__ import annotations

from dataclasses import dataclass

from blindfold.core.enums import Color, PieceType

# Letters as they appear in stored boards and move descriptions; case is color.
_LETTER: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_TYPE_BY_LETTER: dict[str, PieceType] = {v: k for k, v in _LETTER.items()}

# Offsets into the Unicode chess block (U+2654 white king .. U+265F black pawn).
_GLYPH_BASE = 0x2654
_GLYPH_OFFSET: dict[PieceType, int] = {
    PieceType.KING: 0,
    PieceType.QUEEN: 1,
    PieceType.ROOK: 2,
    PieceType.BISHOP: 3,
    PieceType.KNIGHT: 4,
    PieceType.PAWN: 5,
}


@dataclass(frozen=True, slots=True)
class Piece:
    """A colored piece; equal pieces are interchangeable."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """``"N"`` for a white knight, ``"n"`` for a black one."""
        letter = _LETTER[self.piece_type]
        return letter if self.color == Color.WHITE else letter.lower()

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Inverse of ``str(piece)``; raises ``ValueError`` for other input."""
        piece_type = _TYPE_BY_LETTER.get(char.upper()) if len(char) == 1 else None
        if piece_type is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, piece_type)

    @property
    def symbol(self) -> str:
        """Unicode glyph, e.g. ``♞`` for a black knight."""
        offset = _GLYPH_OFFSET[self.piece_type]
        if self.color == Color.BLACK:
            offset += 6
        return chr(_GLYPH_BASE + offset)

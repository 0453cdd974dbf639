"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import Enum, IntEnum, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Rank direction pawns of this color advance in (+1 or -1)."""
        return 1 if self == Color.WHITE else -1

    @property
    def pawn_start_rank(self) -> int:
        return 1 if self == Color.WHITE else 6

    @property
    def home_rank(self) -> int:
        return 0 if self == Color.WHITE else 7

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def letter(self) -> str:
        """Uppercase SAN/FEN letter, e.g. ``N`` for a knight."""
        return _TYPE_LETTERS[self]


_TYPE_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}


class CastleSide(Enum):
    """Which wing the king castles towards."""

    KINGSIDE = "kingside"
    QUEENSIDE = "queenside"


class Disambiguation(IntEnum):
    """How the replay parser settled on an origin square."""

    RESOLVED = auto()  # exactly one candidate qualified
    FALLBACK = auto()  # nothing qualified; first roster entry used
    AMBIGUOUS = auto()  # several qualified; first one used


class NotationMode(Enum):
    """Notation style produced for authored moves."""

    STANDARD = "standard"  # adds file/rank disambiguators when needed
    COMPATIBLE = "compatible"  # never disambiguates (legacy stored games)

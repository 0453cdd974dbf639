"""Notation package: SAN-like generation, replay parsing, PGN export."""

from blindfold.core.notation.models import PgnMove
from blindfold.core.notation.parser import MoveParser
from blindfold.core.notation.pgn import (
    build_pgn,
    pgn_movetext_from_moves,
    pgn_result_token,
)
from blindfold.core.notation.san import (
    castling_notation,
    castling_side,
    disambiguator,
    generate_notation,
    origin_hints,
    piece_notation,
    strip_suffixes,
)

__all__ = [
    "MoveParser",
    "PgnMove",
    "build_pgn",
    "castling_notation",
    "castling_side",
    "disambiguator",
    "generate_notation",
    "origin_hints",
    "pgn_movetext_from_moves",
    "pgn_result_token",
    "piece_notation",
    "strip_suffixes",
]

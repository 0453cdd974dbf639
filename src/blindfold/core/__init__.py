"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from blindfold.core import Board, MoveParser

    parser = MoveParser()
    move = parser.parse_move("Nf3", white_to_move=True)
    parser.apply(move)
"""

from blindfold.core.board import Board
from blindfold.core.enums import (
    CastleSide,
    Color,
    Disambiguation,
    NotationMode,
    PieceType,
)
from blindfold.core.move import MoveRecord, ParsedMove
from blindfold.core.notation import MoveParser, generate_notation, strip_suffixes
from blindfold.core.piece import Piece
from blindfold.core.roster import PieceRoster
from blindfold.core.rules import Rules
from blindfold.core.types import (
    Square,
    coords_to_square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
    square_to_coords,
)

__all__ = [
    # Enums
    "CastleSide",
    "Color",
    "Disambiguation",
    "NotationMode",
    "PieceType",
    # Types / helpers
    "Square",
    "coords_to_square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    "square_to_coords",
    # Domain objects
    "Board",
    "MoveRecord",
    "ParsedMove",
    "Piece",
    "PieceRoster",
    "Rules",
    # Notation
    "MoveParser",
    "generate_notation",
    "strip_suffixes",
]

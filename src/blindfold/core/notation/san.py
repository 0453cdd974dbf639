"""SAN-like notation generation for authored moves."""

from __future__ import annotations

from collections.abc import Iterable

from blindfold.core.enums import CastleSide, NotationMode, PieceType
from blindfold.core.types import Square, file_letter, file_of, rank_of, square_name

_SAN_PIECE: dict[PieceType, str] = {
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
SAN_PIECE_REV: dict[str, PieceType] = {v: k for k, v in _SAN_PIECE.items()}

KINGSIDE_TOKENS = frozenset({"O-O", "0-0"})
QUEENSIDE_TOKENS = frozenset({"O-O-O", "0-0-0"})

_SUFFIX_CHARS = "+#!?"


def strip_suffixes(token: str) -> str:
    """Drop check/mate markers and annotation glyphs, e.g. ``Qh4#`` → ``Qh4``."""
    return token.strip().rstrip(_SUFFIX_CHARS)


def castling_side(token: str) -> CastleSide | None:
    """Castling side named by *token*, or ``None`` for ordinary moves."""
    clean = strip_suffixes(token)
    if clean in KINGSIDE_TOKENS:
        return CastleSide.KINGSIDE
    if clean in QUEENSIDE_TOKENS:
        return CastleSide.QUEENSIDE
    return None


def castling_notation(side: CastleSide) -> str:
    return "O-O" if side == CastleSide.KINGSIDE else "O-O-O"


def disambiguator(from_sq: Square, others: Iterable[Square]) -> str:
    """Minimal origin hint separating *from_sq* from *others*.

    File letter when it is unique, else rank digit, else the full square.
    """
    rivals = [sq for sq in others if sq != from_sq]
    if not rivals:
        return ""
    if all(file_of(sq) != file_of(from_sq) for sq in rivals):
        return file_letter(from_sq)
    if all(rank_of(sq) != rank_of(from_sq) for sq in rivals):
        return str(rank_of(from_sq) + 1)
    return square_name(from_sq)


def generate_notation(
    piece_type: PieceType,
    from_sq: Square,
    to_sq: Square,
    is_capture: bool,
    *,
    candidates: Iterable[Square] = (),
    mode: NotationMode = NotationMode.STANDARD,
) -> str:
    """Notation for an authored move.

    *candidates* are the origin squares of every same-type, same-color piece
    that could also reach *to_sq* (the mover's own square may be included).
    En-passant captures pass ``is_capture=True``.
    """
    target = square_name(to_sq)
    if piece_type == PieceType.PAWN:
        if is_capture:
            return f"{file_letter(from_sq)}x{target}"
        return target

    hint = disambiguator(from_sq, candidates) if mode == NotationMode.STANDARD else ""
    return piece_notation(piece_type, hint, to_sq, is_capture)


def piece_notation(
    piece_type: PieceType, hint: str, to_sq: Square, is_capture: bool
) -> str:
    """Piece move with an explicit origin *hint*, e.g. ``R1a3`` or ``Nbxd7``."""
    san = _SAN_PIECE[piece_type] + hint
    if is_capture:
        san += "x"
    return san + square_name(to_sq)


def origin_hints(from_sq: Square) -> tuple[str, str, str]:
    """File, rank and full-square hints for *from_sq*, shortest first."""
    return file_letter(from_sq), str(rank_of(from_sq) + 1), square_name(from_sq)

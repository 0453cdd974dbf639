"""Replay-time move parser: notation token → resolved move.

The parser keeps a :class:`PieceRoster` for the game being replayed and uses
it to work out which piece a token refers to.  It is best-effort: it never
raises, and reports how confident the origin square is through
:class:`Disambiguation`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from blindfold.core.enums import CastleSide, Color, Disambiguation, PieceType
from blindfold.core.move import ParsedMove, castling_king_squares
from blindfold.core.notation.san import SAN_PIECE_REV, castling_side, strip_suffixes
from blindfold.core.piece import Piece
from blindfold.core.roster import PieceRoster, home_squares
from blindfold.core.types import (
    Square,
    file_of,
    is_on_board,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

_LOGGER = logging.getLogger(__name__)

_FILES = "abcdefgh"
_RANKS = "12345678"

# Same-rank rook moves only count as reachable below this file distance.
_ROOK_RANK_REACH = 4


def _deltas(from_sq: Square, to_sq: Square) -> tuple[int, int]:
    df = abs(file_of(to_sq) - file_of(from_sq))
    dr = abs(rank_of(to_sq) - rank_of(from_sq))
    return df, dr


def can_bishop_reach(from_sq: Square, to_sq: Square) -> bool:
    df, dr = _deltas(from_sq, to_sq)
    return df == dr and df > 0


def can_knight_reach(from_sq: Square, to_sq: Square) -> bool:
    return _deltas(from_sq, to_sq) in ((2, 1), (1, 2))


def can_rook_reach(from_sq: Square, to_sq: Square) -> bool:
    df, dr = _deltas(from_sq, to_sq)
    if df == 0 and dr > 0:
        return True
    if dr == 0 and df > 0:
        return df < _ROOK_RANK_REACH
    return False


_REACH: dict[PieceType, Callable[[Square, Square], bool]] = {
    PieceType.BISHOP: can_bishop_reach,
    PieceType.KNIGHT: can_knight_reach,
    PieceType.ROOK: can_rook_reach,
}


def _safe_square(name: str) -> Square | None:
    try:
        return parse_square(name)
    except ValueError:
        return None


class MoveParser:
    """Translates notation tokens into moves, one game at a time.

    The parser does not update its roster on its own: call :meth:`apply`
    (or :meth:`update_piece_position` / :meth:`remove_piece`) once the move has
    been played.
    """

    __slots__ = ("roster",)

    def __init__(self, roster: PieceRoster | None = None) -> None:
        self.roster = roster if roster is not None else PieceRoster.initial()

    # ── Public API ───────────────────────────────────────────────────────

    def parse_move(self, token: str, white_to_move: bool) -> ParsedMove:
        """Resolve *token* for the side to move."""
        color = Color.WHITE if white_to_move else Color.BLACK
        clean = strip_suffixes(token)

        side = castling_side(clean)
        if side is not None:
            return self._parse_castling(clean, color, side)

        if not clean or clean[0] not in SAN_PIECE_REV:
            return self._parse_pawn_move(clean, color)
        return self._parse_piece_move(clean, color)

    def update_piece_position(
        self,
        piece_type: PieceType,
        from_sq: Square,
        to_sq: Square,
        color: Color,
    ) -> None:
        self.roster.update(piece_type, from_sq, to_sq, color)

    def remove_piece(self, square: Square) -> Piece | None:
        return self.roster.remove(square)

    def apply(self, move: ParsedMove) -> None:
        """Record that *move* has been played."""
        self.roster.apply(move)

    def reset(self) -> None:
        self.roster = PieceRoster.initial()

    # ── Castling ─────────────────────────────────────────────────────────

    @staticmethod
    def _parse_castling(clean: str, color: Color, side: CastleSide) -> ParsedMove:
        king_from, king_to = castling_king_squares(color, side)
        return ParsedMove(
            piece_type=PieceType.KING,
            color=color,
            from_sq=king_from,
            to_sq=king_to,
            notation=clean,
            castling=side,
        )

    # ── Pawns ────────────────────────────────────────────────────────────

    def _parse_pawn_move(self, clean: str, color: Color) -> ParsedMove:
        is_capture = "x" in clean
        if is_capture:
            source_file, _, target_name = clean.partition("x")
        else:
            source_file, target_name = "", clean

        to_sq = _safe_square(target_name[-2:])
        if to_sq is None:
            return self._fallback(PieceType.PAWN, color, clean, is_capture)

        if is_capture:
            return self._parse_pawn_capture(clean, source_file, to_sq, color)

        from_sq = self._pawn_push_source(to_sq, color)
        return ParsedMove(
            piece_type=PieceType.PAWN,
            color=color,
            from_sq=from_sq,
            to_sq=to_sq,
            notation=clean,
        )

    def _pawn_push_source(self, to_sq: Square, color: Color) -> Square:
        direction = color.forward
        file = file_of(to_sq)
        one_back = rank_of(to_sq) - direction
        if not is_on_board(file, one_back):
            return make_square(file, color.pawn_start_rank)

        one_step = make_square(file, one_back)
        double_step_rank = color.pawn_start_rank + 2 * direction
        if rank_of(to_sq) == double_step_rank:
            pawn = Piece(color, PieceType.PAWN)
            if self.roster.occupant(one_step) != pawn:
                return make_square(file, color.pawn_start_rank)
        return one_step

    def _parse_pawn_capture(
        self,
        clean: str,
        source_file: str,
        to_sq: Square,
        color: Color,
    ) -> ParsedMove:
        from_rank = rank_of(to_sq) - color.forward
        file = source_file[-1:] if source_file else ""
        if not file or file not in _FILES or not 0 <= from_rank < 8:
            return self._fallback(PieceType.PAWN, color, clean, True, to_sq)
        from_sq = make_square(_FILES.index(file), from_rank)

        occupant = self.roster.occupant(to_sq)
        enemy_on_target = occupant is not None and occupant.color != color
        en_passant_rank = 4 if color == Color.WHITE else 3
        is_en_passant = rank_of(from_sq) == en_passant_rank and not enemy_on_target
        ep_square = make_square(file_of(to_sq), from_rank) if is_en_passant else None
        captured_sq = to_sq if ep_square is None else ep_square
        captured = self.roster.occupant(captured_sq)
        if captured is not None and captured.color == color:
            captured = None

        return ParsedMove(
            piece_type=PieceType.PAWN,
            color=color,
            from_sq=from_sq,
            to_sq=to_sq,
            notation=clean,
            is_capture=True,
            is_en_passant=is_en_passant,
            en_passant_square=ep_square,
            captured_piece=captured,
        )

    # ── Pieces ───────────────────────────────────────────────────────────

    def _parse_piece_move(self, clean: str, color: Color) -> ParsedMove:
        piece_type = SAN_PIECE_REV[clean[0]]
        is_capture = "x" in clean
        to_sq = _safe_square(clean[-2:])
        if to_sq is None:
            return self._fallback(piece_type, color, clean, is_capture)

        hint = clean[1:-2].replace("x", "")
        if piece_type in (PieceType.KING, PieceType.QUEEN) and not hint:
            from_sq, how = self._single_source(piece_type, to_sq, color)
        else:
            from_sq, how = self._multi_source(piece_type, to_sq, color, hint)

        captured = self.roster.occupant(to_sq) if is_capture else None
        if captured is not None and captured.color == color:
            captured = None

        if how != Disambiguation.RESOLVED:
            _LOGGER.debug(
                "%s: origin %s chosen by %s", clean, square_name(from_sq), how.name
            )
        return ParsedMove(
            piece_type=piece_type,
            color=color,
            from_sq=from_sq,
            to_sq=to_sq,
            notation=clean,
            is_capture=is_capture,
            captured_piece=captured,
            disambiguation=how,
        )

    def _single_source(
        self, piece_type: PieceType, to_sq: Square, color: Color
    ) -> tuple[Square, Disambiguation]:
        entry = self.roster.entry(color, piece_type)
        home = home_squares(color, piece_type)[0]
        if entry is None:
            return home, Disambiguation.FALLBACK
        if entry == to_sq:
            # Tracking is out of sync; assume the piece is still at home.
            return home, Disambiguation.FALLBACK
        return entry, Disambiguation.RESOLVED

    def _multi_source(
        self,
        piece_type: PieceType,
        to_sq: Square,
        color: Color,
        hint: str,
    ) -> tuple[Square, Disambiguation]:
        positions = self.roster.squares(color, piece_type)
        if not positions:
            return home_squares(color, piece_type)[0], Disambiguation.FALLBACK

        hinted = [sq for sq in positions if self._matches_hint(sq, hint)]
        if hint and len(hinted) == 1:
            return hinted[0], Disambiguation.RESOLVED
        pool = hinted if hinted else positions

        reach = _REACH.get(piece_type)
        if reach is None:
            # Kings and queens only get here through an explicit hint.
            matches = pool
        else:
            matches = [sq for sq in pool if reach(sq, to_sq)]
        if len(matches) == 1:
            return matches[0], Disambiguation.RESOLVED
        if matches:
            return matches[0], Disambiguation.AMBIGUOUS
        return pool[0], Disambiguation.FALLBACK

    @staticmethod
    def _matches_hint(sq: Square, hint: str) -> bool:
        for ch in hint:
            if ch in _FILES and file_of(sq) != _FILES.index(ch):
                return False
            if ch in _RANKS and rank_of(sq) != _RANKS.index(ch):
                return False
        return True

    # ── Fallback ─────────────────────────────────────────────────────────

    def _fallback(
        self,
        piece_type: PieceType,
        color: Color,
        clean: str,
        is_capture: bool,
        to_sq: Square | None = None,
    ) -> ParsedMove:
        """Plausible-looking result for tokens that could not be parsed."""
        squares = self.roster.squares(color, piece_type) or home_squares(
            color, piece_type
        )
        from_sq = squares[0]
        _LOGGER.debug(
            "Unparseable token %r; falling back to %s", clean, square_name(from_sq)
        )
        return ParsedMove(
            piece_type=piece_type,
            color=color,
            from_sq=from_sq,
            to_sq=from_sq if to_sq is None else to_sq,
            notation=clean,
            is_capture=is_capture,
            disambiguation=Disambiguation.FALLBACK,
        )

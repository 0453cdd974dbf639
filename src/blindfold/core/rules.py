"""Piece-movement geometry used when authoring a game.

Only movement shape, path blocking, turn-independent capture rules and the
en-passant precondition are checked here.  Whether a move leaves the king in
check is deliberately not modelled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from blindfold.core.enums import CastleSide, Color, PieceType
from blindfold.core.move import castling_king_squares, castling_rook_squares
from blindfold.core.piece import Piece
from blindfold.core.types import Square, file_of, make_square, rank_of

if TYPE_CHECKING:
    from blindfold.core.board import Board
    from blindfold.core.move import MoveRecord


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def is_path_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
        """Whether every square strictly between the endpoints is empty.

        The endpoints must share a rank, file or diagonal.
        """
        df = _sign(file_of(to_sq) - file_of(from_sq))
        dr = _sign(rank_of(to_sq) - rank_of(from_sq))
        f, r = file_of(from_sq) + df, rank_of(from_sq) + dr
        while (f, r) != (file_of(to_sq), rank_of(to_sq)):
            if not board.is_empty(make_square(f, r)):
                return False
            f += df
            r += dr
        return True

    @staticmethod
    def en_passant_capture(
        from_sq: Square,
        to_sq: Square,
        last_move: MoveRecord | None,
    ) -> Square | None:
        """Square of the pawn taken en passant by *from_sq* → *to_sq*, if any.

        Requires the previous move to be a two-rank pawn advance on one file,
        the capturing pawn to stand beside that pawn's destination, and the
        move to land on the square the pawn passed over.
        """
        if last_move is None or not last_move.is_double_pawn_step:
            return None
        if abs(rank_of(to_sq) - rank_of(from_sq)) != 1:
            return None
        if abs(file_of(to_sq) - file_of(from_sq)) != 1:
            return None

        victim = last_move.to_sq
        if rank_of(victim) != rank_of(from_sq):
            return None
        if abs(file_of(victim) - file_of(from_sq)) != 1:
            return None

        passed_rank = (rank_of(last_move.from_sq) + rank_of(victim)) // 2
        if to_sq != make_square(file_of(victim), passed_rank):
            return None
        return victim

    @staticmethod
    def is_valid_move(
        board: Board,
        from_sq: Square,
        to_sq: Square,
        piece: Piece | None = None,
        last_move: MoveRecord | None = None,
    ) -> bool:
        """Movement-geometry legality of *piece* going *from_sq* → *to_sq*.

        *piece* defaults to the occupant of *from_sq*.  Castling is not a
        king move here; see :meth:`can_castle`.
        """
        if piece is None:
            piece = board[from_sq]
        if piece is None or from_sq == to_sq:
            return False

        target = board[to_sq]
        if target is not None and target.color == piece.color:
            return False

        df = file_of(to_sq) - file_of(from_sq)
        dr = rank_of(to_sq) - rank_of(from_sq)
        adf, adr = abs(df), abs(dr)
        ptype = piece.piece_type

        if ptype == PieceType.PAWN:
            return Rules._is_valid_pawn_move(
                board, from_sq, to_sq, piece.color, last_move
            )
        if ptype == PieceType.KNIGHT:
            return (adf, adr) in ((2, 1), (1, 2))
        if ptype == PieceType.KING:
            return adf <= 1 and adr <= 1

        diagonal = adf == adr and adf > 0
        straight = (adf == 0) != (adr == 0)
        if ptype == PieceType.BISHOP:
            shape_ok = diagonal
        elif ptype == PieceType.ROOK:
            shape_ok = straight
        else:  # queen
            shape_ok = diagonal or straight
        return shape_ok and Rules.is_path_clear(board, from_sq, to_sq)

    @staticmethod
    def _is_valid_pawn_move(
        board: Board,
        from_sq: Square,
        to_sq: Square,
        color: Color,
        last_move: MoveRecord | None,
    ) -> bool:
        direction = color.forward
        df = file_of(to_sq) - file_of(from_sq)
        dr = rank_of(to_sq) - rank_of(from_sq)
        occupied = not board.is_empty(to_sq)

        if df == 0:
            if occupied:
                return False
            if dr == direction:
                return True
            if dr == 2 * direction and rank_of(from_sq) == color.pawn_start_rank:
                middle = make_square(file_of(from_sq), rank_of(from_sq) + direction)
                return board.is_empty(middle)
            return False

        if abs(df) == 1 and dr == direction:
            if occupied:
                return True
            return Rules.en_passant_capture(from_sq, to_sq, last_move) is not None

        return False

    @staticmethod
    def valid_destinations(
        board: Board,
        from_sq: Square,
        last_move: MoveRecord | None = None,
    ) -> list[Square]:
        """All squares the occupant of *from_sq* may move to."""
        piece = board[from_sq]
        if piece is None:
            return []
        return [
            sq
            for sq in range(64)
            if Rules.is_valid_move(board, from_sq, sq, piece, last_move)
        ]

    @staticmethod
    def candidate_sources(
        board: Board,
        piece: Piece,
        to_sq: Square,
        last_move: MoveRecord | None = None,
    ) -> list[Square]:
        """Squares holding *piece* that could legally move to *to_sq*."""
        return [
            sq
            for sq in board.pieces(piece.color, piece.piece_type)
            if Rules.is_valid_move(board, sq, to_sq, piece, last_move)
        ]

    @staticmethod
    def can_castle(board: Board, color: Color, side: CastleSide) -> bool:
        """King and rook on their home squares with nothing between them.

        Attacked squares are not considered.
        """
        king_from, _ = castling_king_squares(color, side)
        rook_from, _ = castling_rook_squares(color, side)
        if board[king_from] != Piece(color, PieceType.KING):
            return False
        if board[rook_from] != Piece(color, PieceType.ROOK):
            return False
        return Rules.is_path_clear(board, king_from, rook_from)

"""Replay of a stored game from its notation list."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from blindfold.core.board import Board
from blindfold.core.enums import Disambiguation
from blindfold.core.move import ParsedMove
from blindfold.core.notation.parser import MoveParser

if TYPE_CHECKING:
    from blindfold.storage.records import GameRecord

_LOGGER = logging.getLogger(__name__)


def apply_parsed_move(board: Board, move: ParsedMove) -> None:
    """Play a parsed move onto *board* in place (rook included for castling)."""
    if move.is_en_passant and move.en_passant_square is not None:
        board[move.en_passant_square] = None
    if board[move.from_sq] is None or move.from_sq == move.to_sq:
        _LOGGER.debug("Replay of %s leaves the board unchanged", move.notation)
        return
    board.move_piece(move.from_sq, move.to_sq)
    rook_move = move.rook_move
    if rook_move is not None:
        board.move_piece(*rook_move)


class GameReplay:
    """Parses a whole notation list once and steps through it by cursor."""

    __slots__ = ("_notations", "_moves", "_boards", "cursor")

    def __init__(self, notations: Sequence[str]) -> None:
        self._notations = list(notations)
        self._moves: list[ParsedMove] = []
        self._boards: list[Board] = [Board.initial()]
        self.cursor = 0

        parser = MoveParser()
        board = Board.initial()
        for ply, token in enumerate(self._notations):
            move = parser.parse_move(token, white_to_move=ply % 2 == 0)
            parser.apply(move)
            apply_parsed_move(board, move)
            self._moves.append(move)
            self._boards.append(board.copy())

        if self.fallbacks:
            _LOGGER.info(
                "Replay resolved %d of %d moves by fallback",
                len(self.fallbacks),
                len(self._moves),
            )

    @classmethod
    def from_record(cls, record: GameRecord) -> GameReplay:
        return cls(record.moves_notation)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def moves(self) -> list[ParsedMove]:
        return list(self._moves)

    @property
    def ply_count(self) -> int:
        return len(self._moves)

    @property
    def fallbacks(self) -> list[int]:
        """Plies whose origin square was not uniquely resolved."""
        return [
            ply
            for ply, move in enumerate(self._moves)
            if move.disambiguation != Disambiguation.RESOLVED
        ]

    @property
    def current_move(self) -> ParsedMove | None:
        """Move that produced the position at the cursor."""
        if self.cursor == 0:
            return None
        return self._moves[self.cursor - 1]

    def position_at(self, ply: int) -> Board:
        if not 0 <= ply <= len(self._moves):
            raise IndexError(f"Ply {ply} outside 0..{len(self._moves)}")
        return self._boards[ply].copy()

    @property
    def board(self) -> Board:
        return self.position_at(self.cursor)

    # ── Navigation ───────────────────────────────────────────────────────

    def go_to(self, ply: int) -> Board:
        board = self.position_at(ply)
        self.cursor = ply
        return board

    def first(self) -> Board:
        return self.go_to(0)

    def previous(self) -> Board:
        return self.go_to(max(0, self.cursor - 1))

    def next(self) -> Board:
        return self.go_to(min(len(self._moves), self.cursor + 1))

    def last(self) -> Board:
        return self.go_to(len(self._moves))

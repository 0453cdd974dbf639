"""Tests for GameReplay and apply_parsed_move."""

import pytest

from blindfold.core.board import Board
from blindfold.core.enums import CastleSide, Color, Disambiguation, PieceType
from blindfold.core.move import ParsedMove
from blindfold.core.piece import Piece
from blindfold.core.types import parse_square as sq
from blindfold.game.replay import GameReplay, apply_parsed_move
from blindfold.storage.records import builtin_games

FOOLS_MATE = ["f3", "e5", "g4", "Qh4#"]


class TestReplay:
    def test_fools_mate(self) -> None:
        replay = GameReplay(FOOLS_MATE)
        assert replay.ply_count == 4
        assert replay.fallbacks == []
        assert replay.cursor == 0
        assert replay.board == Board.initial()

        final = replay.last()
        assert final[sq("h4")] == Piece(Color.BLACK, PieceType.QUEEN)
        assert final[sq("d8")] is None
        assert final[sq("g4")] == Piece(Color.WHITE, PieceType.PAWN)

    def test_builtin_games_replay_cleanly(self) -> None:
        for record in builtin_games():
            replay = GameReplay.from_record(record)
            assert replay.ply_count == record.moves
            assert replay.fallbacks == []

    def test_scholars_mate_capture(self) -> None:
        scholars = next(g for g in builtin_games() if g.id == "scholars-mate")
        replay = GameReplay.from_record(scholars)
        replay.last()
        mate = replay.current_move
        assert mate is not None
        assert mate.is_capture
        assert mate.from_sq == sq("h5")
        assert mate.captured_piece == Piece(Color.BLACK, PieceType.PAWN)

    def test_castling_moves_rook(self) -> None:
        replay = GameReplay(["e4", "e5", "Nf3", "Nc6", "Bc4", "Nf6", "O-O"])
        board = replay.last()
        assert board[sq("g1")] == Piece(Color.WHITE, PieceType.KING)
        assert board[sq("f1")] == Piece(Color.WHITE, PieceType.ROOK)
        assert board[sq("h1")] is None
        assert board[sq("e1")] is None
        assert replay.current_move is not None
        assert replay.current_move.castling == CastleSide.KINGSIDE

    def test_en_passant_removes_pawn(self) -> None:
        replay = GameReplay(["e4", "a6", "e5", "d5", "exd6"])
        board = replay.last()
        assert board[sq("d5")] is None
        assert board[sq("d6")] == Piece(Color.WHITE, PieceType.PAWN)

    def test_unresolved_tokens_are_reported(self) -> None:
        replay = GameReplay(["e4", "e5", "Zz9"])
        assert replay.ply_count == 3
        assert replay.fallbacks == [2]
        assert sum(1 for _ in replay.last()) == 32


class TestNavigation:
    def test_cursor_steps_and_clamps(self) -> None:
        replay = GameReplay(FOOLS_MATE)
        replay.previous()
        assert replay.cursor == 0
        assert replay.current_move is None

        replay.next()
        assert replay.cursor == 1
        assert replay.current_move is not None
        assert replay.current_move.to_sq == sq("f3")

        replay.last()
        replay.next()
        assert replay.cursor == 4

        assert replay.first() == Board.initial()

    def test_positions_are_independent_copies(self) -> None:
        replay = GameReplay(FOOLS_MATE)
        board = replay.go_to(2)
        board[sq("e1")] = None
        assert replay.position_at(2)[sq("e1")] == Piece(Color.WHITE, PieceType.KING)

    def test_position_out_of_range(self) -> None:
        replay = GameReplay(FOOLS_MATE)
        with pytest.raises(IndexError):
            replay.position_at(5)
        with pytest.raises(IndexError):
            replay.go_to(-1)
        assert replay.cursor == 0


class TestApplyParsedMove:
    def test_empty_origin_is_ignored(self) -> None:
        board = Board.initial()
        move = ParsedMove(
            piece_type=PieceType.KNIGHT,
            color=Color.WHITE,
            from_sq=sq("d4"),
            to_sq=sq("e6"),
            notation="Ne6",
            disambiguation=Disambiguation.FALLBACK,
        )
        apply_parsed_move(board, move)
        assert board == Board.initial()

    def test_queenside_castle(self) -> None:
        board = Board.from_mapping({"e8": "k", "a8": "r"})
        move = ParsedMove(
            piece_type=PieceType.KING,
            color=Color.BLACK,
            from_sq=sq("e8"),
            to_sq=sq("c8"),
            notation="O-O-O",
            castling=CastleSide.QUEENSIDE,
        )
        apply_parsed_move(board, move)
        assert board[sq("c8")] == Piece(Color.BLACK, PieceType.KING)
        assert board[sq("d8")] == Piece(Color.BLACK, PieceType.ROOK)

"""Tests for the interactive MoveRecorder session."""

from collections.abc import Callable

import pytest

from blindfold.core.board import Board
from blindfold.core.enums import CastleSide, Color, NotationMode, PieceType
from blindfold.core.move import MoveRecord
from blindfold.core.piece import Piece
from blindfold.core.types import parse_square as sq
from blindfold.game.recorder import MoveRecorder, RecorderPhase
from blindfold.game.replay import GameReplay

Play = Callable[..., list[MoveRecord]]

SCHOLARS_MATE = ("e2e4", "e7e5", "d1h5", "b8c6", "f1c4", "g8f6", "h5f7")
BLACK_QUEENSIDE_READY = (
    "e2e4", "d7d5", "g1f3", "c8g4", "f1e2", "b8c6", "a2a3", "d8d7", "h2h3",
)
# h1 rook is blocked from e1 but sits within replay reach of it.
BLOCKED_RANK_ROOK = (
    "b1a3", "a7a6", "d2d4", "a6a5", "c1f4", "b7b6",
    "d1d3", "b6b5", "e1d2", "h7h6", "a1e1",
)
# Two white rooks on the a-file with a pawn on a4 between them.
STACKED_FILE_ROOKS = (
    "h2h4", "g8h6", "h1h3", "h6g8", "h3a3", "g8h6",
    "a3a6", "h6g8", "a2a4", "g8h6", "a1a3",
)


class TestSelection:
    def test_initial_state(self, recorder: MoveRecorder) -> None:
        assert recorder.side_to_move == Color.WHITE
        assert recorder.phase == RecorderPhase.EMPTY
        assert recorder.history == ()
        assert recorder.cursor == 0
        assert recorder.board == Board.initial()

    def test_select_own_piece(self, recorder: MoveRecorder) -> None:
        assert recorder.select(sq("g1"))
        assert recorder.phase == RecorderPhase.SOURCE_SELECTED
        assert recorder.selected_square == sq("g1")

    def test_select_opponent_or_empty_clears(self, recorder: MoveRecorder) -> None:
        recorder.select(sq("g1"))
        assert not recorder.select(sq("g8"))
        assert recorder.phase == RecorderPhase.EMPTY
        assert not recorder.select(sq("e4"))
        assert recorder.selected_square is None

    def test_click_click_move(self, recorder: MoveRecorder) -> None:
        recorder.select(sq("g1"))
        record = recorder.move_selected_to(sq("f3"))
        assert record is not None
        assert record.notation == "Nf3"
        assert recorder.phase == RecorderPhase.EMPTY

    def test_legal_destinations(self, recorder: MoveRecorder) -> None:
        assert sorted(recorder.legal_destinations(sq("g1"))) == [sq("f3"), sq("h3")]
        assert recorder.legal_destinations(sq("g8")) == []


class TestMoveApplication:
    def test_first_move(self, recorder: MoveRecorder) -> None:
        record = recorder.try_move(sq("e2"), sq("e4"))
        assert record is not None
        assert record.notation == "e4"
        assert record.move_number == 1
        assert record.color == Color.WHITE
        assert record.piece_type == PieceType.PAWN
        assert recorder.side_to_move == Color.BLACK
        assert recorder.cursor == 1

    def test_move_numbers(self, recorder: MoveRecorder, play: Play) -> None:
        records = play(recorder, "e2e4", "e7e5", "g1f3")
        assert [r.move_number for r in records] == [1, 1, 2]
        assert recorder.notation_list() == ["e4", "e5", "Nf3"]

    def test_illegal_move_is_rejected_silently(self, recorder: MoveRecorder) -> None:
        recorder.select(sq("e2"))
        assert recorder.try_move(sq("e2"), sq("e5")) is None
        assert recorder.history == ()
        assert recorder.phase == RecorderPhase.EMPTY
        assert recorder.board == Board.initial()

    def test_wrong_side_rejected(self, recorder: MoveRecorder) -> None:
        assert recorder.try_move(sq("e7"), sq("e5")) is None
        assert recorder.side_to_move == Color.WHITE

    def test_blocked_path_rejected(self, recorder: MoveRecorder) -> None:
        assert recorder.try_move(sq("a1"), sq("a3")) is None
        assert recorder.try_move(sq("f1"), sq("c4")) is None

    def test_double_step_from_start_only(
        self, recorder: MoveRecorder, play: Play
    ) -> None:
        play(recorder, "e2e3", "a7a6")
        assert recorder.try_move(sq("e3"), sq("e5")) is None

    def test_capture(self, recorder: MoveRecorder, play: Play) -> None:
        *_, capture = play(recorder, "e2e4", "d7d5", "e4d5")
        assert capture.notation == "exd5"
        assert capture.is_capture
        assert capture.captured_piece == Piece(Color.BLACK, PieceType.PAWN)
        assert capture.description == "P from e4 to d5 (captures p)"

    def test_scholars_mate(self, recorder: MoveRecorder, play: Play) -> None:
        *_, mate = play(recorder, *SCHOLARS_MATE)
        assert mate.notation == "Qxf7"
        assert mate.is_capture
        assert not mate.is_en_passant
        assert str(mate.captured_piece) == "p"
        assert mate.description == "Q from h5 to f7 (captures p)"


class TestEnPassant:
    def test_capture_removes_passed_pawn(
        self, recorder: MoveRecorder, play: Play
    ) -> None:
        *_, ep = play(recorder, "e2e4", "a7a6", "e4e5", "d7d5", "e5d6")
        assert ep.is_en_passant
        assert ep.notation == "exd6"
        assert ep.en_passant_square == sq("d5")
        assert ep.captured_piece == Piece(Color.BLACK, PieceType.PAWN)
        assert recorder.board[sq("d5")] is None
        assert recorder.board[sq("d6")] == Piece(Color.WHITE, PieceType.PAWN)
        assert ep.description == "P from e5 to d6 (en passant captures p on d5)"

    def test_only_immediately_after_double_step(
        self, recorder: MoveRecorder, play: Play
    ) -> None:
        play(recorder, "e2e4", "a7a6", "e4e5", "d7d5", "h2h3", "h7h6")
        assert recorder.try_move(sq("e5"), sq("d6")) is None


class TestCastling:
    def test_king_drag_castles(self, recorder: MoveRecorder, play: Play) -> None:
        play(recorder, "e2e4", "e7e5", "g1f3", "b8c6", "f1c4", "g8f6")
        assert sq("g1") in recorder.legal_destinations(sq("e1"))

        record = recorder.try_move(sq("e1"), sq("g1"))
        assert record is not None
        assert record.notation == "O-O"
        assert record.castling == CastleSide.KINGSIDE
        assert recorder.board[sq("g1")] == Piece(Color.WHITE, PieceType.KING)
        assert recorder.board[sq("f1")] == Piece(Color.WHITE, PieceType.ROOK)
        assert recorder.board[sq("h1")] is None

    def test_castle_action_blocked(self, recorder: MoveRecorder) -> None:
        assert recorder.castle(CastleSide.KINGSIDE) is None
        assert recorder.history == ()

    def test_black_queenside(self, recorder: MoveRecorder, play: Play) -> None:
        play(recorder, *BLACK_QUEENSIDE_READY)
        record = recorder.castle(CastleSide.QUEENSIDE)
        assert record is not None
        assert record.notation == "O-O-O"
        assert recorder.board[sq("c8")] == Piece(Color.BLACK, PieceType.KING)
        assert recorder.board[sq("d8")] == Piece(Color.BLACK, PieceType.ROOK)


class TestNotationModes:
    def test_standard_disambiguates(self, recorder: MoveRecorder, play: Play) -> None:
        *_, knight = play(recorder, "g1f3", "a7a6", "d2d3", "a6a5", "b1d2")
        assert knight.notation == "Nbd2"

    def test_compatible_mode(self, play: Play) -> None:
        recorder = MoveRecorder(NotationMode.COMPATIBLE)
        *_, knight = play(recorder, "g1f3", "a7a6", "d2d3", "a6a5", "b1d2")
        assert knight.notation == "Nd2"


class TestCommentary:
    def test_set_commentary(self, recorder: MoveRecorder, play: Play) -> None:
        play(recorder, "e2e4")
        recorder.set_commentary(0, "Best by test")
        assert recorder.history[0].commentary == "Best by test"
        assert recorder.current_commentary() == "Best by test"
        assert recorder.history[0].description.endswith(" - Best by test")

    def test_out_of_range(self, recorder: MoveRecorder) -> None:
        with pytest.raises(IndexError):
            recorder.set_commentary(0, "nothing to annotate")


class TestNavigation:
    def test_positions_are_rederived(self, recorder: MoveRecorder, play: Play) -> None:
        play(recorder, *SCHOLARS_MATE)
        assert recorder.first() == Board.initial()
        assert recorder.cursor == 0

        after_two = recorder.go_to(2)
        assert after_two[sq("e4")] == Piece(Color.WHITE, PieceType.PAWN)
        assert after_two[sq("e5")] == Piece(Color.BLACK, PieceType.PAWN)
        assert after_two[sq("d1")] == Piece(Color.WHITE, PieceType.QUEEN)
        assert recorder.go_to(2) == after_two

        assert recorder.last() == recorder.board
        assert recorder.is_at_live_end

    def test_step_clamps(self, recorder: MoveRecorder, play: Play) -> None:
        play(recorder, "e2e4", "e7e5")
        recorder.first()
        recorder.previous()
        assert recorder.cursor == 0
        recorder.last()
        recorder.next()
        assert recorder.cursor == 2

    def test_go_to_out_of_range(self, recorder: MoveRecorder) -> None:
        with pytest.raises(IndexError):
            recorder.go_to(1)

    def test_moves_only_at_live_end(self, recorder: MoveRecorder, play: Play) -> None:
        play(recorder, "e2e4", "e7e5")
        recorder.previous()
        assert recorder.try_move(sq("g1"), sq("f3")) is None
        assert recorder.ply_count == 2
        recorder.last()
        assert recorder.try_move(sq("g1"), sq("f3")) is not None

    def test_display_board_follows_cursor(
        self, recorder: MoveRecorder, play: Play
    ) -> None:
        play(recorder, "e2e4")
        recorder.first()
        assert recorder.display_board == Board.initial()
        recorder.last()
        assert recorder.display_board == recorder.board

    def test_reset(self, recorder: MoveRecorder, play: Play) -> None:
        play(recorder, "e2e4")
        recorder.reset()
        assert recorder.history == ()
        assert recorder.board == Board.initial()
        assert recorder.side_to_move == Color.WHITE


class TestReplayRoundTrip:
    def test_hint_added_for_blocked_rival(
        self, recorder: MoveRecorder, play: Play
    ) -> None:
        *_, rook = play(recorder, *BLOCKED_RANK_ROOK)
        assert rook.notation == "Rae1"

    def test_hints_for_rooks_sharing_a_file(
        self, recorder: MoveRecorder, play: Play
    ) -> None:
        records = play(recorder, *STACKED_FILE_ROOKS)
        assert [records[i].notation for i in (4, 6, 10)] == ["Rha3", "R3a6", "R1a3"]

    def test_unambiguous_moves_stay_short(
        self, recorder: MoveRecorder, play: Play
    ) -> None:
        records = play(recorder, "g1f3", "a7a6", "h1g1", "a6a5", "g1h1")
        assert [r.notation for r in records] == ["Nf3", "a6", "Rg1", "a5", "Rh1"]

    @pytest.mark.parametrize(
        "moves",
        [
            SCHOLARS_MATE,
            ("f2f3", "e7e5", "g2g4", "d8h4"),
            ("e2e4", "a7a6", "e4e5", "d7d5", "e5d6", "c7d6"),
            ("e2e4", "e7e5", "g1f3", "b8c6", "f1c4", "g8f6", "e1g1", "f8c5"),
            ("g1f3", "a7a6", "d2d3", "a6a5", "b1d2", "a8a6", "a1b1", "a6h6"),
            BLOCKED_RANK_ROOK,
            STACKED_FILE_ROOKS,
        ],
    )
    def test_parser_reproduces_recorder_board(
        self, recorder: MoveRecorder, play: Play, moves: tuple[str, ...]
    ) -> None:
        records = play(recorder, *moves)
        replay = GameReplay(recorder.notation_list())
        assert replay.fallbacks == []
        assert replay.last() == recorder.board
        for parsed, record in zip(replay.moves, records):
            assert (parsed.from_sq, parsed.to_sq) == (record.from_sq, record.to_sq)

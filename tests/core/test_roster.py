"""Tests for PieceRoster."""

from blindfold.core.board import Board
from blindfold.core.enums import CastleSide, Color, PieceType
from blindfold.core.move import ParsedMove
from blindfold.core.piece import Piece
from blindfold.core.roster import PieceRoster, home_squares
from blindfold.core.types import parse_square as sq


class TestRosterInitial:
    def test_single_occupancy_types_are_scalar(self) -> None:
        roster = PieceRoster.initial()
        assert roster.entry(Color.WHITE, PieceType.KING) == sq("e1")
        assert roster.entry(Color.BLACK, PieceType.QUEEN) == sq("d8")

    def test_multi_occupancy_types_are_lists(self) -> None:
        roster = PieceRoster.initial()
        assert roster.entry(Color.WHITE, PieceType.KNIGHT) == [sq("b1"), sq("g1")]
        assert len(roster.squares(Color.BLACK, PieceType.PAWN)) == 8

    def test_matches_initial_board(self) -> None:
        assert PieceRoster.from_board(Board.initial()) == PieceRoster.initial()

    def test_home_squares(self) -> None:
        assert home_squares(Color.BLACK, PieceType.ROOK) == [sq("a8"), sq("h8")]


class TestRosterMutation:
    def test_update_replaces_in_place(self) -> None:
        roster = PieceRoster.initial()
        roster.update(PieceType.KNIGHT, sq("b1"), sq("c3"), Color.WHITE)
        assert roster.squares(Color.WHITE, PieceType.KNIGHT) == [sq("c3"), sq("g1")]

    def test_update_missing_origin_is_ignored(self) -> None:
        roster = PieceRoster.initial()
        roster.update(PieceType.KNIGHT, sq("d4"), sq("e6"), Color.WHITE)
        assert roster.squares(Color.WHITE, PieceType.KNIGHT) == [sq("b1"), sq("g1")]

    def test_update_scalar_overwrites(self) -> None:
        roster = PieceRoster.initial()
        roster.update(PieceType.QUEEN, sq("a4"), sq("h5"), Color.WHITE)
        assert roster.entry(Color.WHITE, PieceType.QUEEN) == sq("h5")

    def test_remove_returns_piece(self) -> None:
        roster = PieceRoster.initial()
        assert roster.remove(sq("d8")) == Piece(Color.BLACK, PieceType.QUEEN)
        assert roster.entry(Color.BLACK, PieceType.QUEEN) is None
        assert roster.remove(sq("e4")) is None

    def test_occupant(self) -> None:
        roster = PieceRoster.initial()
        assert roster.occupant(sq("f7")) == Piece(Color.BLACK, PieceType.PAWN)
        assert roster.occupant(sq("f5")) is None

    def test_apply_capture_and_castle(self) -> None:
        roster = PieceRoster.initial()
        roster.apply(
            ParsedMove(
                piece_type=PieceType.QUEEN,
                color=Color.WHITE,
                from_sq=sq("d1"),
                to_sq=sq("f7"),
                notation="Qxf7",
                is_capture=True,
            )
        )
        assert roster.entry(Color.WHITE, PieceType.QUEEN) == sq("f7")
        assert sq("f7") not in roster.squares(Color.BLACK, PieceType.PAWN)

        roster.apply(
            ParsedMove(
                piece_type=PieceType.KING,
                color=Color.BLACK,
                from_sq=sq("e8"),
                to_sq=sq("c8"),
                notation="O-O-O",
                castling=CastleSide.QUEENSIDE,
            )
        )
        assert roster.entry(Color.BLACK, PieceType.KING) == sq("c8")
        assert roster.squares(Color.BLACK, PieceType.ROOK) == [sq("d8"), sq("h8")]

    def test_apply_never_removes_own_piece(self) -> None:
        roster = PieceRoster.initial()
        roster.apply(
            ParsedMove(
                piece_type=PieceType.ROOK,
                color=Color.WHITE,
                from_sq=sq("a1"),
                to_sq=sq("a2"),
                notation="Rxa2",
                is_capture=True,
            )
        )
        assert sq("a2") in roster.squares(Color.WHITE, PieceType.ROOK)
        assert sq("a2") in roster.squares(Color.WHITE, PieceType.PAWN)

    def test_copy_is_independent(self) -> None:
        roster = PieceRoster.initial()
        clone = roster.copy()
        clone.update(PieceType.PAWN, sq("e2"), sq("e4"), Color.WHITE)
        assert roster != clone
        assert sq("e2") in roster.squares(Color.WHITE, PieceType.PAWN)

"""Tests for PGN export of game records."""

from pathlib import Path

from blindfold.storage.export import record_to_pgn, save_pgn_file
from blindfold.storage.records import GameRecord, builtin_games


def test_headers_and_movetext() -> None:
    fools = next(g for g in builtin_games() if g.id == "fools-mate")
    text = record_to_pgn(fools)
    assert '[Event "Fool\'s Mate"]' in text
    assert '[Site "Blindfold"]' in text
    assert '[Date "????.??.??"]' in text
    assert '[Result "0-1"]' in text
    assert '[Opening "Fool\'s Mate"]' in text
    assert text.rstrip().endswith("1. f3 e5 2. g4 Qh4# 0-1")


def test_commentary_becomes_comments() -> None:
    record = GameRecord(
        id="g",
        name="Annotated",
        moves_notation=["e4", "e5"],
        date="2024-03-09",
        moves_detailed=[{"commentary": "Open game"}, {"commentary": ""}],
    )
    text = record_to_pgn(record)
    assert '[Date "2024.03.09"]' in text
    assert '[Result "*"]' in text
    assert "Opening" not in text
    assert "1. e4 {Open game} e5 *" in text


def test_missing_detail_entries() -> None:
    record = GameRecord(id="g", name="Bare", moves_notation=["d4", "d5", "c4"])
    assert "1. d4 d5 2. c4 *" in record_to_pgn(record)


def test_save_forces_pgn_suffix(tmp_path: Path) -> None:
    record = GameRecord(id="g", name="Saved", moves_notation=["e4"])
    path = save_pgn_file(record, tmp_path / "game.txt")
    assert path == tmp_path / "game.pgn"
    assert path.read_text(encoding="utf-8").startswith('[Event "Saved"]')

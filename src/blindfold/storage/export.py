"""PGN export of stored and authored games."""

from __future__ import annotations

from pathlib import Path

from blindfold.core.notation import build_pgn, pgn_result_token
from blindfold.storage.records import GameRecord


def _pgn_date(value: str) -> str:
    # ISO dates become PGN's dotted form; anything else is unknown.
    parts = value.split("-")
    if len(parts) == 3 and all(part.isdigit() for part in parts):
        return ".".join(parts)
    return "????.??.??"


def record_to_pgn(record: GameRecord) -> str:
    """Single-game PGN text with per-move commentary as comments."""
    result_token = pgn_result_token(record.result)
    headers: dict[str, str] = {
        "Event": record.name,
        "Site": "Blindfold",
        "Date": _pgn_date(record.date),
        "Round": "-",
        "White": record.white_player,
        "Black": record.black_player,
        "Result": result_token,
    }
    if record.opening:
        headers["Opening"] = record.opening

    comments: list[str | None] = []
    for ply in range(record.moves):
        entry = record.moves_detailed[ply] if ply < len(record.moves_detailed) else {}
        comments.append(entry.get("commentary") or None)

    return build_pgn(
        headers=headers,
        sans=record.moves_notation,
        result_token=result_token,
        comments=comments,
    )


def save_pgn_file(record: GameRecord, file_path: Path) -> Path:
    """Write *record* as PGN, forcing a ``.pgn`` suffix; return the path used."""
    save_path = file_path
    if save_path.suffix.lower() != ".pgn":
        save_path = save_path.with_suffix(".pgn")
    save_path.write_text(record_to_pgn(record), encoding="utf-8")
    return save_path

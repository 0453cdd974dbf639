"""Game records, JSON game files and PGN export."""

from blindfold.storage.export import record_to_pgn, save_pgn_file
from blindfold.storage.loader import (
    load_games,
    merge_games,
    parse_games_document,
    read_games_file,
)
from blindfold.storage.records import (
    GameRecord,
    builtin_games,
    detailed_entry,
    record_from_history,
)
from blindfold.storage.store import GameStore

__all__ = [
    "GameRecord",
    "GameStore",
    "builtin_games",
    "detailed_entry",
    "load_games",
    "merge_games",
    "parse_games_document",
    "read_games_file",
    "record_from_history",
    "record_to_pgn",
    "save_pgn_file",
]

"""Reading game lists from JSON documents."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from blindfold.storage.records import GameRecord, builtin_games

_LOGGER = logging.getLogger(__name__)


def parse_games_document(data: Any) -> list[GameRecord]:
    """Records from ``{"games": [...]}`` or a bare list.

    Entries that are not valid game records are skipped with a warning.
    """
    if isinstance(data, dict):
        entries = data.get("games", [])
    else:
        entries = data
    if not isinstance(entries, list):
        raise ValueError("Games document must be a list or contain a 'games' list")

    records: list[GameRecord] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            _LOGGER.warning("Skipping game entry %d: not an object", index)
            continue
        try:
            records.append(GameRecord.from_dict(entry))
        except ValueError as exc:
            _LOGGER.warning("Skipping game entry %d: %s", index, exc)
    return records


def merge_games(*lists: Iterable[GameRecord]) -> list[GameRecord]:
    """Concatenate game lists, keeping the first record seen for each id."""
    seen: set[str] = set()
    merged: list[GameRecord] = []
    for records in lists:
        for record in records:
            if record.id in seen:
                continue
            seen.add(record.id)
            merged.append(record)
    return merged


def read_games_file(path: Path) -> list[GameRecord]:
    """Strict reader: propagates ``OSError`` and ``ValueError``."""
    data = json.loads(path.read_text(encoding="utf-8"))
    return parse_games_document(data)


def load_games(path: Path | None) -> list[GameRecord]:
    """Games from *path*, or the built-in games when it cannot be read."""
    if path is None:
        return builtin_games()
    try:
        records = read_games_file(path)
    except (OSError, ValueError) as exc:
        _LOGGER.warning("Could not load games from %s: %s", path, exc)
        return builtin_games()
    if not records:
        _LOGGER.warning("No games in %s; using built-in games", path)
        return builtin_games()
    _LOGGER.info("Loaded %d games from %s", len(records), path)
    return records

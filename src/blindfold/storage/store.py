"""File-backed store for user-authored games (``custom-games.json``)."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from blindfold.storage.loader import read_games_file
from blindfold.storage.records import GameRecord

_LOGGER = logging.getLogger(__name__)


class GameStore:
    """Append/delete access to a single ``{"games": [...]}`` JSON file.

    A missing file reads as an empty store.  Write errors propagate.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def list(self) -> list[GameRecord]:
        if not self._path.exists():
            return []
        return read_games_file(self._path)

    def get(self, game_id: str) -> GameRecord | None:
        for record in self.list():
            if record.id == game_id:
                return record
        return None

    def save(self, record: GameRecord) -> GameRecord:
        """Append *record* stamped with the save time; return the stored copy."""
        stored = GameRecord.from_dict(record.to_dict())
        stored.extra["timestamp"] = datetime.now(timezone.utc).isoformat()

        records = self.list()
        records.append(stored)
        self._write(records)
        _LOGGER.info("Saved game %s (%s) to %s", stored.id, stored.name, self._path)
        return stored

    def delete(self, game_id: str) -> bool:
        """Remove the game with *game_id*; ``False`` when it is not stored."""
        records = self.list()
        remaining = [record for record in records if record.id != game_id]
        if len(remaining) == len(records):
            _LOGGER.info("Game %s not found in %s", game_id, self._path)
            return False
        self._write(remaining)
        _LOGGER.info("Deleted game %s from %s", game_id, self._path)
        return True

    def _write(self, records: list[GameRecord]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        document = {"games": [record.to_dict() for record in records]}
        self._path.write_text(
            json.dumps(document, indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )

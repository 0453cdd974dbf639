"""Tests for the custom-games JSON store."""

import json
from pathlib import Path

from blindfold.storage.records import GameRecord
from blindfold.storage.store import GameStore


def _record(game_id: str = "custom-game-1") -> GameRecord:
    return GameRecord(id=game_id, name="Mine", moves_notation=["e4", "c5"])


def test_missing_file_is_empty(tmp_path: Path) -> None:
    store = GameStore(tmp_path / "custom-games.json")
    assert store.list() == []
    assert store.get("anything") is None
    assert not store.delete("anything")


def test_save_appends_and_stamps(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "custom-games.json"
    store = GameStore(path)
    original = _record()

    stored = store.save(original)
    assert "timestamp" in stored.extra
    assert "timestamp" not in original.extra

    store.save(_record("custom-game-2"))
    document = json.loads(path.read_text(encoding="utf-8"))
    assert [game["id"] for game in document["games"]] == [
        "custom-game-1",
        "custom-game-2",
    ]
    assert document["games"][0]["moves"] == 2
    assert document["games"][0]["timestamp"] == stored.extra["timestamp"]


def test_get_and_delete(tmp_path: Path) -> None:
    store = GameStore(tmp_path / "custom-games.json")
    store.save(_record("a"))
    store.save(_record("b"))

    fetched = store.get("b")
    assert fetched is not None
    assert fetched.moves_notation == ["e4", "c5"]

    assert store.delete("a")
    assert [r.id for r in store.list()] == ["b"]
    assert not store.delete("a")

"""Game-record JSON model shared by the stored games and the custom game store."""

from __future__ import annotations

import time
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from blindfold.core.enums import Color
from blindfold.core.move import MoveRecord
from blindfold.core.types import square_name

DEFAULT_DESCRIPTION = "Custom chess game created by user"
DEFAULT_OPENING = "Custom Opening"
DEFAULT_RESULT = "In progress"

_KNOWN_KEYS = frozenset(
    {
        "id",
        "name",
        "white_player",
        "black_player",
        "description",
        "moves",
        "result",
        "opening",
        "date",
        "difficulty",
        "moves_notation",
        "moves_detailed",
        "tags",
    }
)


@dataclass
class GameRecord:
    """One game as stored in ``games.json`` / ``custom-games.json``."""

    id: str
    name: str
    moves_notation: list[str]
    white_player: str = "White"
    black_player: str = "Black"
    description: str = ""
    result: str = DEFAULT_RESULT
    opening: str = ""
    date: str = "Unknown"
    difficulty: str = ""
    moves_detailed: list[dict[str, Any]] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def moves(self) -> int:
        """Number of half-moves."""
        return len(self.moves_notation)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GameRecord:
        game_id = data.get("id")
        if not isinstance(game_id, str) or not game_id:
            raise ValueError(f"Game record without a valid id: {data!r:.80}")
        notation = data.get("moves_notation")
        if not isinstance(notation, list) or not all(
            isinstance(token, str) for token in notation
        ):
            raise ValueError(f"Game {game_id!r} has no moves_notation list")
        detailed = data.get("moves_detailed") or []
        if not isinstance(detailed, list) or not all(
            isinstance(entry, dict) for entry in detailed
        ):
            raise ValueError(
                f"Game {game_id!r}: moves_detailed must be a list of objects"
            )
        tags = data.get("tags") or []
        if not isinstance(tags, list):
            raise ValueError(f"Game {game_id!r}: tags must be a list")

        return cls(
            id=game_id,
            name=str(data.get("name") or game_id),
            moves_notation=list(notation),
            white_player=str(data.get("white_player") or "White"),
            black_player=str(data.get("black_player") or "Black"),
            description=str(data.get("description") or ""),
            result=str(data.get("result") or DEFAULT_RESULT),
            opening=str(data.get("opening") or ""),
            date=str(data.get("date") or "Unknown"),
            difficulty=str(data.get("difficulty") or ""),
            moves_detailed=[dict(entry) for entry in detailed],
            tags=[str(tag) for tag in tags],
            extra={k: v for k, v in data.items() if k not in _KNOWN_KEYS},
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "white_player": self.white_player,
            "black_player": self.black_player,
            "description": self.description,
            "moves": self.moves,
            "result": self.result,
            "opening": self.opening,
            "date": self.date,
            "difficulty": self.difficulty,
            "moves_notation": list(self.moves_notation),
            "moves_detailed": [dict(entry) for entry in self.moves_detailed],
        }
        if self.tags:
            data["tags"] = list(self.tags)
        data.update(self.extra)
        return data


def detailed_entry(record: MoveRecord) -> dict[str, Any]:
    """``moves_detailed`` entry for one ply; the other color's fields are null."""
    is_white = record.color == Color.WHITE
    from_name = square_name(record.from_sq)
    to_name = square_name(record.to_sq)
    return {
        "move_number": record.move_number,
        "white": record.notation if is_white else None,
        "black": None if is_white else record.notation,
        "description": record.description,
        "white_from": from_name if is_white else None,
        "white_to": to_name if is_white else None,
        "black_from": None if is_white else from_name,
        "black_to": None if is_white else to_name,
        "annotation": "",
        "commentary": record.commentary,
    }


def record_from_history(
    history: Sequence[MoveRecord],
    name: str,
    *,
    white_player: str = "",
    black_player: str = "",
    description: str = "",
    opening: str = "",
    result: str = "",
    game_id: str | None = None,
    today: date | None = None,
) -> GameRecord:
    """Package an authored history as a saveable :class:`GameRecord`."""
    title = name.strip()
    if not title:
        raise ValueError("A custom game needs a name")
    if not history:
        raise ValueError("Cannot save a game without moves")

    return GameRecord(
        id=game_id or f"custom-game-{int(time.time() * 1000)}",
        name=title,
        moves_notation=[record.notation for record in history],
        white_player=white_player.strip() or "White",
        black_player=black_player.strip() or "Black",
        description=description.strip() or DEFAULT_DESCRIPTION,
        result=result or DEFAULT_RESULT,
        opening=opening.strip() or DEFAULT_OPENING,
        date=(today or date.today()).isoformat(),
        difficulty="Custom",
        moves_detailed=[detailed_entry(record) for record in history],
    )


def _builtin(
    game_id: str,
    name: str,
    description: str,
    result: str,
    moves: list[tuple[str, str]],
    tags: list[str],
) -> GameRecord:
    detailed: list[dict[str, Any]] = []
    for ply, (san, text) in enumerate(moves):
        is_white = ply % 2 == 0
        detailed.append(
            {
                "move_number": ply // 2 + 1,
                "white": san if is_white else None,
                "black": None if is_white else san,
                "description": text,
            }
        )
    return GameRecord(
        id=game_id,
        name=name,
        moves_notation=[san for san, _ in moves],
        white_player="Unknown",
        black_player="Unknown",
        description=description,
        result=result,
        opening=name,
        date="Unknown",
        difficulty="Beginner",
        moves_detailed=detailed,
        tags=tags,
    )


def builtin_games() -> list[GameRecord]:
    """Games shipped with the application, used when no games file loads."""
    return [
        _builtin(
            "fools-mate",
            "Fool's Mate",
            "The fastest possible checkmate in chess",
            "Black wins",
            [
                ("f3", "White plays f3, weakening the king's diagonal"),
                ("e5", "Black plays e5, controlling the center"),
                ("g4", "White plays g4, further weakening the king's position"),
                ("Qh4#", "Black delivers checkmate with the queen"),
            ],
            ["checkmate", "quick", "tactical", "beginner"],
        ),
        _builtin(
            "scholars-mate",
            "Scholar's Mate",
            "A quick checkmate pattern targeting f7",
            "White wins",
            [
                ("e4", "White opens with e4, controlling the center"),
                ("e5", "Black responds with e5, mirroring white's strategy"),
                ("Qh5", "White brings out the queen early, targeting f7"),
                ("Nc6", "Black develops the knight, defending the e5 pawn"),
                ("Bc4", "White develops the bishop, also targeting f7"),
                ("Nf6", "Black develops the knight, but doesn't defend f7"),
                ("Qxf7#", "White delivers checkmate by capturing f7 with the queen"),
            ],
            ["checkmate", "quick", "tactical", "beginner", "f7"],
        ),
    ]

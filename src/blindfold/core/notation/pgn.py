"""PGN serialization for authored games."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from blindfold.core.notation.models import PgnMove

_RESULT_TOKENS: dict[str, str] = {
    "white wins": "1-0",
    "1-0": "1-0",
    "black wins": "0-1",
    "0-1": "0-1",
    "draw": "1/2-1/2",
    "1/2-1/2": "1/2-1/2",
}


def pgn_result_token(result: str) -> str:
    """Map a game-record result string (``"White wins"`` …) to a PGN token."""
    return _RESULT_TOKENS.get(result.strip().lower(), "*")


def pgn_movetext_from_moves(moves: Sequence[PgnMove], result_token: str) -> str:
    """Build PGN movetext from mainline moves with optional comments."""
    parts: list[str] = []
    for ply, move in enumerate(moves):
        if ply % 2 == 0:
            parts.append(f"{(ply // 2) + 1}.")
        parts.append(move.san)
        if move.comment:
            # PGN comments cannot contain a closing brace.
            parts.append("{" + move.comment.replace("}", "]") + "}")
    parts.append(result_token)
    return " ".join(parts)


def build_pgn(
    headers: Mapping[str, str],
    sans: Sequence[str],
    result_token: str,
    comments: Sequence[str | None] | None = None,
) -> str:
    """Build a single-game PGN document."""
    if comments is not None and len(comments) != len(sans):
        raise ValueError("PGN comments length must match SAN move length")

    moves = [
        PgnMove(
            san=san,
            comment=" ".join((comments[idx] or "").split()) if comments else "",
        )
        for idx, san in enumerate(sans)
    ]

    lines = [
        '[{} "{}"]'.format(key, value.replace("\\", "\\\\").replace('"', '\\"'))
        for key, value in headers.items()
    ]
    lines.append("")
    lines.append(pgn_movetext_from_moves(moves, result_token))
    lines.append("")
    return "\n".join(lines)

"""Game layer — authoring sessions and replay of stored games.

Quick start::

    from blindfold.game import MoveRecorder
    from blindfold.core import parse_square

    recorder = MoveRecorder()
    recorder.try_move(parse_square("e2"), parse_square("e4"))
"""

from blindfold.game.recorder import MoveRecorder, RecorderPhase, replay_record
from blindfold.game.replay import GameReplay, apply_parsed_move

__all__ = [
    "GameReplay",
    "MoveRecorder",
    "RecorderPhase",
    "apply_parsed_move",
    "replay_record",
]

"""
scene_state.py
--------------
Top-level phases of a play session and the transitions between them.

The table is exhaustive: a transition not listed is a programming error
and raises ValueError.
"""

from enum import Enum


class GamePhase(Enum):
    """Session phases."""
    INTRO = "intro"
    PLAYING = "playing"
    LEVEL_TRANSITION = "level_transition"
    WIN = "win"
    GAME_OVER = "game_over"


ALLOWED_TRANSITIONS = {
    GamePhase.INTRO: frozenset({GamePhase.PLAYING}),
    GamePhase.PLAYING: frozenset({
        GamePhase.PLAYING,           # restart
        GamePhase.LEVEL_TRANSITION,
        GamePhase.WIN,
        GamePhase.GAME_OVER,
    }),
    GamePhase.LEVEL_TRANSITION: frozenset({GamePhase.PLAYING}),
    GamePhase.WIN: frozenset({GamePhase.PLAYING}),
    GamePhase.GAME_OVER: frozenset({GamePhase.PLAYING}),
}


def check_transition(current: GamePhase, target: GamePhase) -> None:
    """Raise ValueError if the session cannot move from current to target."""
    if target not in ALLOWED_TRANSITIONS[current]:
        raise ValueError(f"Illegal phase transition {current.value} -> {target.value}")

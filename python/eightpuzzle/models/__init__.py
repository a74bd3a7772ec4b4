from eightpuzzle.models.board import Board, Move
from eightpuzzle.models.errors import InvalidShape, MalformedState, PuzzleError
from eightpuzzle.models.state import (
    GOAL_BLANK,
    GOAL_STATE,
    State,
    canonical_key,
    check_state,
    is_goal,
    locate_blank,
)

__all__ = [
    "Board",
    "GOAL_BLANK",
    "GOAL_STATE",
    "InvalidShape",
    "MalformedState",
    "Move",
    "PuzzleError",
    "State",
    "canonical_key",
    "check_state",
    "is_goal",
    "locate_blank",
]

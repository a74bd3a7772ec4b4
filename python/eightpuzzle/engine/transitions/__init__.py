from eightpuzzle.engine.transitions.neighbors import (
    DIRECTIONS,
    Successor,
    apply_move,
    inverse_move,
    successors,
)

__all__ = ["DIRECTIONS", "Successor", "apply_move", "inverse_move", "successors"]

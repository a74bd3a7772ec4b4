"""Admissible heuristics for the 8-puzzle."""

from __future__ import annotations

from eightpuzzle.models.state import SIZE, State

_GOAL_POS: dict[int, tuple[int, int]] = {
    tile: divmod(tile - 1, SIZE) for tile in range(1, SIZE * SIZE)
}


def manhattan(s: State) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    dist = 0
    for idx, tile in enumerate(s):
        if tile == 0:
            continue
        r, c = divmod(idx, SIZE)
        gr, gc = _GOAL_POS[tile]
        dist += abs(r - gr) + abs(c - gc)
    return dist

"""Flat, hashable puzzle configurations.

A ``State`` is the 9 cell values in row-major order.  It doubles as the
canonical key: two configurations are equal iff their states are equal.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from eightpuzzle.models.errors import MalformedState

SIZE = 3
CELLS = SIZE * SIZE

State = tuple[int, ...]

GOAL_STATE: State = (1, 2, 3, 4, 5, 6, 7, 8, 0)
GOAL_BLANK: tuple[int, int] = (SIZE - 1, SIZE - 1)

_VALUES = frozenset(range(CELLS))


def canonical_key(cells: Iterable[int] | Iterable[Sequence[int]]) -> State:
    """Return the row-major tuple of *cells*.

    Accepts either a flat iterable of 9 ints or a 3×3 nested grid.
    """
    flat: list[int] = []
    for item in cells:
        if isinstance(item, int):
            flat.append(item)
        else:
            flat.extend(item)
    return tuple(flat)


def check_state(state: State) -> None:
    """Raise ``MalformedState`` unless *state* holds each of 0-8 exactly once."""
    if len(state) != CELLS:
        raise MalformedState(f"Expected {CELLS} cells, got {len(state)}.")
    if any(type(v) is not int for v in state):
        raise MalformedState("Cell values must be integers.")
    if set(state) != _VALUES:
        missing = sorted(_VALUES - set(state))
        raise MalformedState(
            f"Cells must hold 0-8 exactly once (missing {missing})."
        )


def is_goal(state: State) -> bool:
    return state == GOAL_STATE


def locate_blank(state: State) -> tuple[int, int]:
    """Return the ``(row, col)`` of the blank."""
    for idx, value in enumerate(state):
        if value == 0:
            return divmod(idx, SIZE)
    raise MalformedState("Configuration has no blank (0) cell.")


def to_grid(state: State) -> list[list[int]]:
    return [list(state[r * SIZE : (r + 1) * SIZE]) for r in range(SIZE)]

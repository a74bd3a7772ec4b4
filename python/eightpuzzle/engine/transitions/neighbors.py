"""Legal one-move successors of a configuration."""

from __future__ import annotations

from typing import NamedTuple

from eightpuzzle.models.board import Move
from eightpuzzle.models.errors import MalformedState
from eightpuzzle.models.state import SIZE, State

# Blank displacements in expansion order: down, up, right, left.
# The order fixes tie-breaking between equal-length paths.
DIRECTIONS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


class Successor(NamedTuple):
    state: State
    move: Move
    blank: tuple[int, int]


def successors(state: State, blank: tuple[int, int]) -> list[Successor]:
    """Return every configuration one blank move away from *state*.

    *blank* is the cached ``(row, col)`` of the blank in *state*.  Each
    successor is a fresh tuple; *state* itself is never modified.
    """
    br, bc = blank
    bi = br * SIZE + bc
    if state[bi] != 0:
        raise MalformedState(f"No blank at {blank} in {state}.")

    out: list[Successor] = []
    for dr, dc in DIRECTIONS:
        nr, nc = br + dr, bc + dc
        if 0 <= nr < SIZE and 0 <= nc < SIZE:
            ni = nr * SIZE + nc
            cells = list(state)
            cells[bi], cells[ni] = cells[ni], cells[bi]
            out.append(Successor(tuple(cells), Move(nr, nc), (nr, nc)))
    return out


def apply_move(state: State, blank: tuple[int, int], move: Move) -> State:
    """Slide the tile at *move* into the blank at *blank*.

    Raises ``ValueError`` if the cell is not orthogonally adjacent to the blank.
    """
    br, bc = blank
    if abs(move.row - br) + abs(move.col - bc) != 1:
        raise ValueError(f"Move {tuple(move)} is not adjacent to blank {blank}.")
    bi = br * SIZE + bc
    ni = move.row * SIZE + move.col
    cells = list(state)
    cells[bi], cells[ni] = cells[ni], cells[bi]
    return tuple(cells)


def inverse_move(blank: tuple[int, int]) -> Move:
    """The move that undoes a move made from a blank at *blank*."""
    return Move(*blank)

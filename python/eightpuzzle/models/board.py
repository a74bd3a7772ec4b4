"""Board model for the 8-puzzle."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import NamedTuple

from eightpuzzle.models.errors import InvalidShape
from eightpuzzle.models.state import (
    GOAL_STATE,
    SIZE,
    State,
    canonical_key,
    check_state,
    locate_blank,
    to_grid,
)


class Move(NamedTuple):
    """Cell the blank moves *to*, i.e. the tile that slides into the blank."""

    row: int
    col: int

    def as_list(self) -> list[int]:
        return [self.row, self.col]


@dataclass
class Board:
    """Represents a 3×3 puzzle board.

    Tiles are stored as a 2D list of ints. 0 represents the blank space.
    """

    tiles: list[list[int]]
    blank_pos: tuple[int, int]

    size = SIZE

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[int]]) -> Board:
        """Validate a nested 3×3 grid and build a board from it.

        Raises ``InvalidShape`` for anything that is not 3 rows of 3 cells
        and ``MalformedState`` if the cells are not a permutation of 0-8.
        """
        if isinstance(grid, (str, bytes)) or not isinstance(grid, Sequence):
            raise InvalidShape("Invalid puzzle input. Must be a 3x3 grid.")
        if len(grid) != SIZE or any(
            isinstance(row, (str, bytes))
            or not isinstance(row, Sequence)
            or len(row) != SIZE
            for row in grid
        ):
            raise InvalidShape("Invalid puzzle input. Must be a 3x3 grid.")
        return cls.from_state(canonical_key(grid))

    @classmethod
    def from_flat(cls, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != SIZE * SIZE:
            raise InvalidShape(
                f"Expected {SIZE * SIZE} tiles for a {SIZE}×{SIZE} board, "
                f"got {len(flat)}."
            )
        return cls.from_state(tuple(flat))

    @classmethod
    def from_state(cls, state: State) -> Board:
        check_state(state)
        return cls(tiles=to_grid(state), blank_pos=locate_blank(state))

    # -- queries --------------------------------------------------------------

    def key(self) -> State:
        """Canonical key of the current arrangement."""
        return canonical_key(self.tiles)

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def is_solved(self) -> bool:
        return self.key() == GOAL_STATE

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == 0:
            return row == SIZE - 1 and col == SIZE - 1
        return (row, col) == divmod(val - 1, SIZE)

    def copy(self) -> Board:
        return Board(tiles=[row[:] for row in self.tiles], blank_pos=self.blank_pos)

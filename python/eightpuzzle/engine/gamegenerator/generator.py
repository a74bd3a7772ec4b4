"""Generates solvable 8-puzzle boards."""

from __future__ import annotations

import random

from eightpuzzle.config import SCRAMBLE_STEPS
from eightpuzzle.models.board import Board
from eightpuzzle.models.state import GOAL_STATE, SIZE


class GameGenerator:
    """Creates solvable puzzles by shuffling from the solved state."""

    @staticmethod
    def solved() -> Board:
        """Return the goal-state board (tiles in order, blank bottom-right)."""
        return Board.from_state(GOAL_STATE)

    @staticmethod
    def scramble(
        board: Board,
        steps: int = SCRAMBLE_STEPS,
        rng: random.Random | None = None,
    ) -> None:
        """Scramble *board* in-place using *steps* random valid moves.

        The blank never immediately steps back to the cell it just left.
        """
        rng = rng or random.Random()
        prev_pos: tuple[int, int] | None = None

        for _ in range(steps):
            neighbors = GameGenerator._get_neighbors(board)
            if prev_pos in neighbors and len(neighbors) > 1:
                neighbors.remove(prev_pos)
            target = rng.choice(neighbors)
            prev_pos = board.blank_pos
            GameGenerator._swap(board, target)

    @staticmethod
    def generate(steps: int = SCRAMBLE_STEPS, seed: int | None = None) -> Board:
        """Return a random *solvable*, unsolved board."""
        rng = random.Random(seed)
        while True:
            board = GameGenerator.solved()
            GameGenerator.scramble(board, steps, rng)
            if steps == 0 or not board.is_solved():
                return board

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _get_neighbors(board: Board) -> list[tuple[int, int]]:
        br, bc = board.blank_pos
        neighbors: list[tuple[int, int]] = []
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = br + dr, bc + dc
            if 0 <= nr < SIZE and 0 <= nc < SIZE:
                neighbors.append((nr, nc))
        return neighbors

    @staticmethod
    def _swap(board: Board, target: tuple[int, int]) -> None:
        br, bc = board.blank_pos
        tr, tc = target
        board.tiles[br][bc], board.tiles[tr][tc] = (
            board.tiles[tr][tc],
            board.tiles[br][bc],
        )
        board.blank_pos = (tr, tc)

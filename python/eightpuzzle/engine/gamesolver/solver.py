"""8-puzzle solver facade."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from eightpuzzle.config import DEFAULT_STRATEGY, MAX_EXPLORED_STATES
from eightpuzzle.engine.gamesolver.astar import a_star
from eightpuzzle.engine.gamesolver.bfs import bfs
from eightpuzzle.engine.gamesolver.bidirectional import bidirectional_bfs
from eightpuzzle.engine.gamesolver.result import SolveResult
from eightpuzzle.models.board import Board, Move
from eightpuzzle.models.state import State

SearchFn = Callable[[State, int | None], SolveResult]

STRATEGIES: dict[str, SearchFn] = {
    "bfs": bfs,
    "bidirectional": bidirectional_bfs,
    "astar": a_star,
}


def inversions(state: State) -> int:
    arr = [v for v in state if v != 0]
    return sum(
        1
        for i in range(len(arr))
        for j in range(i + 1, len(arr))
        if arr[i] > arr[j]
    )


class Solver:
    """Stateless solver; all methods are static.

    Every call allocates its own frontier and visited maps, so concurrent
    calls never share search state.
    """

    @staticmethod
    def strategies() -> list[str]:
        return list(STRATEGIES)

    @staticmethod
    def solve(
        board: Board,
        strategy: str = DEFAULT_STRATEGY,
        max_explored: int | None = MAX_EXPLORED_STATES,
    ) -> SolveResult:
        """Solve *board* with the named strategy.

        Raises ``ValueError`` for an unknown strategy name.
        """
        try:
            search = STRATEGIES[strategy]
        except KeyError:
            raise ValueError(
                f"Unknown strategy {strategy!r}; expected one of {', '.join(STRATEGIES)}."
            ) from None
        return search(board.key(), max_explored)

    @staticmethod
    def solve_grid(
        grid: Sequence[Sequence[int]],
        strategy: str = DEFAULT_STRATEGY,
        max_explored: int | None = MAX_EXPLORED_STATES,
    ) -> SolveResult:
        """Validate a raw 3×3 grid, then solve it."""
        return Solver.solve(Board.from_grid(grid), strategy, max_explored)

    @staticmethod
    def hint(board: Board, strategy: str = DEFAULT_STRATEGY) -> Move | None:
        """Return the single best next move, or ``None`` if solved / unsolvable."""
        if board.is_solved() or not Solver.is_solvable(board):
            return None
        result = Solver.solve(board, strategy)
        return result.moves[0] if result.moves else None

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state.

        On a 3×3 board a blank move never changes inversion parity, and the
        goal has none.
        """
        return inversions(board.key()) % 2 == 0

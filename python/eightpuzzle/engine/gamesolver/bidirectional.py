"""Bidirectional breadth-first search.

Two BFS frontiers, one grown from the start and one from the goal, are
expanded one state at a time in lock-step (start side first).  The search
stops the first time a newly discovered state is already known to the
opposite side.

Every edge flips the blank's checkerboard colour, so all paths between two
given states share the same parity.  Together with FIFO expansion on both
sides this makes the first meeting a shortest path.
"""

from __future__ import annotations

import logging
from collections import deque
from time import perf_counter
from typing import NamedTuple

from eightpuzzle.config import MAX_EXPLORED_STATES
from eightpuzzle.engine.gamesolver.result import (
    NoSolutionFound,
    Solution,
    SolveResult,
    Termination,
)
from eightpuzzle.engine.transitions import successors
from eightpuzzle.models.board import Move
from eightpuzzle.models.state import (
    GOAL_BLANK,
    GOAL_STATE,
    State,
    check_state,
    is_goal,
    locate_blank,
)

logger = logging.getLogger(__name__)

NAME = "bidirectional"


class Trail(NamedTuple):
    """Accumulated move path, stored as a shared-tail linked list."""

    move: Move
    prev: Trail | None


def trail_moves(trail: Trail | None) -> list[Move]:
    moves: list[Move] = []
    while trail is not None:
        moves.append(trail.move)
        trail = trail.prev
    moves.reverse()
    return moves


def reverse_goal_path(goal_moves: list[Move]) -> list[Move]:
    """Turn blank moves goal→X into the blank moves X→goal.

    Walking back, the blank revisits the cells it came from, ending on the
    goal's blank cell.
    """
    if not goal_moves:
        return []
    cells = [Move(*GOAL_BLANK), *goal_moves[:-1]]
    cells.reverse()
    return cells


class _Side:
    __slots__ = ("frontier", "visited")

    def __init__(self, root: State, blank: tuple[int, int]) -> None:
        self.frontier: deque[tuple[State, tuple[int, int]]] = deque([(root, blank)])
        self.visited: dict[State, Trail | None] = {root: None}

    def expand(self, other: _Side) -> State | None:
        """Expand the oldest frontier state; return a meeting state if found."""
        state, blank = self.frontier.popleft()
        trail = self.visited[state]
        for succ in successors(state, blank):
            if succ.state in self.visited:
                continue
            self.visited[succ.state] = Trail(succ.move, trail)
            if succ.state in other.visited:
                return succ.state
            self.frontier.append((succ.state, succ.blank))
        return None


def bidirectional_bfs(
    start: State, max_explored: int | None = MAX_EXPLORED_STATES
) -> SolveResult:
    check_state(start)
    t0 = perf_counter()
    if is_goal(start):
        return Solution(NAME, [], 0, perf_counter() - t0)

    forward = _Side(start, locate_blank(start))
    backward = _Side(GOAL_STATE, GOAL_BLANK)
    explored = 0

    while forward.frontier or backward.frontier:
        for side, other in ((forward, backward), (backward, forward)):
            if not side.frontier:
                continue
            if max_explored is not None and explored >= max_explored:
                logger.warning("bidirectional: gave up after %d expanded states", explored)
                return NoSolutionFound(
                    NAME, Termination.LIMIT, explored, perf_counter() - t0
                )
            explored += 1
            meet = side.expand(other)
            if meet is not None:
                moves = trail_moves(forward.visited[meet]) + reverse_goal_path(
                    trail_moves(backward.visited[meet])
                )
                logger.debug(
                    "bidirectional: %d moves, %d states expanded", len(moves), explored
                )
                return Solution(NAME, moves, explored, perf_counter() - t0)

    logger.debug("bidirectional: both frontiers exhausted after %d states", explored)
    return NoSolutionFound(NAME, Termination.EXHAUSTED, explored, perf_counter() - t0)

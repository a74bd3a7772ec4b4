"""Unidirectional breadth-first search."""

from __future__ import annotations

import logging
from collections import deque
from time import perf_counter

from eightpuzzle.config import MAX_EXPLORED_STATES
from eightpuzzle.engine.gamesolver.node import SearchNode, reconstruct_path
from eightpuzzle.engine.gamesolver.result import (
    NoSolutionFound,
    Solution,
    SolveResult,
    Termination,
)
from eightpuzzle.engine.transitions import successors
from eightpuzzle.models.state import State, check_state, is_goal, locate_blank

logger = logging.getLogger(__name__)

NAME = "bfs"


def bfs(start: State, max_explored: int | None = MAX_EXPLORED_STATES) -> SolveResult:
    """Shortest move sequence from *start* to the goal.

    States are expanded in insertion order, so the first time the goal is
    dequeued its recorded path has minimal length.
    """
    check_state(start)
    t0 = perf_counter()
    root = SearchNode(state=start, blank=locate_blank(start))
    visited: dict[State, SearchNode] = {start: root}
    frontier = deque([root])
    explored = 0

    while frontier:
        node = frontier.popleft()
        if is_goal(node.state):
            moves = reconstruct_path(node)
            logger.debug("bfs: %d moves, %d states expanded", len(moves), explored)
            return Solution(NAME, moves, explored, perf_counter() - t0)

        if max_explored is not None and explored >= max_explored:
            logger.warning("bfs: gave up after %d expanded states", explored)
            return NoSolutionFound(NAME, Termination.LIMIT, explored, perf_counter() - t0)

        explored += 1
        for succ in successors(node.state, node.blank):
            if succ.state in visited:
                continue
            child = SearchNode(succ.state, succ.blank, succ.move, node)
            visited[succ.state] = child
            frontier.append(child)

    logger.debug("bfs: frontier exhausted after %d states", explored)
    return NoSolutionFound(NAME, Termination.EXHAUSTED, explored, perf_counter() - t0)

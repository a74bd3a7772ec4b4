"""A* search ordered by ``g + h`` with the Manhattan heuristic."""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from collections.abc import Callable
from time import perf_counter

from eightpuzzle.config import MAX_EXPLORED_STATES
from eightpuzzle.engine.gamesolver.heuristics import manhattan
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

NAME = "astar"


def a_star(
    start: State,
    max_explored: int | None = MAX_EXPLORED_STATES,
    hfun: Callable[[State], int] = manhattan,
) -> SolveResult:
    """
    Best-first search on ``f = g + h``.

    Ties on ``f`` are broken first-in first-out, so identical input always
    yields the identical move list.  The open heap is never searched or
    rewritten: an improved ``g`` pushes a fresh entry and the older one is
    skipped when it surfaces.  Optimal as long as *hfun* is admissible.
    """
    check_state(start)
    t0 = perf_counter()
    counter = itertools.count()

    h0 = hfun(start)
    root = SearchNode(state=start, blank=locate_blank(start), g=0, h=h0)
    open_heap: list[tuple[int, int, SearchNode]] = [(h0, next(counter), root)]
    best_g: dict[State, int] = {start: 0}
    closed: set[State] = set()
    explored = 0

    while open_heap:
        _, _, node = heapq.heappop(open_heap)
        if node.state in closed or node.g > best_g[node.state]:
            continue

        if is_goal(node.state):
            moves = reconstruct_path(node)
            logger.debug("astar: %d moves, %d states expanded", len(moves), explored)
            return Solution(NAME, moves, explored, perf_counter() - t0)

        if max_explored is not None and explored >= max_explored:
            logger.warning("astar: gave up after %d expanded states", explored)
            return NoSolutionFound(NAME, Termination.LIMIT, explored, perf_counter() - t0)

        closed.add(node.state)
        explored += 1

        for succ in successors(node.state, node.blank):
            g2 = node.g + 1
            # Also keeps closed states with an equal or better g closed.
            if g2 >= best_g.get(succ.state, math.inf):
                continue
            best_g[succ.state] = g2
            closed.discard(succ.state)
            h2 = hfun(succ.state)
            child = SearchNode(succ.state, succ.blank, succ.move, node, g=g2, h=h2)
            heapq.heappush(open_heap, (child.f, next(counter), child))

    logger.debug("astar: open set exhausted after %d states", explored)
    return NoSolutionFound(NAME, Termination.EXHAUSTED, explored, perf_counter() - t0)

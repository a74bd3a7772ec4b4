"""Transport-independent solve request handling.

Takes the decoded JSON body of a solve request (``{"puzzle": [[...], ...]}``)
and returns a status code plus a JSON-ready response body.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from eightpuzzle.config import DEFAULT_STRATEGY, MAX_EXPLORED_STATES
from eightpuzzle.engine.gamesolver import Solver
from eightpuzzle.models.board import Board
from eightpuzzle.models.errors import PuzzleError

logger = logging.getLogger(__name__)

SOLVED_MESSAGE = "Puzzle solved!"
NO_SOLUTION_MESSAGE = "No solution found."


def handle_solve_request(
    payload: Mapping[str, Any] | None,
    strategy: str = DEFAULT_STRATEGY,
    max_explored: int | None = MAX_EXPLORED_STATES,
) -> tuple[int, dict[str, Any]]:
    """Solve ``payload["puzzle"]``.

    Returns ``(400, {"error": ...})`` for input that fails validation,
    ``(200, {"message": ..., "moves": [[row, col], ...]})`` on success and
    ``(200, {"message": "No solution found."})`` when the search gives up.
    """
    if not isinstance(payload, Mapping):
        return 400, {"error": "Request body must be a JSON object."}

    try:
        board = Board.from_grid(payload.get("puzzle"))
    except PuzzleError as exc:
        logger.info("rejected solve request: %s", exc)
        return 400, {"error": str(exc)}

    result = Solver.solve(board, strategy, max_explored)
    if not result.solved:
        return 200, {"message": NO_SOLUTION_MESSAGE}
    return 200, {
        "message": SOLVED_MESSAGE,
        "moves": [move.as_list() for move in result.moves],
    }

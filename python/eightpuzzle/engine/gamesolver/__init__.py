from eightpuzzle.engine.gamesolver.astar import a_star
from eightpuzzle.engine.gamesolver.bfs import bfs
from eightpuzzle.engine.gamesolver.bidirectional import bidirectional_bfs
from eightpuzzle.engine.gamesolver.heuristics import manhattan
from eightpuzzle.engine.gamesolver.result import (
    NoSolutionFound,
    Solution,
    SolveResult,
    Termination,
)
from eightpuzzle.engine.gamesolver.solver import STRATEGIES, Solver

__all__ = [
    "NoSolutionFound",
    "STRATEGIES",
    "Solution",
    "SolveResult",
    "Solver",
    "Termination",
    "a_star",
    "bfs",
    "bidirectional_bfs",
    "manhattan",
]

"""Outcome types shared by every search strategy."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from eightpuzzle.models.board import Move


class Termination(StrEnum):
    OK = "ok"
    EXHAUSTED = "exhausted"
    LIMIT = "limit"


@dataclass(frozen=True)
class Solution:
    """A complete start→goal move sequence."""

    strategy: str
    moves: list[Move] = field(default_factory=list)
    explored: int = 0
    elapsed: float = 0.0

    solved = True
    termination = Termination.OK


@dataclass(frozen=True)
class NoSolutionFound:
    """The search stopped without reaching the goal.

    ``termination`` is ``EXHAUSTED`` when every reachable state was tried
    and ``LIMIT`` when the exploration ceiling cut the search short.
    """

    strategy: str
    termination: Termination = Termination.EXHAUSTED
    explored: int = 0
    elapsed: float = 0.0

    solved = False
    moves = ()


SolveResult = Solution | NoSolutionFound

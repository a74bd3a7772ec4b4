"""Search nodes and path reconstruction."""

from __future__ import annotations

from dataclasses import dataclass

from eightpuzzle.models.board import Move
from eightpuzzle.models.state import State


@dataclass(slots=True)
class SearchNode:
    state: State
    blank: tuple[int, int]
    move: Move | None = None
    parent: SearchNode | None = None
    g: int = 0
    h: int = 0

    @property
    def f(self) -> int:
        return self.g + self.h


def reconstruct_path(node: SearchNode) -> list[Move]:
    """Walk parent links back to the root and return the moves start→goal."""
    moves: list[Move] = []
    while node.parent is not None:
        moves.append(node.move)  # type: ignore[arg-type]
        node = node.parent
    moves.reverse()
    return moves

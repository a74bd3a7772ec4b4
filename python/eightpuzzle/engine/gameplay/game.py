"""Move playback: applies solver moves to a board and checks the win."""

from __future__ import annotations

from collections.abc import Iterable

from eightpuzzle.models.board import Board, Move


class GamePlay:
    """Replays ``(row, col)`` moves on a private copy of a board."""

    def __init__(self, board: Board) -> None:
        self.board = board.copy()
        self.moves: int = 0
        self.history: list[Move] = []

    # -- movement (row, col = the tile that slides into the blank) ------------

    def move_tile(self, row: int, col: int) -> bool:
        """Move the tile at (row, col) into the adjacent blank.

        Returns True if the tile was adjacent to the blank and the move
        was applied.
        """
        br, bc = self.board.blank_pos

        if not (0 <= row < Board.size and 0 <= col < Board.size):
            return False
        if abs(row - br) + abs(col - bc) != 1:
            return False

        self._swap(self.board, (row, col))
        self.moves += 1
        self.history.append(Move(row, col))
        return True

    def play(self, moves: Iterable[Move]) -> int:
        """Apply *moves* in order; return how many were applied.

        Stops at the first illegal move.
        """
        applied = 0
        for move in moves:
            if not self.move_tile(move.row, move.col):
                break
            applied += 1
        return applied

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.board.is_solved()

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _swap(board: Board, target: tuple[int, int]) -> None:
        br, bc = board.blank_pos
        tr, tc = target
        board.tiles[br][bc], board.tiles[tr][tc] = (
            board.tiles[tr][tc],
            board.tiles[br][bc],
        )
        board.blank_pos = (tr, tc)

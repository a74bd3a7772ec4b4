"""Rich terminal rendering of boards, move lists and replays."""

from __future__ import annotations

import time
from collections.abc import Sequence

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from eightpuzzle.config import REPLAY_DELAY
from eightpuzzle.engine.gameplay import GamePlay
from eightpuzzle.engine.gamesolver import SolveResult, Termination
from eightpuzzle.models.board import Board, Move


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, highlight: Move | None = None) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=2, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif highlight is not None and (r, c) == tuple(highlight):
                cells.append(f"[bold cyan]{val}[/bold cyan]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val}[/bold green]")
            else:
                cells.append(f"[bold white]{val}[/bold white]")
        table.add_row(*cells)

    return table


def render_moves(moves: Sequence[Move]) -> Table:
    """Numbered move list, one row per blank displacement."""
    table = Table(title="Moves", box=rich.box.SIMPLE_HEAVY, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Row", justify="center")
    table.add_column("Column", justify="center")
    for i, move in enumerate(moves, 1):
        table.add_row(str(i), str(move.row), str(move.col))
    return table


def render_result(result: SolveResult) -> Text:
    text = Text()
    if result.solved:
        text.append(f"Solved in {len(result.moves)} moves", style="bold green")
    elif result.termination is Termination.LIMIT:
        text.append("Gave up: exploration limit reached", style="bold yellow")
    else:
        text.append("No solution found", style="bold red")
    text.append(
        f"  ({result.strategy}, {result.explored} states, {result.elapsed:.3f}s)",
        style="dim",
    )
    return text


def render_comparison(results: Sequence[SolveResult]) -> Table:
    table = Table(title="Strategy comparison", box=rich.box.SIMPLE_HEAVY)
    table.add_column("Strategy", style="bold")
    table.add_column("Moves", justify="right")
    table.add_column("Expanded", justify="right")
    table.add_column("Time (s)", justify="right")
    for result in results:
        moves = str(len(result.moves)) if result.solved else f"[red]{result.termination}[/red]"
        table.add_row(result.strategy, moves, str(result.explored), f"{result.elapsed:.3f}")
    return table


# -- replay -------------------------------------------------------------------


def replay(
    console: Console,
    board: Board,
    moves: Sequence[Move],
    delay: float = REPLAY_DELAY,
) -> GamePlay:
    """Animate *moves* on a copy of *board*; return the finished session."""
    game = GamePlay(board)
    for i, move in enumerate(moves):
        if not game.move_tile(move.row, move.col):
            console.print(f"[red]Move {i + 1} {tuple(move)} is not legal here.[/red]")
            break

        progress = Text()
        progress.append(f"  Solving… move {i + 1}/{len(moves)} ", style="bold cyan")
        progress.append(f"(row {move.row}, column {move.col})", style="dim")

        panel = Panel(
            Align.center(render_board(game.board, highlight=move)),
            title="[bold cyan]Auto-Solve  3×3[/bold cyan]",
            border_style="cyan",
            padding=(1, 2),
        )
        console.clear()
        console.print(Align.center(Group(panel, progress)))
        if delay:
            time.sleep(delay)

    return game

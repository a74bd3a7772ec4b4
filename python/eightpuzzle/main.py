"""8-puzzle solver command line.

Usage::

    eightpuzzle solve 123456708              # A* (default strategy)
    eightpuzzle solve --random -a bfs        # scramble, then BFS
    eightpuzzle solve 867254301 --replay     # animate the solution
    eightpuzzle compare 867254301            # every strategy side by side
    eightpuzzle request payload.json         # JSON request in, JSON response out
"""

import json
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from eightpuzzle import config
from eightpuzzle.engine.gamegenerator import GameGenerator
from eightpuzzle.engine.gamesolver import NoSolutionFound, Solver, Termination
from eightpuzzle.frontend.rich_view import (
    render_board,
    render_comparison,
    render_moves,
    render_result,
    replay,
)
from eightpuzzle.logs import setup_logging
from eightpuzzle.models.board import Board
from eightpuzzle.models.errors import InvalidShape, PuzzleError
from eightpuzzle.service.request import (
    NO_SOLUTION_MESSAGE,
    SOLVED_MESSAGE,
    handle_solve_request,
)

console = Console()

EXIT_BAD_INPUT = 1
EXIT_NO_SOLUTION = 3


class Strategy(StrEnum):
    bfs = "bfs"
    bidirectional = "bidirectional"
    astar = "astar"


# -- helpers ------------------------------------------------------------------


def _parse_grid(text: str) -> list[list[int]]:
    """Accept ``123456708``, ``1,2,3,4,5,6,7,0,8`` or a JSON 3×3 array."""
    text = text.strip()
    if text.startswith("["):
        try:
            grid = json.loads(text)
        except json.JSONDecodeError as exc:
            raise InvalidShape(f"Not valid JSON: {exc}") from None
        return grid

    parts = text.split(",") if "," in text else list(text)
    try:
        flat = [int(p) for p in parts]
    except ValueError:
        raise InvalidShape(f"Cannot read a 3x3 grid from {text!r}.") from None
    if len(flat) != 9:
        raise InvalidShape(f"Expected 9 cells, got {len(flat)}.")
    return [flat[r * 3 : r * 3 + 3] for r in range(3)]


def _load_board(grid: Optional[str], random_board: bool, seed: Optional[int], steps: int) -> Board:
    if random_board or grid is None:
        return GameGenerator.generate(steps=steps, seed=seed)
    try:
        return Board.from_grid(_parse_grid(grid))
    except PuzzleError as exc:
        console.print(f"[red]Invalid puzzle:[/red] {exc}")
        raise typer.Exit(code=EXIT_BAD_INPUT)


def _exit_unsolvable(board: Board) -> None:
    console.print(render_board(board))
    console.print("[red]Board is unsolvable[/red] [dim](odd inversion parity)[/dim]")
    raise typer.Exit(code=EXIT_NO_SOLUTION)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, help="Solve the 8-puzzle.")

_GRID = typer.Argument(None, help="Start grid, e.g. 123456708. Omit for a random board.")
_RANDOM = typer.Option(False, "--random", "-r", help="Solve a random scrambled board.")
_SEED = typer.Option(None, "--seed", help="Seed for --random.")
_STEPS = typer.Option(config.SCRAMBLE_STEPS, "--steps", min=0, help="Scramble length for --random.")
_MAX_EXPLORED = typer.Option(
    config.MAX_EXPLORED_STATES, "--max-explored", min=1,
    envvar="EIGHTPUZZLE_MAX_EXPLORED",
    help="Give up after expanding this many states.",
)
_PARITY = typer.Option(
    True, "--parity-check/--no-parity-check",
    help="Reject unsolvable boards before searching.",
)
_STRATEGY = typer.Option(
    Strategy(config.DEFAULT_STRATEGY), "-a", "--strategy",
    envvar="EIGHTPUZZLE_STRATEGY",
    help="Search strategy.",
)
_VERBOSE = typer.Option(False, "--verbose", "-v", help="Log search progress.")


@app.command()
def solve(
    grid: Optional[str] = _GRID,
    strategy: Strategy = _STRATEGY,
    random_board: bool = _RANDOM,
    seed: Optional[int] = _SEED,
    steps: int = _STEPS,
    max_explored: int = _MAX_EXPLORED,
    parity_check: bool = _PARITY,
    show_replay: bool = typer.Option(False, "--replay", help="Animate the solution."),
    delay: float = typer.Option(config.REPLAY_DELAY, "--delay", min=0.0, help="Seconds per replayed move."),
    as_json: bool = typer.Option(False, "--json", help="Print the moves as JSON."),
    verbose: bool = _VERBOSE,
) -> None:
    """Solve one board and print its move list."""
    setup_logging(verbose)
    board = _load_board(grid, random_board, seed, steps)

    if parity_check and not Solver.is_solvable(board):
        if as_json:
            typer.echo(json.dumps({"message": NO_SOLUTION_MESSAGE}))
            raise typer.Exit(code=EXIT_NO_SOLUTION)
        _exit_unsolvable(board)

    result = Solver.solve(board, strategy.value, max_explored)

    if as_json:
        body: dict = {"message": NO_SOLUTION_MESSAGE}
        if result.solved:
            body = {"message": SOLVED_MESSAGE, "moves": [m.as_list() for m in result.moves]}
        typer.echo(json.dumps(body))
    else:
        console.print(render_board(board))
        console.print(render_result(result))
        if result.solved and result.moves:
            console.print(render_moves(result.moves))

    if isinstance(result, NoSolutionFound):
        raise typer.Exit(code=EXIT_NO_SOLUTION)

    if show_replay and result.moves:
        game = replay(console, board, result.moves, delay)
        console.print(
            "[bold green]Solved![/bold green]" if game.is_won else "[red]Replay did not reach the goal.[/red]"
        )


@app.command()
def compare(
    grid: Optional[str] = _GRID,
    random_board: bool = _RANDOM,
    seed: Optional[int] = _SEED,
    steps: int = _STEPS,
    max_explored: int = _MAX_EXPLORED,
    parity_check: bool = _PARITY,
    verbose: bool = _VERBOSE,
) -> None:
    """Run every strategy on the same board."""
    setup_logging(verbose)
    board = _load_board(grid, random_board, seed, steps)
    if parity_check and not Solver.is_solvable(board):
        _exit_unsolvable(board)

    results = [Solver.solve(board, name, max_explored) for name in Solver.strategies()]
    console.print(render_board(board))
    console.print(render_comparison(results))

    lengths = {len(r.moves) for r in results if r.solved}
    if len(lengths) > 1:
        console.print("[yellow]Strategies disagree on solution length.[/yellow]")
    if any(r.termination is not Termination.OK for r in results):
        raise typer.Exit(code=EXIT_NO_SOLUTION)


@app.command()
def scramble(
    steps: int = _STEPS,
    seed: Optional[int] = _SEED,
) -> None:
    """Print a random solvable board."""
    board = GameGenerator.generate(steps=steps, seed=seed)
    console.print(render_board(board))
    typer.echo("".join(str(v) for v in board.key()))


@app.command()
def request(
    path: Path = typer.Argument(..., allow_dash=True, help="JSON request body, or - for stdin."),
    strategy: Strategy = _STRATEGY,
    max_explored: int = _MAX_EXPLORED,
    verbose: bool = _VERBOSE,
) -> None:
    """Answer a ``{"puzzle": [[...]]}`` request the way the HTTP API would."""
    setup_logging(verbose)
    raw = sys.stdin.read() if str(path) == "-" else path.read_text()
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        typer.echo(json.dumps({"error": f"Malformed JSON: {exc.msg}"}))
        raise typer.Exit(code=EXIT_BAD_INPUT)

    status, body = handle_solve_request(payload, strategy.value, max_explored)
    typer.echo(json.dumps(body))
    if status != 200:
        raise typer.Exit(code=EXIT_BAD_INPUT)


if __name__ == "__main__":
    app()

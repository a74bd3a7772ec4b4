from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from eightpuzzle.main import EXIT_BAD_INPUT, EXIT_NO_SOLUTION, _parse_grid, app
from eightpuzzle.models import InvalidShape

runner = CliRunner()


@pytest.mark.parametrize(
    "text",
    ["123456708", "1,2,3,4,5,6,7,0,8", "[[1,2,3],[4,5,6],[7,0,8]]"],
)
def test_parse_grid_formats(text: str) -> None:
    assert _parse_grid(text) == [[1, 2, 3], [4, 5, 6], [7, 0, 8]]


@pytest.mark.parametrize("text", ["12345678", "12345678x", "[[1,2"])
def test_parse_grid_rejects(text: str) -> None:
    with pytest.raises(InvalidShape):
        _parse_grid(text)


@pytest.mark.parametrize("strategy", ["bfs", "bidirectional", "astar"])
def test_solve_json(strategy: str) -> None:
    result = runner.invoke(app, ["solve", "123456708", "--json", "-a", strategy])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"message": "Puzzle solved!", "moves": [[2, 2]]}


def test_solve_pretty_output() -> None:
    result = runner.invoke(app, ["solve", "413726058"])
    assert result.exit_code == 0, result.output
    assert "Solved in 6 moves" in result.output


def test_solve_random_board() -> None:
    result = runner.invoke(app, ["solve", "--random", "--seed", "3", "--json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["message"] == "Puzzle solved!"


def test_solve_with_replay() -> None:
    result = runner.invoke(app, ["solve", "123405786", "--replay", "--delay", "0"])
    assert result.exit_code == 0, result.output
    assert "Solved!" in result.output


def test_solve_bad_grid() -> None:
    result = runner.invoke(app, ["solve", "123456788"])
    assert result.exit_code == EXIT_BAD_INPUT


def test_solve_unsolvable_parity_check() -> None:
    result = runner.invoke(app, ["solve", "213456780", "--json"])
    assert result.exit_code == EXIT_NO_SOLUTION
    assert json.loads(result.output) == {"message": "No solution found."}


def test_solve_exploration_limit() -> None:
    result = runner.invoke(app, ["solve", "867254301", "--max-explored", "5", "-a", "bfs"])
    assert result.exit_code == EXIT_NO_SOLUTION
    assert "exploration limit" in result.output


def test_strategy_from_environment() -> None:
    result = runner.invoke(
        app, ["solve", "123456708", "--json"], env={"EIGHTPUZZLE_STRATEGY": "bfs"}
    )
    assert result.exit_code == 0, result.output


def test_unknown_strategy() -> None:
    result = runner.invoke(app, ["solve", "123456708", "-a", "dfs"])
    assert result.exit_code != 0


def test_compare() -> None:
    result = runner.invoke(app, ["compare", "413726058"])
    assert result.exit_code == 0, result.output
    for name in ("bfs", "bidirectional", "astar"):
        assert name in result.output
    assert "disagree" not in result.output


def test_scramble_prints_solvable_digits() -> None:
    result = runner.invoke(app, ["scramble", "--seed", "1"])
    assert result.exit_code == 0
    digits = result.output.strip().splitlines()[-1]
    assert sorted(digits) == list("012345678")


def test_request_from_file(tmp_path) -> None:
    path = tmp_path / "payload.json"
    path.write_text(json.dumps({"puzzle": [[1, 2, 3], [4, 5, 6], [7, 0, 8]]}))
    result = runner.invoke(app, ["request", str(path)])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["moves"] == [[2, 2]]


def test_request_from_stdin_invalid_shape() -> None:
    result = runner.invoke(app, ["request", "-"], input=json.dumps({"puzzle": [[1, 2, 3]]}))
    assert result.exit_code == EXIT_BAD_INPUT
    assert "error" in json.loads(result.output)


def test_request_malformed_json() -> None:
    result = runner.invoke(app, ["request", "-"], input="{not json")
    assert result.exit_code == EXIT_BAD_INPUT

"""Cross-checks between the three strategies on generated boards."""

from __future__ import annotations

import pytest

from eightpuzzle.engine.gamegenerator import GameGenerator
from eightpuzzle.engine.gamesolver import (
    NoSolutionFound,
    Termination,
    a_star,
    bfs,
    bidirectional_bfs,
    manhattan,
)
from eightpuzzle.engine.gamesolver.bidirectional import (
    Trail,
    reverse_goal_path,
    trail_moves,
)
from eightpuzzle.engine.transitions import apply_move
from eightpuzzle.models import GOAL_STATE, MalformedState, Move, is_goal, locate_blank

SEEDS = list(range(12))


def _replay(start: tuple[int, ...], moves: list[Move]) -> tuple[int, ...]:
    state = start
    for move in moves:
        state = apply_move(state, locate_blank(state), move)
    return state


@pytest.mark.parametrize("seed", SEEDS)
def test_strategies_agree_on_minimal_length(seed: int) -> None:
    start = GameGenerator.generate(steps=40 + seed, seed=seed).key()

    by_bfs = bfs(start)
    by_bidir = bidirectional_bfs(start)
    by_astar = a_star(start)

    assert len(by_bfs.moves) == len(by_bidir.moves) == len(by_astar.moves)
    for result in (by_bfs, by_bidir, by_astar):
        assert is_goal(_replay(start, result.moves))


def test_astar_with_zero_heuristic_is_still_optimal() -> None:
    start = (4, 1, 3, 7, 2, 6, 0, 5, 8)
    result = a_star(start, hfun=lambda s: 0)
    assert len(result.moves) == 6


def test_results_are_reproducible() -> None:
    start = (8, 6, 7, 2, 5, 4, 3, 0, 1)
    for search in (bfs, bidirectional_bfs, a_star):
        first = search(start)
        second = search(start)
        assert first.moves == second.moves
        assert first.explored == second.explored


def test_astar_expands_fewer_states_than_bfs() -> None:
    start = (8, 6, 7, 2, 5, 4, 3, 0, 1)
    assert a_star(start).explored < bfs(start).explored


@pytest.mark.parametrize("search", [bfs, bidirectional_bfs, a_star])
def test_exploration_limit(search) -> None:
    result = search((8, 6, 7, 2, 5, 4, 3, 0, 1), max_explored=10)
    assert isinstance(result, NoSolutionFound)
    assert result.termination is Termination.LIMIT
    assert result.explored == 10


@pytest.mark.parametrize("search", [bfs, bidirectional_bfs, a_star])
def test_malformed_start_rejected(search) -> None:
    with pytest.raises(MalformedState):
        search((1, 2, 3, 4, 5, 6, 7, 8, 9))


# -- heuristic ----------------------------------------------------------------


def test_manhattan() -> None:
    assert manhattan(GOAL_STATE) == 0
    assert manhattan((1, 2, 3, 4, 5, 6, 7, 0, 8)) == 1
    assert manhattan((4, 1, 3, 7, 2, 6, 0, 5, 8)) == 6
    assert manhattan((8, 6, 7, 2, 5, 4, 3, 0, 1)) == 21


@pytest.mark.parametrize("seed", SEEDS[:4])
def test_manhattan_never_overestimates(seed: int) -> None:
    start = GameGenerator.generate(steps=30, seed=seed).key()
    assert manhattan(start) <= len(bfs(start).moves)


# -- bidirectional path joining ------------------------------------------------


def test_trail_moves_in_order() -> None:
    trail = Trail(Move(0, 0), Trail(Move(0, 1), Trail(Move(1, 1), None)))
    assert trail_moves(trail) == [Move(1, 1), Move(0, 1), Move(0, 0)]
    assert trail_moves(None) == []


def test_reverse_goal_path_walks_back_to_goal_blank() -> None:
    # From the goal the blank went up twice: (1, 2) then (0, 2).
    assert reverse_goal_path([Move(1, 2), Move(0, 2)]) == [Move(1, 2), Move(2, 2)]
    assert reverse_goal_path([]) == []


def test_bidirectional_meets_on_goal_side() -> None:
    start = (1, 2, 0, 4, 5, 3, 7, 8, 6)
    result = bidirectional_bfs(start)
    assert result.moves == [Move(1, 2), Move(2, 2)]

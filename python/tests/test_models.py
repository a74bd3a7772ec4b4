from __future__ import annotations

import itertools

import pytest

from eightpuzzle.models import (
    GOAL_STATE,
    Board,
    InvalidShape,
    MalformedState,
    canonical_key,
    check_state,
    is_goal,
    locate_blank,
)


def test_canonical_key_flat_and_nested_agree() -> None:
    grid = [[8, 6, 7], [2, 5, 4], [3, 0, 1]]
    assert canonical_key(grid) == canonical_key([8, 6, 7, 2, 5, 4, 3, 0, 1])
    assert canonical_key(grid) == (8, 6, 7, 2, 5, 4, 3, 0, 1)


def test_canonical_key_survives_mutate_and_restore() -> None:
    board = Board.from_grid([[1, 2, 3], [4, 5, 6], [7, 0, 8]])
    before = board.key()
    t = board.tiles
    t[2][1], t[2][2] = t[2][2], t[2][1]
    assert board.key() != before
    t[2][1], t[2][2] = t[2][2], t[2][1]
    assert board.key() == before


def test_canonical_key_is_injective_over_all_permutations() -> None:
    keys = {canonical_key(p) for p in itertools.permutations(range(9))}
    assert len(keys) == 362_880


def test_is_goal() -> None:
    assert is_goal(GOAL_STATE)
    assert is_goal(canonical_key([[1, 2, 3], [4, 5, 6], [7, 8, 0]]))
    assert not is_goal((1, 2, 3, 4, 5, 6, 7, 0, 8))


@pytest.mark.parametrize(
    "state, blank",
    [
        ((0, 1, 2, 3, 4, 5, 6, 7, 8), (0, 0)),
        ((1, 2, 3, 4, 0, 5, 6, 7, 8), (1, 1)),
        ((1, 2, 3, 4, 5, 6, 7, 0, 8), (2, 1)),
        (GOAL_STATE, (2, 2)),
    ],
)
def test_locate_blank(state: tuple[int, ...], blank: tuple[int, int]) -> None:
    assert locate_blank(state) == blank


def test_locate_blank_without_zero() -> None:
    with pytest.raises(MalformedState):
        locate_blank((1, 2, 3, 4, 5, 6, 7, 8, 9))


@pytest.mark.parametrize(
    "state",
    [
        (1, 2, 3, 4, 5, 6, 7, 8, 8),
        (1, 2, 3, 4, 5, 6, 7, 8, 9),
        (1, 2, 3, 4, 5, 6, 7, 8),
        (1, 2, 3, 4, 5, 6, 7, 8, "0"),
        (1, 2, 3, 4, 5, 6, 7, 8, -1),
    ],
)
def test_check_state_rejects(state: tuple) -> None:
    with pytest.raises(MalformedState):
        check_state(state)


@pytest.mark.parametrize(
    "grid",
    [
        None,
        "123456780",
        [[1, 2, 3], [4, 5, 6]],
        [[1, 2, 3], [4, 5, 6], [7, 8]],
        [[1, 2, 3, 4], [5, 6, 7, 8], [0]],
        [[1, 2, 3], [4, 5, 6], "780"],
        [1, 2, 3, 4, 5, 6, 7, 8, 0],
    ],
)
def test_from_grid_invalid_shape(grid) -> None:
    with pytest.raises(InvalidShape):
        Board.from_grid(grid)


def test_from_grid_malformed_values() -> None:
    with pytest.raises(MalformedState):
        Board.from_grid([[1, 2, 3], [4, 5, 6], [7, 8, 9]])


def test_board_caches_blank() -> None:
    board = Board.from_grid([[4, 1, 3], [7, 2, 6], [0, 5, 8]])
    assert board.blank_pos == (2, 0)
    assert board.get_tile(0, 0) == 4
    assert not board.is_solved()
    assert board.is_tile_correct(0, 2)
    assert not board.is_tile_correct(0, 0)


def test_board_copy_is_independent() -> None:
    board = Board.from_flat([1, 2, 3, 4, 5, 6, 7, 8, 0])
    clone = board.copy()
    clone.tiles[0][0] = 9
    assert board.tiles[0][0] == 1
    assert board.is_solved()

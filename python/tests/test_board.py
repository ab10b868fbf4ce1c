"""Board model and grid geometry helpers."""

from __future__ import annotations

import pytest

from backend.models.board import (
    Board,
    Direction,
    can_move,
    neighbour,
    neighbours,
    solved_cells,
)


# -- edge tests ---------------------------------------------------------------


@pytest.mark.parametrize(
    "index, direction, expected",
    [
        (0, Direction.UP, False),
        (3, Direction.UP, False),
        (4, Direction.UP, True),
        (11, Direction.DOWN, True),
        (12, Direction.DOWN, False),
        (15, Direction.DOWN, False),
        (0, Direction.LEFT, False),
        (8, Direction.LEFT, False),
        (9, Direction.LEFT, True),
        (3, Direction.RIGHT, False),
        (15, Direction.RIGHT, False),
        (14, Direction.RIGHT, True),
    ],
)
def test_can_move_4x4(index: int, direction: Direction, expected: bool) -> None:
    assert can_move(index, direction, 4) is expected


def test_neighbour_does_not_wrap_rows() -> None:
    # 4 is the first cell of row 1; 3 is the last cell of row 0.
    assert neighbour(4, Direction.LEFT, 4) is None
    assert neighbour(3, Direction.RIGHT, 4) is None
    assert 3 not in neighbours(4, 4)


@pytest.mark.parametrize(
    "index, expected",
    [
        (0, {1: Direction.RIGHT, 4: Direction.DOWN}),
        (15, {11: Direction.UP, 14: Direction.LEFT}),
        (
            5,
            {
                1: Direction.UP,
                9: Direction.DOWN,
                4: Direction.LEFT,
                6: Direction.RIGHT,
            },
        ),
    ],
)
def test_neighbours(index: int, expected: dict[int, Direction]) -> None:
    assert neighbours(index, 4) == expected


# -- board --------------------------------------------------------------------


def test_solved_cells() -> None:
    assert solved_cells(4) == list(range(1, 16)) + [0]
    assert solved_cells(3) == [1, 2, 3, 4, 5, 6, 7, 8, 0]


def test_from_flat_finds_blank() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert board.blank_index == 7
    assert not board.is_solved()
    assert board.rows() == [[1, 2, 3], [4, 5, 6], [7, 0, 8]]


@pytest.mark.parametrize(
    "flat",
    [
        [1, 2, 3, 4, 5, 6, 7, 8],
        [1, 2, 3, 4, 5, 6, 7, 8, 8],
        [1, 2, 3, 4, 5, 6, 7, 8, 9],
    ],
)
def test_from_flat_rejects_non_permutations(flat: list[int]) -> None:
    with pytest.raises(ValueError):
        Board.from_flat(3, flat)


def test_swap_moves_blank() -> None:
    board = Board.from_flat(2, [1, 2, 3, 0])
    board.swap(2)
    assert board.cells == [1, 2, 0, 3]
    assert board.blank_index == 2
    assert board.is_tile_correct(0)
    assert not board.is_tile_correct(3)


def test_copy_is_independent() -> None:
    board = Board.from_flat(2, [1, 2, 3, 0])
    clone = board.copy()
    clone.swap(1)
    assert board.cells == [1, 2, 3, 0]
    assert board.blank_index == 3

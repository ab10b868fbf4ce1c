"""Shuffle generation — random walks from the solved board."""

from __future__ import annotations

import random

import pytest

from backend.engine.gamegenerator import GameGenerator, ShuffleError
from backend.engine.gameplay import PuzzleBoard
from backend.models.board import Board, Direction, neighbour

_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


# -- helpers ------------------------------------------------------------------


def _assert_permutation(board: Board) -> None:
    assert sorted(board.cells) == list(range(board.size))
    assert board.cells[board.blank_index] == 0


# -- tests --------------------------------------------------------------------


def test_solved_board() -> None:
    board = GameGenerator.solved(4)
    assert board.cells == list(range(1, 16)) + [0]
    assert board.blank_index == 15
    assert board.is_solved()


def test_step_off_the_edge_is_spent() -> None:
    board = GameGenerator.solved(4)
    assert not GameGenerator.step(board, Direction.DOWN)
    assert not GameGenerator.step(board, Direction.RIGHT)
    assert board.is_solved()

    assert GameGenerator.step(board, Direction.UP)
    assert board.blank_index == 11


def test_scramble_steps_are_an_upper_bound() -> None:
    board = GameGenerator.solved(4)
    walk = GameGenerator.scramble(board, 200, random.Random(7))
    assert len(walk) <= 200
    # From a corner at least some of 200 draws must point off the grid.
    assert len(walk) < 200
    _assert_permutation(board)


@pytest.mark.parametrize("seed", range(20))
def test_scramble_is_solvable_by_reversing_the_walk(seed: int) -> None:
    board = GameGenerator.solved(4)
    walk = GameGenerator.scramble(board, 60, random.Random(seed))

    game = PuzzleBoard.from_board(board)
    for direction in reversed(walk):
        target = neighbour(game.blank_index, _OPPOSITE[direction], game.side)
        assert target is not None
        assert game.move(target), f"Replay failed at blank {game.blank_index}"

    assert game.is_solved().solved


@pytest.mark.parametrize("complexity", [1, 2, 5])
@pytest.mark.parametrize("seed", range(25))
def test_generate_never_returns_solved(complexity: int, seed: int) -> None:
    board = GameGenerator.generate(complexity, side=4, rng=random.Random(seed))
    assert not board.is_solved()
    _assert_permutation(board)


def test_generate_is_deterministic_for_a_seed() -> None:
    a = GameGenerator.generate(3, rng=random.Random(1234))
    b = GameGenerator.generate(3, rng=random.Random(1234))
    assert a == b


def test_generate_rejects_zero_complexity() -> None:
    with pytest.raises(ValueError):
        GameGenerator.generate(0)


def test_generate_gives_up_when_no_move_is_possible() -> None:
    # A 1×1 board has no moves, so every walk ends solved.
    with pytest.raises(ShuffleError):
        GameGenerator.generate(1, side=1, rng=random.Random(0))


@pytest.mark.parametrize("side", [0, -2])
def test_solved_rejects_empty_grid(side: int) -> None:
    with pytest.raises(ValueError):
        GameGenerator.solved(side)

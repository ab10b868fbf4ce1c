"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from backend.models.board import SIDE, Board, Direction, neighbour, solved_cells

logger = logging.getLogger(__name__)

# Random-walk steps per unit of complexity.
COMPLEXITY_COEF = 10
MAX_ATTEMPTS = 1000


class ShuffleError(RuntimeError):
    """Every random walk ended on the solved board."""


class GameGenerator:
    """Creates solvable puzzles by random-walking from the solved state.

    Every step is a swap and therefore its own inverse, so any board the
    walk reaches can be walked back to the goal.
    """

    @staticmethod
    def solved(side: int = SIDE) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        if side < 1:
            raise ValueError(f"side must be >= 1, got {side}.")
        return Board(side=side, cells=solved_cells(side), blank_index=side * side - 1)

    @staticmethod
    def random_direction(rng: random.Random) -> Direction:
        return rng.choice(list(Direction))

    @staticmethod
    def step(board: Board, direction: Direction) -> bool:
        """Move the blank one cell in *direction*; False if it sits on that edge."""
        target = neighbour(board.blank_index, direction, board.side)
        if target is None:
            return False
        board.swap(target)
        return True

    @staticmethod
    def scramble(board: Board, steps: int, rng: random.Random) -> list[Direction]:
        """Scramble *board* in-place with *steps* random blank moves.

        A step pointing off the grid is spent without moving anything.
        Returns the directions that were actually applied, in order.
        """
        walk: list[Direction] = []
        for _ in range(steps):
            direction = GameGenerator.random_direction(rng)
            if GameGenerator.step(board, direction):
                walk.append(direction)
        return walk

    @staticmethod
    def generate(
        complexity: int,
        side: int = SIDE,
        rng: random.Random | None = None,
    ) -> Board:
        """Return a random *solvable*, not yet solved board."""
        if complexity < 1:
            raise ValueError(f"complexity must be >= 1, got {complexity}.")
        rng = rng or random.Random()
        steps = complexity * COMPLEXITY_COEF

        for attempt in range(1, MAX_ATTEMPTS + 1):
            board = GameGenerator.solved(side)
            walk = GameGenerator.scramble(board, steps, rng)
            if not board.is_solved():
                logger.debug(
                    "Shuffled %dx%d board in %d attempt(s), %d/%d effective steps",
                    side, side, attempt, len(walk), steps,
                )
                return board
            logger.debug("Attempt %d returned to the solved board, retrying", attempt)

        raise ShuffleError(
            f"No unsolved board after {MAX_ATTEMPTS} walks of {steps} steps."
        )

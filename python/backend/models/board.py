"""Board model for the sliding puzzle game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

SIDE = 4
EMPTY = 0


class Direction(StrEnum):
    """Direction the *blank* travels when it swaps with a neighbour."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# -- geometry helpers ---------------------------------------------------------


def can_move(index: int, direction: Direction, side: int = SIDE) -> bool:
    """Return True if *index* is not on the grid edge facing *direction*."""
    if direction == Direction.UP:
        return index >= side
    if direction == Direction.DOWN:
        return index < side * side - side
    if direction == Direction.LEFT:
        return index % side != 0
    return index % side != side - 1


def offset(direction: Direction, side: int = SIDE) -> int:
    return {
        Direction.UP: -side,
        Direction.DOWN: side,
        Direction.LEFT: -1,
        Direction.RIGHT: 1,
    }[direction]


def neighbour(index: int, direction: Direction, side: int = SIDE) -> int | None:
    """Return the cell next to *index* in *direction*, or ``None`` at an edge."""
    if not can_move(index, direction, side):
        return None
    return index + offset(direction, side)


def neighbours(index: int, side: int = SIDE) -> dict[int, Direction]:
    """Map every valid neighbour of *index* to the direction leading to it."""
    result: dict[int, Direction] = {}
    for direction in Direction:
        cell = neighbour(index, direction, side)
        if cell is not None:
            result[cell] = direction
    return result


def solved_cells(side: int = SIDE) -> list[int]:
    """Goal ordering: cell ``i`` holds ``i + 1``, the last cell is blank."""
    size = side * side
    return [(i + 1) % size for i in range(size)]


# -- board --------------------------------------------------------------------


@dataclass
class Board:
    """Represents the sliding puzzle board.

    Tiles are stored as a flat row-major list of ints. 0 represents the
    blank space.
    """

    side: int
    cells: list[int]
    blank_index: int

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, side: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        size = side * side
        if len(flat) != size:
            raise ValueError(
                f"Expected {size} tiles for a {side}×{side} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(size)):
            raise ValueError(
                f"Tiles must be a permutation of 0..{size - 1}, got {flat}."
            )
        cells = list(flat)
        return cls(side=side, cells=cells, blank_index=cells.index(EMPTY))

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.side * self.side

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        size = self.size
        return all(v == (i + 1) % size for i, v in enumerate(self.cells))

    def is_tile_correct(self, index: int) -> bool:
        """Check if a specific tile is in its goal position."""
        return self.cells[index] == (index + 1) % self.size

    def rows(self) -> list[list[int]]:
        return [
            self.cells[r * self.side : (r + 1) * self.side]
            for r in range(self.side)
        ]

    # -- mutation -------------------------------------------------------------

    def swap(self, index: int) -> None:
        """Swap the blank with the tile at *index*; the blank lands on *index*."""
        blank = self.blank_index
        self.cells[blank], self.cells[index] = self.cells[index], self.cells[blank]
        self.blank_index = index

    def copy(self) -> Board:
        return Board(
            side=self.side,
            cells=self.cells[:],
            blank_index=self.blank_index,
        )

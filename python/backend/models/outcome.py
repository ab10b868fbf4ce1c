"""Result types returned by the puzzle engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MoveRecord:
    """One undo-history entry: the two cells swapped by a move."""

    tile_index: int
    blank_index: int


@dataclass(frozen=True)
class MoveResult:
    success: bool
    blank_index: int | None = None

    def __bool__(self) -> bool:
        return self.success


@dataclass(frozen=True)
class UndoResult:
    """Outcome of an undo.

    ``restored`` holds ``(tile_index, blank_index)``: the cell the blank
    left and the cell it returned to.
    """

    success: bool
    restored: tuple[int, int] | None = None

    def __bool__(self) -> bool:
        return self.success


@dataclass(frozen=True)
class SolvedStatus:
    solved: bool
    moves: int | None = None

    def __bool__(self) -> bool:
        return self.solved

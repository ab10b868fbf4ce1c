"""Core gameplay logic — validates moves, keeps undo history, checks win."""

from __future__ import annotations

import logging
import random

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamestate import GameState
from backend.models.board import SIDE, Board, neighbours
from backend.models.outcome import MoveRecord, MoveResult, SolvedStatus, UndoResult

logger = logging.getLogger(__name__)


class PuzzleBoard:
    """State engine for a single puzzle instance.

    Not thread-safe: callers that share an instance must serialise access.
    """

    def __init__(
        self,
        shuffled: bool = False,
        complexity: int = 1,
        *,
        side: int = SIDE,
        rng: random.Random | None = None,
    ) -> None:
        if shuffled:
            board = GameGenerator.generate(complexity, side=side, rng=rng)
        else:
            board = GameGenerator.solved(side)
        self.state = GameState(board)

    @classmethod
    def from_board(cls, board: Board) -> "PuzzleBoard":
        """Create an engine around an existing board; it becomes the start snapshot."""
        obj = object.__new__(cls)
        obj.state = GameState(board)
        return obj

    # -- queries --------------------------------------------------------------

    @property
    def side(self) -> int:
        return self.state.board.side

    @property
    def blank_index(self) -> int:
        return self.state.board.blank_index

    @property
    def moves(self) -> int:
        return self.state.moves

    def get_board(self) -> tuple[int, ...]:
        return tuple(self.state.board.cells)

    def is_solved(self) -> SolvedStatus:
        """Return the solved flag and, when solved, the moves it took."""
        if self.state.solved:
            return SolvedStatus(True, self.state.moves)
        return SolvedStatus(False)

    # -- mutation -------------------------------------------------------------

    def move(self, target_index: int) -> MoveResult:
        """Slide the tile at *target_index* into the adjacent blank.

        On success the blank now sits at *target_index*, which is returned.
        """
        board = self.state.board
        blank = board.blank_index

        if target_index not in neighbours(blank, board.side):
            logger.debug("Rejected move of %s: blank is at %d", target_index, blank)
            return MoveResult(False)

        board.swap(target_index)
        self.state.push(MoveRecord(tile_index=target_index, blank_index=blank))
        return MoveResult(True, target_index)

    def undo(self) -> UndoResult:
        record = self.state.pop()
        if record is None:
            logger.debug("Nothing to undo")
            return UndoResult(False)

        self.state.board.swap(record.blank_index)
        self.state.refresh()
        logger.debug(
            "Undid move %d -> %d, %d move(s) left",
            record.tile_index, record.blank_index, self.state.moves,
        )
        return UndoResult(True, (record.tile_index, record.blank_index))

    def reset(self) -> None:
        """Return to the start snapshot; a no-op when no moves were made."""
        if self.state.moves != 0:
            logger.debug("Resetting after %d move(s)", self.state.moves)
            self.state.restore_start()

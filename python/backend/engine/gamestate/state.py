"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from backend.models.board import Board
from backend.models.outcome import MoveRecord


class GameState:
    """Holds the current board, move counter, undo history and start snapshot."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0
        self.history: list[MoveRecord] = []
        self.solved: bool = board.is_solved()

        self._start_board = board.copy()
        self._start_solved = self.solved

    # -- history --------------------------------------------------------------

    def push(self, record: MoveRecord) -> None:
        self.history.append(record)
        self.moves += 1
        self.refresh()

    def pop(self) -> MoveRecord | None:
        if not self.history:
            return None
        record = self.history.pop()
        self.moves -= 1
        return record

    # -- snapshot -------------------------------------------------------------

    def restore_start(self) -> None:
        self.board = self._start_board.copy()
        self.solved = self._start_solved
        self.moves = 0
        self.history.clear()

    def refresh(self) -> None:
        self.solved = self.board.is_solved()

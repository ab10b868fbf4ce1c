from backend.models.board import SIDE, Board, Direction
from backend.models.outcome import MoveRecord, MoveResult, SolvedStatus, UndoResult

__all__ = [
    "SIDE",
    "Board",
    "Direction",
    "MoveRecord",
    "MoveResult",
    "SolvedStatus",
    "UndoResult",
]

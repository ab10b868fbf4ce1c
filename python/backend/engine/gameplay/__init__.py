from backend.engine.gameplay.game import PuzzleBoard

__all__ = ["PuzzleBoard"]

from backend.engine.gamegenerator.generator import GameGenerator, ShuffleError

__all__ = ["GameGenerator", "ShuffleError"]

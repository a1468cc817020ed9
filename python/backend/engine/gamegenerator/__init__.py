from backend.engine.gamegenerator.shuffler import SHUFFLE_MOVES, Shuffler

__all__ = ["SHUFFLE_MOVES", "Shuffler"]

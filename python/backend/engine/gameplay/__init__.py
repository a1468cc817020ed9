from backend.engine.gameplay.engine import EngineState, PuzzleEngine, create_engine

__all__ = ["EngineState", "PuzzleEngine", "create_engine"]

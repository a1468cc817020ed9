from backend.engine.gamestate.clock import GameClock, format_elapsed

__all__ = ["GameClock", "format_elapsed"]

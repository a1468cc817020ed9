from backend.engine.moveresolver.resolver import MoveResolver

__all__ = ["MoveResolver"]

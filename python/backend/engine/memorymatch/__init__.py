from backend.engine.memorymatch.game import FlipResult, MemoryMatch

__all__ = ["FlipResult", "MemoryMatch"]

from .coords import TriangleCoordinate, TriDirection, TriOrientation

__all__ = ["TriangleCoordinate", "TriDirection", "TriOrientation"]

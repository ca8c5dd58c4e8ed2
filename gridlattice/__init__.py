"""Exact integer coordinates for hexagonal and triangular grids."""

from __future__ import annotations

from .config import KernelSettings, configure, get_settings, load_settings, reset_settings
from .hexgrid import (
    AxialCoordinate,
    Axes,
    EdgeAddress,
    EdgeDirection,
    HexDirection,
    Spin,
    Transform,
    VertexAddress,
    VertexDirection,
)
from .misc import Axes3D
from .triangle import TriangleCoordinate, TriDirection, TriOrientation

__version__ = "0.1.0"

__all__ = [
    "AxialCoordinate",
    "Axes",
    "Axes3D",
    "EdgeAddress",
    "EdgeDirection",
    "HexDirection",
    "KernelSettings",
    "Spin",
    "Transform",
    "TriDirection",
    "TriOrientation",
    "TriangleCoordinate",
    "VertexAddress",
    "VertexDirection",
    "__version__",
    "configure",
    "get_settings",
    "load_settings",
    "reset_settings",
]

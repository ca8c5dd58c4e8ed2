from __future__ import annotations

from ..triangle.coords import TriangleCoordinate
from .coords import AxialCoordinate


def axial_to_cube(a: AxialCoordinate) -> tuple[int, int, int]:
    return a.to_cube()


def cube_to_axial(x: int, y: int, z: int) -> AxialCoordinate:
    if x + y + z != 0:
        raise ValueError("For cube coords, x + y + z must be 0")
    return AxialCoordinate(x, y)


def axial_to_lattice(a: AxialCoordinate) -> TriangleCoordinate:
    """Hex centre as a lattice point of the triangle grid."""

    return TriangleCoordinate(a.q, a.r, -a.q - a.r)


def lattice_to_axial(t: TriangleCoordinate) -> AxialCoordinate:
    if t.is_tri_face():
        raise ValueError(f"{t} is a triangle face, not a lattice point")
    return AxialCoordinate(t.x, t.y)


__all__ = ["axial_to_cube", "axial_to_lattice", "cube_to_axial", "lattice_to_axial"]

"""Hex-grid vertices addressed on the triangle lattice.

Hex centres are the lattice points of a triangle grid and every hex corner is
the centroid of the triangle formed by three mutually adjacent centres. A
vertex is therefore stored as the triangle face it sits in: an up face is the
top corner of the hex below it, a down face the bottom corner of the hex
above it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from ..triangle.coords import TriangleCoordinate, TriOrientation
from .conversions import axial_to_lattice
from .coords import AxialCoordinate

if TYPE_CHECKING:
    from .edge import EdgeAddress

__all__ = ["Spin", "VertexAddress", "VertexDirection"]


class Spin(int, Enum):
    """Whether a vertex is the top or the bottom corner of its owning hex."""

    UP = 0
    DOWN = 1


class VertexDirection(int, Enum):
    """The six corners of a pointy-top hex, clockwise from the top."""

    UP = 0
    UP_RIGHT = 1
    DOWN_RIGHT = 2
    DOWN = 3
    DOWN_LEFT = 4
    UP_LEFT = 5

    @classmethod
    def from_int(cls, value: int) -> VertexDirection:
        if not isinstance(value, int):
            raise TypeError(f"direction must be an int, not {type(value).__name__}")
        return cls(value % 6)

    def opposite(self) -> VertexDirection:
        return VertexDirection((self + 3) % 6)

    def __neg__(self) -> VertexDirection:
        return self.opposite()


_VERTEX_OFFSETS = (
    TriangleCoordinate(1, 0, 1),
    TriangleCoordinate(1, 0, 0),
    TriangleCoordinate(1, 1, 0),
    TriangleCoordinate(0, 1, 0),
    TriangleCoordinate(0, 1, 1),
    TriangleCoordinate(0, 0, 1),
)


@dataclass(frozen=True, slots=True, order=True)
class VertexAddress:
    coord: TriangleCoordinate

    def __add__(self, other: VertexAddress) -> VertexAddress:
        return VertexAddress(self.coord + other.coord)

    def __sub__(self, other: VertexAddress) -> VertexAddress:
        return VertexAddress(self.coord - other.coord)

    def __mul__(self, scalar: int) -> VertexAddress:
        return VertexAddress(self.coord * scalar)

    def __rmul__(self, scalar: int) -> VertexAddress:
        return self * scalar

    def __floordiv__(self, scalar: int) -> VertexAddress:
        return VertexAddress(self.coord // scalar)

    def __neg__(self) -> VertexAddress:
        return VertexAddress(-self.coord)

    @classmethod
    def from_axial(cls, axial: AxialCoordinate, direction: VertexDirection) -> VertexAddress:
        return cls(axial_to_lattice(axial) + _VERTEX_OFFSETS[direction])

    def is_valid(self) -> bool:
        return self.coord.component_sum() in (1, 2)

    def try_to_axial(self) -> tuple[AxialCoordinate, Spin] | None:
        """The hex owning this corner and which of its corners it is."""

        if not self.is_valid():
            return None
        if self.coord.orientation() is TriOrientation.UP:
            centre = self.coord - _VERTEX_OFFSETS[VertexDirection.UP]
            return AxialCoordinate(centre.x, centre.y), Spin.UP
        centre = self.coord - _VERTEX_OFFSETS[VertexDirection.DOWN]
        return AxialCoordinate(centre.x, centre.y), Spin.DOWN

    def adjacent_hexes(self) -> list[AxialCoordinate] | None:
        owner = self.try_to_axial()
        if owner is None:
            return None
        axial, spin = owner
        q, r = axial.q, axial.r
        if spin is Spin.UP:
            return [axial, AxialCoordinate(q, r - 1), AxialCoordinate(q + 1, r - 1)]
        return [axial, AxialCoordinate(q, r + 1), AxialCoordinate(q - 1, r + 1)]

    def adjacent_vertices(self) -> list[VertexAddress] | None:
        if not self.is_valid():
            return None
        return [VertexAddress(coord) for coord in self.coord.neighbors()]

    def adjacent_edges(self) -> list[EdgeAddress] | None:
        from .edge import EdgeAddress, EdgeDirection

        owner = self.try_to_axial()
        if owner is None:
            return None
        axial, spin = owner
        q, r = axial.q, axial.r
        if spin is Spin.UP:
            return [
                EdgeAddress(q + 1, r - 1, EdgeDirection.WEST),
                EdgeAddress(q, r, EdgeDirection.NORTH_EAST),
                EdgeAddress(q, r, EdgeDirection.NORTH_WEST),
            ]
        return [
            EdgeAddress(q, r + 1, EdgeDirection.NORTH_WEST),
            EdgeAddress(q, r + 1, EdgeDirection.WEST),
            EdgeAddress(q - 1, r + 1, EdgeDirection.NORTH_EAST),
        ]

    def distance(self, b: VertexAddress) -> int:
        return self.coord.distance(b.coord)

"""Canonical hex-grid edges.

Each hex owns three of its six sides (west, north-west and north-east); the
other three belong to a neighbour, so every edge has exactly one address.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .coords import AxialCoordinate
from .vertex import VertexAddress, VertexDirection

__all__ = ["EdgeAddress", "EdgeDirection"]


class EdgeDirection(int, Enum):
    WEST = 0
    NORTH_WEST = 1
    NORTH_EAST = 2

    @classmethod
    def from_int(cls, value: int) -> EdgeDirection:
        if not isinstance(value, int):
            raise TypeError(f"direction must be an int, not {type(value).__name__}")
        return cls(value % 3)


@dataclass(frozen=True, slots=True, order=True)
class EdgeAddress:
    q: int
    r: int
    direction: EdgeDirection

    @property
    def axial(self) -> AxialCoordinate:
        return AxialCoordinate(self.q, self.r)

    def adjacent_hexes(self) -> list[AxialCoordinate]:
        """The owning hex followed by the hex across the edge."""

        q, r = self.q, self.r
        if self.direction is EdgeDirection.WEST:
            return [self.axial, AxialCoordinate(q - 1, r)]
        if self.direction is EdgeDirection.NORTH_WEST:
            return [self.axial, AxialCoordinate(q, r - 1)]
        return [self.axial, AxialCoordinate(q + 1, r - 1)]

    def adjacent_edges(self) -> list[EdgeAddress]:
        """The four edges sharing an endpoint with this one."""

        q, r = self.q, self.r
        west = EdgeDirection.WEST
        north_west = EdgeDirection.NORTH_WEST
        north_east = EdgeDirection.NORTH_EAST
        if self.direction is EdgeDirection.WEST:
            return [
                EdgeAddress(q - 1, r + 1, north_east),
                EdgeAddress(q, r, north_west),
                EdgeAddress(q - 1, r + 1, north_west),
                EdgeAddress(q - 1, r, north_east),
            ]
        if self.direction is EdgeDirection.NORTH_WEST:
            return [
                EdgeAddress(q + 1, r - 1, west),
                EdgeAddress(q, r, north_east),
                EdgeAddress(q, r, west),
                EdgeAddress(q - 1, r, north_east),
            ]
        return [
            EdgeAddress(q + 1, r, north_west),
            EdgeAddress(q + 1, r, west),
            EdgeAddress(q, r, north_west),
            EdgeAddress(q + 1, r - 1, west),
        ]

    def endpoints(self) -> list[VertexAddress]:
        """Both ends of the edge, clockwise around the owning hex."""

        if self.direction is EdgeDirection.WEST:
            corners = (VertexDirection.DOWN_LEFT, VertexDirection.UP_LEFT)
        elif self.direction is EdgeDirection.NORTH_WEST:
            corners = (VertexDirection.UP_LEFT, VertexDirection.UP)
        else:
            corners = (VertexDirection.UP, VertexDirection.UP_RIGHT)
        return [VertexAddress.from_axial(self.axial, corner) for corner in corners]

    def distance(self, b: EdgeAddress) -> int:
        """Distance between the first endpoints; an approximation of edge spacing."""

        return self.endpoints()[0].distance(b.endpoints()[0])

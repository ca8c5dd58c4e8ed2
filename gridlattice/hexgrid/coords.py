"""Axial coordinates for pointy-top hexagonal grids.

Directions are numbered clockwise from ``+q`` on a y-down layout, so
``FRONT`` points right and ``FRONT_RIGHT`` points down-right.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from ..misc import SQRT_3, div_toward_zero, lerp, round_half_away

if TYPE_CHECKING:
    from .edge import EdgeAddress
    from .vertex import VertexAddress, VertexDirection

__all__ = ["AxialCoordinate", "Axes", "HexDirection", "Transform"]


class HexDirection(int, Enum):
    """The six neighbour directions, clockwise from ``+q``."""

    FRONT = 0
    FRONT_RIGHT = 1
    BACK_RIGHT = 2
    BACK = 3
    BACK_LEFT = 4
    FRONT_LEFT = 5

    @classmethod
    def from_int(cls, value: int) -> HexDirection:
        if not isinstance(value, int):
            raise TypeError(f"direction must be an int, not {type(value).__name__}")
        return cls(value % 6)

    def unit(self) -> AxialCoordinate:
        return _AXIAL_DIRS[self]


class Axes(int, Enum):
    """Reflection axes of the hex grid."""

    Q = 0
    R = 1
    S = 2


@dataclass(frozen=True, slots=True, order=True)
class AxialCoordinate:
    """Axial hex-grid coordinate."""

    q: int
    r: int

    def __add__(self, other: AxialCoordinate) -> AxialCoordinate:
        return AxialCoordinate(self.q + other.q, self.r + other.r)

    def __sub__(self, other: AxialCoordinate) -> AxialCoordinate:
        return AxialCoordinate(self.q - other.q, self.r - other.r)

    def __mul__(self, scalar: int) -> AxialCoordinate:
        return AxialCoordinate(self.q * scalar, self.r * scalar)

    def __rmul__(self, scalar: int) -> AxialCoordinate:
        return self * scalar

    def __floordiv__(self, scalar: int) -> AxialCoordinate:
        """Divide each component, truncating toward zero."""

        return AxialCoordinate(div_toward_zero(self.q, scalar), div_toward_zero(self.r, scalar))

    def __neg__(self) -> AxialCoordinate:
        return AxialCoordinate(-self.q, -self.r)

    @property
    def s(self) -> int:
        return -self.q - self.r

    def compute_s(self) -> int:
        return -self.q - self.r

    def to_tuple(self) -> tuple[int, int]:
        return (self.q, self.r)

    def to_cube(self) -> tuple[int, int, int]:
        return (self.q, self.r, self.s)

    def swizzle_l(self) -> AxialCoordinate:
        """``(q, r, s) -> (r, s, q)``."""

        return AxialCoordinate(self.r, self.s)

    def swizzle_r(self) -> AxialCoordinate:
        """``(q, r, s) -> (s, q, r)``."""

        return AxialCoordinate(self.s, self.q)

    def make_vector(self, magnitude: int, rot_dir: int) -> AxialCoordinate:
        return self + HexDirection.from_int(rot_dir).unit() * magnitude

    # --- Adjacency -----------------------------------------------------------

    def neighbor(self, direction: HexDirection) -> AxialCoordinate:
        return self + direction.unit()

    def neighbors(self) -> list[AxialCoordinate]:
        return [self + unit for unit in _AXIAL_DIRS]

    def are_neighbors(self, coords: Iterable[AxialCoordinate]) -> bool:
        neighbors = self.neighbors()
        return all(coord in neighbors for coord in coords)

    def distance(self, b: AxialCoordinate) -> int:
        dq = self.q - b.q
        dr = self.r - b.r
        return (abs(dq) + abs(dq + dr) + abs(dr)) // 2

    def direction(self, b: AxialCoordinate) -> float:
        """Bearing in degrees from this hex to ``b``, in ``[0, 360)``.

        ``0`` faces ``FRONT`` and angles grow clockwise on screen.
        """

        dq = b.q - self.q
        dr = b.r - self.r
        x = SQRT_3 * dq + SQRT_3 / 2.0 * dr
        y = 1.5 * dr
        return math.degrees(math.atan2(y, x)) % 360.0

    # --- Interpolation -------------------------------------------------------

    @classmethod
    def round(cls, q: float, r: float) -> AxialCoordinate:
        """Nearest hex to the fractional axial position ``(q, r)``."""

        q_grid = round_half_away(q)
        r_grid = round_half_away(r)
        q_rem = q - q_grid
        r_rem = r - r_grid
        if abs(q_rem) >= abs(r_rem):
            return cls(q_grid + round_half_away(q_rem + 0.5 * r_rem), r_grid)
        return cls(q_grid, r_grid + round_half_away(r_rem + 0.5 * q_rem))

    def lerp(self, b: AxialCoordinate, t: float) -> AxialCoordinate:
        return AxialCoordinate.round(lerp(self.q, b.q, t), lerp(self.r, b.r, t))

    def line(self, b: AxialCoordinate) -> list[AxialCoordinate]:
        """Hexes on the straight line to ``b``, both ends included."""

        dist = self.distance(b)
        if dist == 0:
            return [self]
        step = 1.0 / dist
        return [self.lerp(b, step * i) for i in range(dist + 1)]

    def range(self, n: int) -> list[AxialCoordinate]:
        """Every hex within ``n`` steps, ordered by ``q`` then ``r``."""

        coords: list[AxialCoordinate] = []
        for dq in range(-n, n + 1):
            for dr in range(max(-n, -dq - n), min(n, -dq + n) + 1):
                coords.append(AxialCoordinate(self.q + dq, self.r + dr))
        return coords

    # --- Transformations -----------------------------------------------------

    def rotate(self, center: AxialCoordinate | None = None, rot_dir: int = 1) -> AxialCoordinate:
        """Rotate clockwise by ``rot_dir`` 60 degree steps about ``center``."""

        if center is None:
            center = ORIGIN
        rotated = self - center
        for _ in range(rot_dir % 6):
            rotated = -rotated.swizzle_l()
        return rotated + center

    def reflect(self, center: AxialCoordinate | None = None, axis: Axes = Axes.Q) -> AxialCoordinate:
        """Mirror across the line through ``center`` that keeps ``axis`` fixed."""

        if center is None:
            center = ORIGIN
        rel = self - center
        if axis is Axes.Q:
            mirrored = AxialCoordinate(rel.q, rel.s)
        elif axis is Axes.R:
            mirrored = AxialCoordinate(rel.s, rel.r)
        else:
            mirrored = AxialCoordinate(rel.r, rel.q)
        return mirrored + center

    def apply_transform(self, transform: Transform) -> AxialCoordinate:
        return self.rotate(None, transform.rotation) + transform.translation

    # --- Vertices and edges --------------------------------------------------

    def vertex(self, direction: VertexDirection) -> VertexAddress:
        from .vertex import VertexAddress

        return VertexAddress.from_axial(self, direction)

    def vertices(self) -> list[VertexAddress]:
        from .vertex import VertexDirection

        return [self.vertex(direction) for direction in VertexDirection]

    def edge(self, direction: HexDirection) -> EdgeAddress:
        """Canonical address of the side facing ``direction``."""

        from .edge import EdgeAddress, EdgeDirection

        if direction is HexDirection.FRONT:
            return EdgeAddress(self.q + 1, self.r, EdgeDirection.WEST)
        if direction is HexDirection.FRONT_RIGHT:
            return EdgeAddress(self.q, self.r + 1, EdgeDirection.NORTH_WEST)
        if direction is HexDirection.BACK_RIGHT:
            return EdgeAddress(self.q - 1, self.r + 1, EdgeDirection.NORTH_EAST)
        if direction is HexDirection.BACK:
            return EdgeAddress(self.q, self.r, EdgeDirection.WEST)
        if direction is HexDirection.BACK_LEFT:
            return EdgeAddress(self.q, self.r, EdgeDirection.NORTH_WEST)
        return EdgeAddress(self.q, self.r, EdgeDirection.NORTH_EAST)

    def edges(self) -> list[EdgeAddress]:
        """All six sides, clockwise from the top-right one."""

        return [self.edge(HexDirection.FRONT_LEFT)] + [
            self.edge(direction) for direction in list(HexDirection)[:-1]
        ]

    def shared_vertices(self, b: AxialCoordinate) -> list[VertexAddress] | None:
        """The two corners shared with neighbour ``b``, clockwise from this hex."""

        from .vertex import VertexDirection

        for direction in HexDirection:
            if self.neighbor(direction) == b:
                first, second = _SHARED_CORNERS[direction]
                return [
                    self.vertex(VertexDirection(first)),
                    self.vertex(VertexDirection(second)),
                ]
        return None

    def shared_vertex(self, b: AxialCoordinate, c: AxialCoordinate) -> VertexAddress | None:
        """The corner where three mutually adjacent hexes meet."""

        shared = self.shared_vertices(b)
        if shared is None:
            return None
        corners = c.vertices()
        for vertex in shared:
            if vertex in corners:
                return vertex
        return None


@dataclass(frozen=True, slots=True, order=True)
class Transform:
    """A rotation about the origin followed by a translation."""

    translation: AxialCoordinate
    rotation: int = 0

    def __add__(self, other: Transform) -> Transform:
        return Transform(self.translation + other.translation, self.rotation + other.rotation)

    def __neg__(self) -> Transform:
        return Transform(-self.translation, -self.rotation)


ORIGIN = AxialCoordinate(0, 0)

_AXIAL_DIRS = (
    AxialCoordinate(+1, 0),
    AxialCoordinate(0, +1),
    AxialCoordinate(-1, +1),
    AxialCoordinate(-1, 0),
    AxialCoordinate(0, -1),
    AxialCoordinate(+1, -1),
)

# Vertex direction indices (UP=0 .. UP_LEFT=5) of the corners facing each side.
_SHARED_CORNERS = {
    HexDirection.FRONT: (1, 2),
    HexDirection.FRONT_RIGHT: (2, 3),
    HexDirection.BACK_RIGHT: (3, 4),
    HexDirection.BACK: (4, 5),
    HexDirection.BACK_LEFT: (5, 0),
    HexDirection.FRONT_LEFT: (0, 1),
}

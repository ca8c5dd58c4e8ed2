"""Coordinates for triangular grids.

A :class:`TriangleCoordinate` addresses both the faces and the lattice points
of a grid of unit equilateral triangles. Each component counts the lattice
lines of one family crossed from the origin, so:

* faces have a component sum of 1 (``DOWN``) or 2 (``UP``);
* lattice points have a component sum of 0.

Two faces are neighbours when they differ by one in a single component, and
the L1 norm of the difference is the number of edge crossings between them.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction

from ..config import get_settings
from ..misc import SQRT_3, Axes3D, div_toward_zero, lerp

__all__ = ["TriDirection", "TriOrientation", "TriangleCoordinate"]


class TriOrientation(int, Enum):
    """Orientation of a triangular face, derived from the parity of its sum."""

    UP = 0
    DOWN = 1


class TriDirection(int, Enum):
    """The three sides of a face; the offset depends on the face orientation."""

    LEFT = 0
    RIGHT = 1
    BASE = 2


_NEIGHBOR_OFFSETS: dict[tuple[TriOrientation, TriDirection], tuple[int, int, int]] = {
    (TriOrientation.UP, TriDirection.LEFT): (-1, 0, 0),
    (TriOrientation.UP, TriDirection.BASE): (0, -1, 0),
    (TriOrientation.UP, TriDirection.RIGHT): (0, 0, -1),
    (TriOrientation.DOWN, TriDirection.LEFT): (0, 0, 1),
    (TriOrientation.DOWN, TriDirection.BASE): (0, 1, 0),
    (TriOrientation.DOWN, TriDirection.RIGHT): (1, 0, 0),
}


@dataclass(frozen=True, slots=True, order=True)
class TriangleCoordinate:
    x: int
    y: int
    z: int

    def __add__(self, other: TriangleCoordinate) -> TriangleCoordinate:
        return TriangleCoordinate(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: TriangleCoordinate) -> TriangleCoordinate:
        return TriangleCoordinate(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: int) -> TriangleCoordinate:
        return TriangleCoordinate(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: int) -> TriangleCoordinate:
        return self * scalar

    def __floordiv__(self, scalar: int) -> TriangleCoordinate:
        """Divide each component, truncating toward zero."""

        return TriangleCoordinate(
            div_toward_zero(self.x, scalar),
            div_toward_zero(self.y, scalar),
            div_toward_zero(self.z, scalar),
        )

    def __neg__(self) -> TriangleCoordinate:
        return TriangleCoordinate(-self.x, -self.y, -self.z)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.x, self.y, self.z)

    def component(self, axis: Axes3D) -> int:
        return self.as_tuple()[axis]

    def component_sum(self) -> int:
        return self.x + self.y + self.z

    def is_tri_face(self) -> bool:
        """True when the coordinate addresses a face rather than a lattice point."""

        return self.component_sum() != 0

    def orientation(self) -> TriOrientation:
        if self.component_sum() & 1:
            return TriOrientation.DOWN
        return TriOrientation.UP

    def compute_z_vert(self) -> TriangleCoordinate:
        """Solve ``z`` so the coordinate is a lattice point (sum 0)."""

        return TriangleCoordinate(self.x, self.y, -self.x - self.y)

    @staticmethod
    def solve_coord(partial: tuple[int, int], orientation: TriOrientation) -> int:
        """Solve the missing component of a face with the given orientation."""

        if orientation is TriOrientation.UP:
            return 2 - partial[0] - partial[1]
        return 1 - partial[0] - partial[1]

    def compute_z(self, orientation: TriOrientation) -> TriangleCoordinate:
        return TriangleCoordinate(
            self.x, self.y, self.solve_coord((self.x, self.y), orientation)
        )

    # --- Cartesian mapping ---------------------------------------------------

    def to_cartesian(self) -> tuple[float, float]:
        """Centre of the face (or the lattice point) for unit edge length.

        The frame is y-up: face ``(0, 1, 0)`` sits directly above the origin.
        """

        return (
            0.5 * self.x - 0.5 * self.z,
            -SQRT_3 / 6.0 * self.x + SQRT_3 / 3.0 * self.y - SQRT_3 / 6.0 * self.z,
        )

    @classmethod
    def nearest_tri_face(cls, cartesian: tuple[float, float]) -> TriangleCoordinate:
        """Face containing the cartesian point; inverse of :meth:`to_cartesian`."""

        px, py = cartesian
        return cls(
            math.ceil(px - SQRT_3 / 3.0 * py),
            math.floor(SQRT_3 * 2.0 / 3.0 * py) + 1,
            math.ceil(-px - SQRT_3 / 3.0 * py),
        )

    def lerp(self, b: TriangleCoordinate, t: float) -> TriangleCoordinate:
        """Face found ``t`` of the way from this face to ``b``."""

        ax, ay = self.to_cartesian()
        bx, by = b.to_cartesian()
        return self.nearest_tri_face((lerp(ax, bx, t), lerp(ay, by, t)))

    # --- Transformations -----------------------------------------------------

    def rotate(self, rot_dir: int) -> TriangleCoordinate:
        """Rotate by ``rot_dir`` 60 degree steps about the origin lattice point.

        Positive steps turn clockwise in the frame of :meth:`to_cartesian`.
        Odd steps swap face orientation.
        """

        x, y, z = self.x, self.y, self.z
        rotations = (
            (x, y, z),
            (1 - z, 1 - x, 1 - y),
            (y, z, x),
            (1 - x, 1 - y, 1 - z),
            (z, x, y),
            (1 - y, 1 - z, 1 - x),
        )
        return TriangleCoordinate(*rotations[rot_dir % 6])

    def rotate_about(self, center: TriangleCoordinate, rot_dir: int) -> TriangleCoordinate:
        """Rotate about ``center``.

        Rotating a face about a lattice point always yields a face. Rotating a
        face about another face only does so for even ``rot_dir``.
        """

        return center + (self - center).rotate(rot_dir)

    def reflect_x(self) -> TriangleCoordinate:
        """Mirror across the cartesian y axis, negating x."""

        return TriangleCoordinate(self.z, self.y, self.x)

    def reflect_y(self) -> TriangleCoordinate:
        """Mirror across the cartesian x axis, negating y."""

        return TriangleCoordinate(1 - self.z, 1 - self.y, 1 - self.x)

    # --- Adjacency -----------------------------------------------------------

    def neighbor(self, direction: TriDirection) -> TriangleCoordinate:
        dx, dy, dz = _NEIGHBOR_OFFSETS[(self.orientation(), direction)]
        return TriangleCoordinate(self.x + dx, self.y + dy, self.z + dz)

    def neighbors(self) -> list[TriangleCoordinate]:
        return [
            self.neighbor(TriDirection.LEFT),
            self.neighbor(TriDirection.RIGHT),
            self.neighbor(TriDirection.BASE),
        ]

    def are_neighbors(self, coords: Iterable[TriangleCoordinate]) -> bool:
        """True when every coordinate in ``coords`` shares a side with this face."""

        neighbors = self.neighbors()
        return all(coord in neighbors for coord in coords)

    def distance(self, b: TriangleCoordinate) -> int:
        dt = self - b
        return abs(dt.x) + abs(dt.y) + abs(dt.z)

    def shared_axis(self, b: TriangleCoordinate) -> Axes3D | None:
        for axis in Axes3D:
            if self.component(axis) == b.component(axis):
                return axis
        return None

    def range(self, dist: int) -> list[TriangleCoordinate]:
        """Every face within L1 distance ``dist`` of this coordinate."""

        base = self.component_sum()
        coords: list[TriangleCoordinate] = []
        for dx in range(-dist, dist + 1):
            for dy in range(max(-dist - dx, -dist), min(dist - dx, dist) + 1):
                # Down face first, then the up face sharing the same (x, y).
                dz_down = 1 - (base + dx + dy)
                for dz in (dz_down, dz_down + 1):
                    if abs(dx) + abs(dy) + abs(dz) <= dist:
                        coords.append(
                            TriangleCoordinate(self.x + dx, self.y + dy, self.z + dz)
                        )
        return coords

    # --- Lines ---------------------------------------------------------------

    def line(self, b: TriangleCoordinate) -> list[TriangleCoordinate]:
        """Faces traversed from this face to ``b``, both ends included.

        Faces sharing an axis walk their common lane. Other pairs follow the
        faces crossed by the segment between the two centres. The result has
        ``distance(b) + 1`` entries, consecutive entries are neighbours, and
        ``b.line(a)`` is the same path reversed.
        """

        if self == b:
            return [self]
        axis = self.shared_axis(b)
        if axis is not None:
            return self.line_along_axis(b, axis)
        return self._trace_segment(b)

    def line_along_axis(self, b: TriangleCoordinate, axis: Axes3D) -> list[TriangleCoordinate]:
        """Walk the lane of faces whose ``axis`` component is constant.

        Up faces can only step by decrementing a component and down faces by
        incrementing one, so the walk alternates between the two free axes.
        """

        _require_faces(self, b)
        if self.component(axis) != b.component(axis):
            raise ValueError(f"{self} and {b} do not share the {axis.name} axis")

        free = [other for other in Axes3D if other is not axis]
        target = b.as_tuple()
        current = list(self.as_tuple())
        path = [self]
        for _ in range(self.distance(b)):
            if sum(current) & 1:
                index = next(i for i in free if current[i] < target[i])
                current[index] += 1
            else:
                index = next(i for i in free if current[i] > target[i])
                current[index] -= 1
            path.append(TriangleCoordinate(*current))
        return path

    def _trace_segment(self, b: TriangleCoordinate) -> list[TriangleCoordinate]:
        """Faces crossed by the straight segment between two face centres.

        Scaled by three, the lattice line functionals of a face centre are
        ``3 * c - sum`` for each component ``c``. They vary linearly along the
        segment and a component steps by one whenever its functional passes a
        multiple of three. Crossings are ordered exactly with fractions. When
        the segment runs through a lattice point all three components cross at
        once and :func:`_bridge_steps` splices in the two faces around it.
        """

        _require_faces(self, b)
        start, end = self.as_tuple(), b.as_tuple()
        origin = [3 * c - self.component_sum() for c in start]
        target = [3 * c - b.component_sum() for c in end]

        crossings: dict[Fraction, list[tuple[Axes3D, int]]] = {}
        for axis in Axes3D:
            if end[axis] > start[axis]:
                lines, step = range(start[axis], end[axis]), 1
            else:
                lines, step = range(start[axis] - 1, end[axis] - 1, -1), -1
            for boundary in lines:
                t = Fraction(3 * boundary - origin[axis], target[axis] - origin[axis])
                crossings.setdefault(t, []).append((axis, step))

        current = list(start)
        path = [self]
        for t in sorted(crossings):
            for axis, step in _bridge_steps(current, crossings[t]):
                current[axis] += step
                path.append(TriangleCoordinate(*current))
        return path

    def smooth_line(
        self, b: TriangleCoordinate, step_size: int | None = None
    ) -> list[TriangleCoordinate]:
        """A line that follows the straight segment more closely than :meth:`line`.

        The segment is cut into chords of ``step_size`` faces whose endpoints
        are snapped with :meth:`lerp`; consecutive endpoints are joined with
        :meth:`line`.
        """

        if step_size is None:
            step_size = get_settings().smooth_line_step
        if step_size <= 0:
            raise ValueError("step_size must be positive")

        dist = self.distance(b)
        if dist == 0:
            return [self]

        endpoints = [
            self.lerp(b, step_size * k / dist) for k in range(1, dist // step_size + 1)
        ]
        if not endpoints or endpoints[-1] != b:
            endpoints.append(b)

        path = [self]
        start = self
        for end in endpoints:
            path.extend(start.line(end)[1:])
            start = end
        return path


def _bridge_steps(
    current: list[int], steps: list[tuple[Axes3D, int]]
) -> list[tuple[Axes3D, int]]:
    """Order the unit steps taken at one crossing.

    A single step needs no ordering. Passing a lattice point takes three
    steps, and only the one whose sign differs from the other two can go in
    the middle. A down face takes the lower of its two increments first and an
    up face the higher of its two decrements, so a reversed trace bridges
    through the same pair of faces.
    """

    if len(steps) == 1:
        return steps
    sign = 1 if sum(current) & 1 else -1
    outer = sorted((s for s in steps if s[1] == sign), reverse=sign < 0)
    middle = [s for s in steps if s[1] != sign]
    return [outer[0], *middle, outer[1]]


def _require_faces(*coords: TriangleCoordinate) -> None:
    for coord in coords:
        if coord.component_sum() not in (1, 2):
            raise ValueError(f"{coord} is not a triangle face")

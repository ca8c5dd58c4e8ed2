import pytest

from gridlattice.hexgrid import AxialCoordinate, EdgeAddress, EdgeDirection, VertexAddress, VertexDirection
from gridlattice.triangle import TriangleCoordinate


def A(q: int, r: int) -> AxialCoordinate:
    return AxialCoordinate(q, r)


def test_direction_from_int_wraps_modulo_three():
    assert EdgeDirection.from_int(-1) is EdgeDirection.NORTH_EAST
    assert EdgeDirection.from_int(4) is EdgeDirection.NORTH_WEST


@pytest.mark.parametrize(
    ("edge", "expected"),
    [
        (EdgeAddress(0, 0, EdgeDirection.WEST), [A(0, 0), A(-1, 0)]),
        (EdgeAddress(0, 0, EdgeDirection.NORTH_WEST), [A(0, 0), A(0, -1)]),
        (EdgeAddress(2, -1, EdgeDirection.NORTH_EAST), [A(2, -1), A(3, -2)]),
    ],
)
def test_adjacent_hexes(edge: EdgeAddress, expected: list[AxialCoordinate]):
    assert edge.adjacent_hexes() == expected


def test_endpoints():
    assert EdgeAddress(0, 0, EdgeDirection.WEST).endpoints() == [
        VertexAddress(TriangleCoordinate(0, 1, 1)),
        VertexAddress(TriangleCoordinate(0, 0, 1)),
    ]
    origin = A(0, 0)
    assert EdgeAddress(0, 0, EdgeDirection.NORTH_WEST).endpoints() == [
        origin.vertex(VertexDirection.UP_LEFT),
        origin.vertex(VertexDirection.UP),
    ]
    assert EdgeAddress(0, 0, EdgeDirection.NORTH_EAST).endpoints() == [
        origin.vertex(VertexDirection.UP),
        origin.vertex(VertexDirection.UP_RIGHT),
    ]


def test_endpoints_are_shared_by_both_hexes():
    for direction in EdgeDirection:
        edge = EdgeAddress(1, -2, direction)
        a, b = edge.adjacent_hexes()
        assert set(edge.endpoints()) == set(a.shared_vertices(b))


def test_adjacent_edges_share_an_endpoint():
    for hex_ in A(0, 0).range(2):
        for direction in EdgeDirection:
            edge = EdgeAddress(hex_.q, hex_.r, direction)
            adjacent = edge.adjacent_edges()
            assert len(adjacent) == 4
            assert len(set(adjacent)) == 4
            assert edge not in adjacent
            ends = set(edge.endpoints())
            for other in adjacent:
                assert ends & set(other.endpoints())


def test_distance_between_first_endpoints():
    west = EdgeAddress(0, 0, EdgeDirection.WEST)
    north_west = EdgeAddress(0, 0, EdgeDirection.NORTH_WEST)
    assert west.distance(west) == 0
    assert west.distance(north_west) == 1
    assert north_west.distance(west) == 1

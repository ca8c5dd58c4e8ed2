from gridlattice import AxialCoordinate, TriangleCoordinate, VertexDirection

start = AxialCoordinate(0, 0)
goal = AxialCoordinate(5, -2)

face_start = TriangleCoordinate(-1, 0, 2)
face_goal = TriangleCoordinate(12, -10, 0)


if __name__ == "__main__":
    print("hex line:", start.line(goal))
    print("hex distance:", start.distance(goal))
    print("hex bearing:", round(start.direction(goal), 2))
    print("ring 1:", [c for c in start.range(1) if start.distance(c) == 1])

    corner = start.vertex(VertexDirection.UP_RIGHT)
    print("corner:", corner, "touches", corner.adjacent_hexes())

    print("triangle line:", face_start.line(face_goal))
    print("smooth line:", face_start.smooth_line(face_goal, 4))

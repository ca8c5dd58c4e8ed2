from .coords import AxialCoordinate, Axes, HexDirection, Transform
from .conversions import axial_to_cube, axial_to_lattice, cube_to_axial, lattice_to_axial
from .vertex import Spin, VertexAddress, VertexDirection
from .edge import EdgeAddress, EdgeDirection

__all__ = [
    "AxialCoordinate",
    "Axes",
    "HexDirection",
    "Transform",
    "axial_to_cube",
    "axial_to_lattice",
    "cube_to_axial",
    "lattice_to_axial",
    "Spin",
    "VertexAddress",
    "VertexDirection",
    "EdgeAddress",
    "EdgeDirection",
]

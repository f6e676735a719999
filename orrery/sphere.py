"""UV sphere mesh: positions, normals, texture coordinates and index lists."""

from __future__ import annotations

import logging
import math

logger = logging.getLogger(__name__)

Vec3 = tuple[float, float, float]
Vec2 = tuple[float, float]

# Columns (x, y, z) of the rotation that moves the "up" direction between axes.
_AXIS_TRANSFORMS: dict[tuple[int, int], tuple[Vec3, Vec3, Vec3]] = {
    (1, 2): ((0.0, 1.0, 0.0), (-1.0, 0.0, 0.0), (0.0, 0.0, 1.0)),
    (1, 3): ((0.0, 0.0, 1.0), (0.0, 1.0, 0.0), (-1.0, 0.0, 0.0)),
    (2, 1): ((0.0, -1.0, 0.0), (1.0, 0.0, 0.0), (0.0, 0.0, 1.0)),
    (2, 3): ((1.0, 0.0, 0.0), (0.0, 0.0, 1.0), (0.0, -1.0, 0.0)),
    (3, 1): ((0.0, 0.0, -1.0), (0.0, 1.0, 0.0), (1.0, 0.0, 0.0)),
    (3, 2): ((1.0, 0.0, 0.0), (0.0, 0.0, -1.0), (0.0, 1.0, 0.0)),
}


def _check_axis(axis: int) -> None:
    if axis not in (1, 2, 3):
        raise ValueError(f"axis must be 1 (X), 2 (Y) or 3 (Z), got {axis!r}")


def _apply(columns: tuple[Vec3, Vec3, Vec3], v: Vec3) -> Vec3:
    tx, ty, tz = columns
    x, y, z = v
    return (
        tx[0] * x + ty[0] * y + tz[0] * z,
        tx[1] * x + ty[1] * y + tz[1] * z,
        tx[2] * x + ty[2] * y + tz[2] * z,
    )


class Sphere:
    """A sphere built from stacks (latitude) and sectors (longitude).

    Changing ``radius``, ``sectors``, ``stacks`` or ``up_axis`` takes effect
    on the next call to :meth:`rebuild`.
    """

    def __init__(
        self,
        radius: float,
        sectors: int = 36,
        stacks: int = 18,
        smooth: bool = True,
        up_axis: int = 3,
    ) -> None:
        self.radius = float(radius)
        self.sectors = sectors
        self.stacks = stacks
        self.smooth = smooth
        self.up_axis = up_axis
        self.vertices: list[Vec3] = []
        self.normals: list[Vec3] = []
        self.tex_coords: list[Vec2] = []
        self.indices: list[int] = []
        self.line_indices: list[int] = []
        self.rebuild()

    def rebuild(self) -> None:
        """Regenerate the mesh from the current parameters."""
        if self.sectors < 1 or self.stacks < 1:
            raise ValueError("sectors and stacks must both be at least 1")
        if self.radius == 0:
            raise ValueError("radius must be non-zero")
        _check_axis(self.up_axis)

        radius, sectors, stacks = self.radius, self.sectors, self.stacks
        length_inv = 1.0 / radius
        sector_step = 2 * math.pi / sectors
        stack_step = math.pi / stacks

        vertices: list[Vec3] = []
        normals: list[Vec3] = []
        tex_coords: list[Vec2] = []
        # From the north pole (pi/2) down to the south pole (-pi/2).
        for i in range(stacks + 1):
            stack_angle = math.pi / 2 - i * stack_step
            xy = radius * math.cos(stack_angle)
            z = radius * math.sin(stack_angle)
            for j in range(sectors + 1):
                sector_angle = j * sector_step
                x = xy * math.cos(sector_angle)
                y = xy * math.sin(sector_angle)
                vertices.append((x, y, z))
                normals.append((x * length_inv, y * length_inv, z * length_inv))
                tex_coords.append((j / sectors, i / stacks))

        # k1--k1+1
        # |  / |
        # | /  |
        # k2--k2+1
        indices: list[int] = []
        line_indices: list[int] = []
        row = sectors + 1
        for i in range(stacks):
            for j in range(sectors):
                k1 = i * row + j
                k2 = k1 + row
                if i != 0:
                    indices.extend((k1, k2, k1 + 1))
                if i != stacks - 1:
                    indices.extend((k1 + 1, k2, k2 + 1))
                line_indices.extend((k1, k2))
                if i != 0:
                    line_indices.extend((k1, k1 + 1))

        self.vertices = vertices
        self.normals = normals
        self.tex_coords = tex_coords
        self.indices = indices
        self.line_indices = line_indices

        if self.up_axis != 3:
            self.change_up_axis(3, self.up_axis)

        logger.info("Vertices count: %d", len(self.vertices) * 3)
        logger.info("Indices count: %d", len(self.indices))

    def reverse_normals(self) -> None:
        """Flip every normal and reverse the winding of every triangle."""
        self.normals = [(-x, -y, -z) for x, y, z in self.normals]
        it = iter(self.indices)
        self.indices = [v for a, b, c in zip(it, it, it) for v in (c, b, a)]

    def change_up_axis(self, from_axis: int, to_axis: int) -> None:
        """Rotate vertices and normals so the up direction moves between axes.

        Axes are numbered 1 (X), 2 (Y) and 3 (Z).
        """
        _check_axis(from_axis)
        _check_axis(to_axis)
        if from_axis == to_axis:
            raise ValueError("from_axis and to_axis must differ")
        columns = _AXIS_TRANSFORMS[(from_axis, to_axis)]
        self.vertices = [_apply(columns, v) for v in self.vertices]
        self.normals = [_apply(columns, n) for n in self.normals]

    def vertex_count(self) -> int:
        return len(self.vertices)

    def normal_count(self) -> int:
        return len(self.normals)

    def tex_coord_count(self) -> int:
        return len(self.tex_coords)

    def index_count(self) -> int:
        return len(self.indices)

    def line_index_count(self) -> int:
        return len(self.line_indices)

    def triangle_count(self) -> int:
        return self.index_count() // 3

    def interleaved_vertices(self) -> list[float]:
        """Flat list of position, normal and texture coordinate per vertex (8 floats each)."""
        return [
            value
            for vertex, normal, tex in zip(self.vertices, self.normals, self.tex_coords)
            for value in (*vertex, *normal, *tex)
        ]
from __future__ import annotations

import itertools
import math
from dataclasses import dataclass

from fractal_kernels.kernels.subdivision.engine import subdivide

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]

TRIANGLE_BRANCHING = 3
TETRAHEDRON_BRANCHING = 4

# Sub-cube grid indices kept by a Menger step: any index with two or more
# central coordinates is a face centre or the core and is removed.
MENGER_RETAINED_OFFSETS: tuple[tuple[int, int, int], ...] = tuple(
    (dx, dy, dz)
    for dx, dy, dz in itertools.product(range(3), repeat=3)
    if (dx == 1) + (dy == 1) + (dz == 1) < 2
)
MENGER_BRANCHING = len(MENGER_RETAINED_OFFSETS)

TETRAHEDRON_EDGES: tuple[tuple[int, int], ...] = (
    (0, 1),
    (0, 2),
    (0, 3),
    (1, 2),
    (1, 3),
    (2, 3),
)


def _mid2(p: Vec2, q: Vec2) -> Vec2:
    return ((p[0] + q[0]) / 2, (p[1] + q[1]) / 2)


def _mid3(p: Vec3, q: Vec3) -> Vec3:
    return ((p[0] + q[0]) / 2, (p[1] + q[1]) / 2, (p[2] + q[2]) / 2)


@dataclass(frozen=True)
class Triangle:
    a: Vec2
    b: Vec2
    c: Vec2

    def split(self) -> tuple["Triangle", ...]:
        ab = _mid2(self.a, self.b)
        bc = _mid2(self.b, self.c)
        ca = _mid2(self.c, self.a)
        # The middle triangle (ab, bc, ca) is the hole.
        return (
            Triangle(self.a, ab, ca),
            Triangle(ab, self.b, bc),
            Triangle(ca, bc, self.c),
        )

    @property
    def area(self) -> float:
        (ax, ay), (bx, by), (cx, cy) = self.a, self.b, self.c
        return abs((bx - ax) * (cy - ay) - (cx - ax) * (by - ay)) / 2


@dataclass(frozen=True)
class Tetrahedron:
    vertices: tuple[Vec3, Vec3, Vec3, Vec3]

    def split(self) -> tuple["Tetrahedron", ...]:
        v0, v1, v2, v3 = self.vertices
        m01 = _mid3(v0, v1)
        m02 = _mid3(v0, v2)
        m03 = _mid3(v0, v3)
        m12 = _mid3(v1, v2)
        m13 = _mid3(v1, v3)
        m23 = _mid3(v2, v3)
        return (
            Tetrahedron((v0, m01, m02, m03)),
            Tetrahedron((m01, v1, m12, m13)),
            Tetrahedron((m02, m12, v2, m23)),
            Tetrahedron((m03, m13, m23, v3)),
        )

    def edges(self) -> tuple[tuple[Vec3, Vec3], ...]:
        return tuple((self.vertices[i], self.vertices[j]) for i, j in TETRAHEDRON_EDGES)


@dataclass(frozen=True)
class Cube:
    """Axis-aligned cube given by its centre and edge length."""

    x: float
    y: float
    z: float
    size: float

    @property
    def center(self) -> Vec3:
        return (self.x, self.y, self.z)

    def split(self) -> tuple["Cube", ...]:
        child = self.size / 3
        return tuple(
            Cube(
                self.x + (dx - 1) * child,
                self.y + (dy - 1) * child,
                self.z + (dz - 1) * child,
                child,
            )
            for dx, dy, dz in MENGER_RETAINED_OFFSETS
        )


def equilateral_triangle(width: float, height: float, fill: float = 0.9) -> Triangle:
    """Largest centred equilateral triangle (apex up, screen coordinates)."""

    size = min(width, height) * fill
    tri_height = size * math.sqrt(3) / 2
    start_x = (width - size) / 2
    base_y = (height - tri_height) / 2 + tri_height
    return Triangle(
        (start_x + size / 2, base_y - tri_height),
        (start_x, base_y),
        (start_x + size, base_y),
    )


def regular_tetrahedron(radius: float = 200.0) -> Tetrahedron:
    r = radius
    return Tetrahedron(((r, r, r), (-r, -r, r), (-r, r, -r), (r, -r, -r)))


def sierpinski_triangle(root: Triangle, depth: int) -> list[Triangle]:
    return subdivide(root, depth, Triangle.split)


def sierpinski_tetrahedron(root: Tetrahedron, depth: int) -> list[Tetrahedron]:
    return subdivide(root, depth, Tetrahedron.split)


def menger_sponge(root: Cube, depth: int) -> list[Cube]:
    return subdivide(root, depth, Cube.split)

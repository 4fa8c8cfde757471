"""Rotation and perspective helpers for the 3-D subdivision kernels."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from fractal_kernels.kernels.subdivision.primitives import Cube, Vec3

DEFAULT_FOV = 300.0
DEFAULT_CAMERA_DISTANCE = 400.0


def normalize(axis: Vec3) -> Vec3 | None:
    length = math.sqrt(axis[0] ** 2 + axis[1] ** 2 + axis[2] ** 2)
    if length == 0.0:
        return None
    return (axis[0] / length, axis[1] / length, axis[2] / length)


def rodrigues_rotate(v: Vec3, axis: Vec3, theta: float) -> Vec3:
    """Rotate ``v`` about ``axis`` by ``theta``; a zero axis leaves ``v`` unchanged."""

    k = normalize(axis)
    if k is None:
        return v
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    dot = k[0] * v[0] + k[1] * v[1] + k[2] * v[2]
    cross = (
        k[1] * v[2] - k[2] * v[1],
        k[2] * v[0] - k[0] * v[2],
        k[0] * v[1] - k[1] * v[0],
    )
    return (
        v[0] * cos_t + cross[0] * sin_t + k[0] * dot * (1 - cos_t),
        v[1] * cos_t + cross[1] * sin_t + k[1] * dot * (1 - cos_t),
        v[2] * cos_t + cross[2] * sin_t + k[2] * dot * (1 - cos_t),
    )


def rotate_y(v: Vec3, angle: float) -> Vec3:
    cos = math.cos(angle)
    sin = math.sin(angle)
    return (v[0] * cos - v[2] * sin, v[1], v[0] * sin + v[2] * cos)


def rotate_x(v: Vec3, angle: float) -> Vec3:
    cos = math.cos(angle)
    sin = math.sin(angle)
    return (v[0], v[1] * cos - v[2] * sin, v[1] * sin + v[2] * cos)


@dataclass(frozen=True)
class ProjectedPoint:
    x: float
    y: float
    depth: float
    scale: float


def project(
    v: Vec3,
    center_x: float,
    center_y: float,
    *,
    fov: float = DEFAULT_FOV,
    distance: float = DEFAULT_CAMERA_DISTANCE,
) -> ProjectedPoint | None:
    """Perspective-project an already-rotated point; points at the camera are dropped."""

    denominator = distance + v[2]
    if denominator <= 0.0:
        return None
    scale = fov / denominator
    return ProjectedPoint(
        x=center_x + v[0] * scale,
        y=center_y + v[1] * scale,
        depth=v[2],
        scale=scale,
    )


@dataclass(frozen=True)
class ProjectedCube:
    cube: Cube
    center: ProjectedPoint
    projected_size: float


def project_cubes(
    cubes: Sequence[Cube],
    angle_x: float,
    angle_y: float,
    center_x: float,
    center_y: float,
    *,
    min_size: float = 1.0,
) -> list[ProjectedCube]:
    """Project cube centres, drop sub-pixel cubes, and order them far to near."""

    projected = []
    for cube in cubes:
        rotated = rotate_x(rotate_y(cube.center, angle_y), angle_x)
        point = project(rotated, center_x, center_y)
        if point is None:
            continue
        size = cube.size * point.scale
        if size < min_size:
            continue
        projected.append(ProjectedCube(cube=cube, center=point, projected_size=size))
    projected.sort(key=lambda item: item.center.depth, reverse=True)
    return projected

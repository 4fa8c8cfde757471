"""Lorenz system integrated with explicit Euler steps."""

from __future__ import annotations

from dataclasses import dataclass

Vector3 = tuple[float, float, float]

LORENZ_START: Vector3 = (0.1, 0.0, 0.0)
BASE_DT = 0.01


@dataclass(frozen=True)
class LorenzSystem:
    sigma: float = 10.0
    rho: float = 28.0
    beta: float = 8.0 / 3.0

    def derivatives(self, point: Vector3) -> Vector3:
        x, y, z = point
        return (
            self.sigma * (y - x),
            x * (self.rho - z) - y,
            x * y - self.beta * z,
        )

    def step(self, point: Vector3, dt: float) -> Vector3:
        dx, dy, dz = self.derivatives(point)
        x, y, z = point
        return (x + dx * dt, y + dy * dt, z + dz * dt)

    def integrate(self, point: Vector3, steps: int, dt: float) -> list[Vector3]:
        """Every intermediate point after ``point``, ``steps`` of them."""

        if steps < 0:
            raise ValueError("steps must be non-negative")
        visited = []
        for _ in range(steps):
            point = self.step(point, dt)
            visited.append(point)
        return visited


def project(point: Vector3, scale: float = 1.0) -> tuple[float, float]:
    """Side view of the attractor: x across, z up."""

    x, _, z = point
    return (x * scale, -z * scale)

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PackingParameters:
    width: float = 400.0
    height: float = 400.0
    depth: int = 4
    radius_fraction: float = 0.4


@dataclass(frozen=True)
class PackingState:
    parameters: PackingParameters
    circles: tuple

    @property
    def circle_count(self) -> int:
        return len(self.circles)

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from fractal_kernels.kernels.escape_time.plane import PlaneView


@dataclass(frozen=True)
class EscapeTimeParameters:
    width: int = 400
    height: int = 400
    max_iterations: int = 100
    zoom: float = 1.0
    offset_x: float = -0.5
    offset_y: float = 0.0
    julia_constant: complex | None = None

    @property
    def view(self) -> PlaneView:
        return PlaneView(
            width=self.width,
            height=self.height,
            zoom=self.zoom,
            offset_x=self.offset_x,
            offset_y=self.offset_y,
        )

    @property
    def is_julia(self) -> bool:
        return self.julia_constant is not None


@dataclass(frozen=True)
class EscapeTimeState:
    parameters: EscapeTimeParameters
    counts: np.ndarray
    moduli: np.ndarray

    @property
    def interior(self) -> np.ndarray:
        return self.counts >= self.parameters.max_iterations

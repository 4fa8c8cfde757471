"""Pixel to complex-plane mappings for the Mandelbrot and Julia views."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

MANDELBROT_SPAN = 3.5
JULIA_HALF_SPAN_X = 1.5
JULIA_HALF_SPAN_Y = 1.0


@dataclass(frozen=True)
class PlaneView:
    width: int
    height: int
    zoom: float = 1.0
    offset_x: float = 0.0
    offset_y: float = 0.0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("PlaneView dimensions must be positive")
        if self.zoom <= 0:
            raise ValueError("zoom must be positive")


def mandelbrot_point(px: float, py: float, view: PlaneView) -> complex:
    scale = MANDELBROT_SPAN / view.zoom
    return complex(
        (px - view.width / 2) * (scale / view.width) + view.offset_x,
        (py - view.height / 2) * (scale / view.height) + view.offset_y,
    )


def julia_point(px: float, py: float, view: PlaneView) -> complex:
    return complex(
        JULIA_HALF_SPAN_X * (px - view.width / 2) / (0.5 * view.zoom * view.width)
        + view.offset_x,
        JULIA_HALF_SPAN_Y * (py - view.height / 2) / (0.5 * view.zoom * view.height)
        + view.offset_y,
    )


def mandelbrot_plane(view: PlaneView) -> tuple[np.ndarray, np.ndarray]:
    scale = MANDELBROT_SPAN / view.zoom
    re = (np.arange(view.width) - view.width / 2) * (scale / view.width) + view.offset_x
    im = (np.arange(view.height) - view.height / 2) * (
        scale / view.height
    ) + view.offset_y
    return np.meshgrid(re, im)


def julia_plane(view: PlaneView) -> tuple[np.ndarray, np.ndarray]:
    re = (
        JULIA_HALF_SPAN_X
        * (np.arange(view.width) - view.width / 2)
        / (0.5 * view.zoom * view.width)
        + view.offset_x
    )
    im = (
        JULIA_HALF_SPAN_Y
        * (np.arange(view.height) - view.height / 2)
        / (0.5 * view.zoom * view.height)
        + view.offset_y
    )
    return np.meshgrid(re, im)

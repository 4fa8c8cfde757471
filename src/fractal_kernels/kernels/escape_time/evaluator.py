"""Escape-time iteration of ``z <- z**2 + c``.

Counting convention: the reported count is the number of ``z <- z**2 + c``
applications performed before ``|z|**2 > 4`` was observed. A Mandelbrot point
with ``|c| > 2`` therefore reports 1, a Julia start point already outside the
radius-2 disc reports 0, and a point that never escapes reports ``max_iter``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numba import jit, njit, prange

ESCAPE_RADIUS_SQUARED = 4.0


@dataclass(frozen=True)
class EscapeResult:
    count: int
    modulus: float
    max_iterations: int

    @property
    def escaped(self) -> bool:
        return self.count < self.max_iterations

    @property
    def smooth_count(self) -> float:
        return smooth_iteration(self.count, self.modulus, self.max_iterations)


@njit(cache=True)
def escape_time(c_real, c_imag, z_real, z_imag, max_iter):
    zr2 = z_real * z_real
    zi2 = z_imag * z_imag
    count = 0
    while zr2 + zi2 <= ESCAPE_RADIUS_SQUARED and count < max_iter:
        # i.e. with expanding (a + bi)^2 to a^2 + 2abi + b^2
        z_imag = 2.0 * z_real * z_imag + c_imag
        z_real = zr2 - zi2 + c_real
        zr2 = z_real * z_real
        zi2 = z_imag * z_imag
        count += 1
    return count, math.sqrt(zr2 + zi2)


def mandelbrot(c: complex, max_iterations: int) -> EscapeResult:
    if max_iterations < 0:
        raise ValueError("max_iterations must be non-negative")
    count, modulus = escape_time(c.real, c.imag, 0.0, 0.0, max_iterations)
    return EscapeResult(int(count), float(modulus), max_iterations)


def julia(z: complex, c: complex, max_iterations: int) -> EscapeResult:
    if max_iterations < 0:
        raise ValueError("max_iterations must be non-negative")
    count, modulus = escape_time(c.real, c.imag, z.real, z.imag, max_iterations)
    return EscapeResult(int(count), float(modulus), max_iterations)


def smooth_iteration(count, modulus, max_iterations):
    """Fractional iteration count for banding-free colouring.

    Works on scalars or arrays; interior points keep ``max_iterations``.
    """

    count = np.asarray(count, dtype=np.float64)
    modulus = np.asarray(modulus, dtype=np.float64)
    escaped = (count < max_iterations) & (modulus > 1.0)
    with np.errstate(divide="ignore", invalid="ignore"):
        refined = count + 1.0 - np.log(np.log(np.where(escaped, modulus, np.e))) / np.log(2.0)
    result = np.where(escaped, refined, count)
    if result.ndim == 0:
        return float(result)
    return result


@jit(nopython=True, fastmath=True, cache=True)
def _is_in_mandelbrot_interior(c_real, c_imag):
    x_minus = c_real - 0.25
    y2 = c_imag * c_imag
    q = x_minus * x_minus + y2

    if q * (q + x_minus) <= 0.25 * y2:
        return True

    if (c_real + 1.0) * (c_real + 1.0) + y2 <= 0.0625:
        return True

    return False


@jit(nopython=True, parallel=True, cache=True)
def mandelbrot_grid(re, im, max_iter, use_interior_check):
    height, width = re.shape
    counts = np.empty((height, width), dtype=np.int32)
    moduli = np.zeros((height, width), dtype=np.float64)

    for i in prange(height):
        for j in range(width):
            c_real = re[i, j]
            c_imag = im[i, j]
            if use_interior_check and _is_in_mandelbrot_interior(c_real, c_imag):
                counts[i, j] = max_iter
                continue
            count, modulus = escape_time(c_real, c_imag, 0.0, 0.0, max_iter)
            counts[i, j] = count
            moduli[i, j] = modulus

    return counts, moduli


@jit(nopython=True, parallel=True, cache=True)
def julia_grid(re, im, c_real, c_imag, max_iter):
    height, width = re.shape
    counts = np.empty((height, width), dtype=np.int32)
    moduli = np.zeros((height, width), dtype=np.float64)

    for i in prange(height):
        for j in range(width):
            count, modulus = escape_time(c_real, c_imag, re[i, j], im[i, j], max_iter)
            counts[i, j] = count
            moduli[i, j] = modulus

    return counts, moduli

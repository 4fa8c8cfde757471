from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ChladniParameters:
    frequency: float = 250.0
    particles: int = 3000


@dataclass
class ChladniState:
    particles: np.ndarray
    n: int
    m: int


@dataclass(frozen=True)
class WaveParameters:
    width: int = 133
    height: int = 133
    sources: int = 2
    frequency: float = 0.1
    speed: float = 1.0


@dataclass(frozen=True)
class WaveState:
    time: float
    field: np.ndarray


@dataclass(frozen=True)
class LifecycleParameters:
    width: int = 400
    height: int = 400
    speed: float = 1.0

from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class SpinState:
    angle_x: float = 0.0
    angle_y: float = 0.0
    time_s: float = 0.0


@dataclass(frozen=True)
class SpinningGeometry(Generic[T]):
    """Leaf primitives together with the view rotation for the current frame."""

    spin: SpinState
    items: Sequence[T]
    scale: float = 1.0

"""Turtle interpretation of expanded L-system strings."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

DRAW = "F"
TURN_LEFT = "+"
TURN_RIGHT = "-"
PUSH = "["
POP = "]"

DEFAULT_PADDING = 40.0
DEFAULT_FALLBACK_SCALE = 1.0
_DEGENERATE_EXTENT = 1e-9


@dataclass(frozen=True)
class Segment:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class BoundingBox:
    min_x: float = 0.0
    min_y: float = 0.0
    max_x: float = 0.0
    max_y: float = 0.0

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def is_degenerate(self) -> bool:
        return self.width <= _DEGENERATE_EXTENT or self.height <= _DEGENERATE_EXTENT


@dataclass(frozen=True)
class TurtleState:
    x: float = 0.0
    y: float = 0.0
    heading: float = 0.0


@dataclass(frozen=True)
class TurtleDrawing:
    segments: tuple[Segment, ...]
    bounds: BoundingBox
    spawns: tuple[tuple[float, float], ...] = ()
    final_state: TurtleState = TurtleState()


def interpret(
    symbols: str,
    angle_deg: float,
    *,
    heading_deg: float = 0.0,
    unit: float = 1.0,
    spawn_probability: float = 0.0,
    rng: random.Random | None = None,
) -> TurtleDrawing:
    """Walk ``symbols`` left to right and collect the emitted segments.

    ``spawn_probability`` marks the end point of a draw as a leaf spawn point;
    it requires ``rng`` when non-zero. Unknown symbols are ignored.
    """

    if spawn_probability > 0.0 and rng is None:
        raise ValueError("rng is required when spawn_probability is set")

    turn = math.radians(angle_deg)
    state = TurtleState(heading=math.radians(heading_deg))
    stack: list[TurtleState] = []
    segments: list[Segment] = []
    spawns: list[tuple[float, float]] = []
    min_x = max_x = min_y = max_y = 0.0

    for char in symbols:
        if char == DRAW:
            nx = state.x + math.cos(state.heading) * unit
            ny = state.y + math.sin(state.heading) * unit
            segments.append(Segment(state.x, state.y, nx, ny))
            if spawn_probability > 0.0 and rng.random() < spawn_probability:
                spawns.append((nx, ny))
            state = TurtleState(nx, ny, state.heading)
            min_x = min(min_x, nx)
            max_x = max(max_x, nx)
            min_y = min(min_y, ny)
            max_y = max(max_y, ny)
        elif char == TURN_LEFT:
            state = TurtleState(state.x, state.y, state.heading + turn)
        elif char == TURN_RIGHT:
            state = TurtleState(state.x, state.y, state.heading - turn)
        elif char == PUSH:
            stack.append(state)
        elif char == POP:
            # Unbalanced close brackets leave the turtle where it is.
            if stack:
                state = stack.pop()

    return TurtleDrawing(
        segments=tuple(segments),
        bounds=BoundingBox(min_x, min_y, max_x, max_y),
        spawns=tuple(spawns),
        final_state=state,
    )


@dataclass(frozen=True)
class ViewportFit:
    scale: float
    offset_x: float
    offset_y: float

    def apply(self, x: float, y: float) -> tuple[float, float]:
        return x * self.scale + self.offset_x, y * self.scale + self.offset_y


def fit_to_viewport(
    bounds: BoundingBox,
    width: float,
    height: float,
    *,
    padding: float = DEFAULT_PADDING,
    fallback_scale: float = DEFAULT_FALLBACK_SCALE,
) -> ViewportFit:
    """Uniform scale plus centring offsets mapping ``bounds`` into the viewport."""

    candidates = []
    if bounds.width > _DEGENERATE_EXTENT:
        candidates.append((width - padding * 2) / bounds.width)
    if bounds.height > _DEGENERATE_EXTENT:
        candidates.append((height - padding * 2) / bounds.height)

    scale = min(candidates) if candidates else fallback_scale
    if not math.isfinite(scale) or scale <= 0.0:
        scale = fallback_scale

    offset_x = (width - bounds.width * scale) / 2 - bounds.min_x * scale
    offset_y = (height - bounds.height * scale) / 2 - bounds.min_y * scale
    return ViewportFit(scale=scale, offset_x=offset_x, offset_y=offset_y)

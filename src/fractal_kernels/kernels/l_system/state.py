from dataclasses import dataclass

from fractal_kernels.kernels.l_system.grammar import LSystemGrammar
from fractal_kernels.kernels.l_system.leaves import LeafParticle
from fractal_kernels.kernels.l_system.turtle import TurtleDrawing


@dataclass(frozen=True)
class LSystemState:
    grammar: LSystemGrammar
    symbols: str
    drawing: TurtleDrawing
    generation: int = 0
    time_since_last_update_ms: float = 0.0
    leaves: tuple[LeafParticle, ...] = ()

"""Named kernels that the CLI and host loops can look up and drive."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Callable

import numpy as np
import reactivex

from fractal_kernels.kernels.circle_packing import CirclePackingStateProvider
from fractal_kernels.kernels.dla import DLAStateProvider
from fractal_kernels.kernels.dynamics import (DoublePendulumStateProvider,
                                              LorenzStateProvider)
from fractal_kernels.kernels.escape_time import (EscapeTimeParameters,
                                                 EscapeTimeStateProvider)
from fractal_kernels.kernels.ifs import (BARNSLEY_FERN, SIERPINSKI_GASKET,
                                         ChaosGameStateProvider)
from fractal_kernels.kernels.l_system import PRESETS, LSystemStateProvider
from fractal_kernels.kernels.parametric import (ChladniStateProvider,
                                                LifecycleFlowerStateProvider,
                                                WaveInterferenceStateProvider,
                                                flower_of_life, maurer_rose,
                                                phyllotaxis, superformula)
from fractal_kernels.kernels.providers import (ObservableProvider,
                                               StaticStateProvider,
                                               resolve_rng)
from fractal_kernels.kernels.reaction_diffusion import GrayScottStateProvider
from fractal_kernels.kernels.subdivision import (MENGER_SPIN, TETRAHEDRON_SPIN,
                                                 BronchialTreeStateProvider,
                                                 Cube, SpinningGeometryProvider,
                                                 equilateral_triangle,
                                                 menger_sponge, project_cubes,
                                                 regular_tetrahedron,
                                                 sierpinski_tetrahedron,
                                                 sierpinski_triangle)
from fractal_kernels.runtime.frame_scheduler import FrameScheduler
from fractal_kernels.utilities.env import Configuration
from fractal_kernels.utilities.logging import get_logger

logger = get_logger(__name__)

ProviderFactory = Callable[[FrameScheduler, int | None], ObservableProvider[Any]]


@dataclass(frozen=True)
class KernelEntry:
    name: str
    description: str
    factory: ProviderFactory
    summarize: Callable[[Any], str] = repr

    def build(
        self, scheduler: FrameScheduler, seed: int | None = None
    ) -> ObservableProvider[Any]:
        return self.factory(scheduler, seed)


class KernelRegistry:
    def __init__(self, entries: list[KernelEntry] | None = None) -> None:
        self._entries: dict[str, KernelEntry] = {}
        for entry in entries or []:
            self.register(entry)

    def register(self, entry: KernelEntry) -> None:
        if entry.name in self._entries:
            raise ValueError(f"Kernel '{entry.name}' is already registered")
        self._entries[entry.name] = entry

    def get(self, name: str) -> KernelEntry | None:
        return self._entries.get(name)

    def names(self) -> list[str]:
        return sorted(self._entries)

    def entries(self) -> list[KernelEntry]:
        return [self._entries[name] for name in self.names()]

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def _py_rng(seed: int | None) -> random.Random:
    return random.Random(Configuration.seed() if seed is None else seed)


def _np_rng(seed: int | None) -> np.random.Generator:
    return resolve_rng(seed)


def _l_system(preset: str, iterations: int, *, leaves: bool = False) -> ProviderFactory:
    def factory(scheduler: FrameScheduler, seed: int | None) -> ObservableProvider[Any]:
        return LSystemStateProvider(
            scheduler,
            PRESETS[preset],
            iterations,
            leaves=leaves,
            rng=_py_rng(seed),
        )

    return factory


def _summarize_l_system(state) -> str:
    return (
        f"generation={state.generation} symbols={len(state.symbols)} "
        f"segments={len(state.drawing.segments)} leaves={len(state.leaves)}"
    )


def _summarize_points(points: np.ndarray) -> str:
    return f"points={len(points)}"


def _escape_time(parameters: EscapeTimeParameters) -> ProviderFactory:
    return lambda scheduler, seed: EscapeTimeStateProvider(reactivex.just(parameters))


def _summarize_escape_time(state) -> str:
    return (
        f"pixels={state.counts.size} interior={int(np.count_nonzero(state.interior))} "
        f"max_iterations={state.parameters.max_iterations}"
    )


def _summarize_menger(state) -> str:
    visible = project_cubes(
        state.items, state.spin.angle_x, state.spin.angle_y, 200.0, 200.0
    )
    return f"cubes={len(state.items)} visible={len(visible)}"


def _summarize_pendulum(state) -> str:
    bob = state.trail.latest()
    position = "none" if bob is None else f"({bob[0]:.1f}, {bob[1]:.1f})"
    return (
        f"frames={state.frames} a1={state.pendulum.a1:.3f} "
        f"a2={state.pendulum.a2:.3f} bob={position}"
    )


def default_registry() -> KernelRegistry:
    return KernelRegistry(
        [
            KernelEntry(
                "koch-snowflake",
                "Koch snowflake grown one generation per second",
                _l_system("koch", 4),
                _summarize_l_system,
            ),
            KernelEntry(
                "dragon-curve",
                "Heighway dragon curve",
                _l_system("dragon", 10),
                _summarize_l_system,
            ),
            KernelEntry(
                "l-system-tree",
                "Bracketed plant grammar",
                _l_system("tree", 4),
                _summarize_l_system,
            ),
            KernelEntry(
                "windy-plant",
                "Branching plant shedding leaves in the wind",
                _l_system("windy", 5, leaves=True),
                _summarize_l_system,
            ),
            KernelEntry(
                "barnsley-fern",
                "Chaos game over the Barnsley fern maps",
                lambda scheduler, seed: ChaosGameStateProvider(
                    scheduler, BARNSLEY_FERN, rng=_py_rng(seed)
                ),
                lambda state: f"points={state.generated}",
            ),
            KernelEntry(
                "sierpinski-chaos",
                "Chaos game over the three Sierpinski maps",
                lambda scheduler, seed: ChaosGameStateProvider(
                    scheduler, SIERPINSKI_GASKET, rng=_py_rng(seed)
                ),
                lambda state: f"points={state.generated}",
            ),
            KernelEntry(
                "mandelbrot",
                "Escape-time counts over the Mandelbrot set",
                _escape_time(EscapeTimeParameters()),
                _summarize_escape_time,
            ),
            KernelEntry(
                "julia",
                "Escape-time counts over a Julia set",
                _escape_time(
                    EscapeTimeParameters(offset_x=0.0, julia_constant=complex(-0.7, 0.27015))
                ),
                _summarize_escape_time,
            ),
            KernelEntry(
                "sierpinski-triangle",
                "Sierpinski triangle by recursive subdivision",
                lambda scheduler, seed: StaticStateProvider(
                    sierpinski_triangle(equilateral_triangle(400, 400), 6)
                ),
                lambda triangles: f"triangles={len(triangles)}",
            ),
            KernelEntry(
                "sierpinski-tetrahedron",
                "Sierpinski tetrahedron by recursive subdivision",
                lambda scheduler, seed: SpinningGeometryProvider(
                    scheduler,
                    sierpinski_tetrahedron(regular_tetrahedron(), 4),
                    TETRAHEDRON_SPIN,
                ),
                lambda state: (
                    f"tetrahedra={len(state.items)} angle_y={state.spin.angle_y:.3f}"
                ),
            ),
            KernelEntry(
                "menger-sponge",
                "Menger sponge by recursive subdivision",
                lambda scheduler, seed: SpinningGeometryProvider(
                    scheduler, menger_sponge(Cube(0.0, 0.0, 0.0, 300.0), 2), MENGER_SPIN
                ),
                _summarize_menger,
            ),
            KernelEntry(
                "bronchial-tree",
                "Three-dimensional binary branching tree",
                lambda scheduler, seed: BronchialTreeStateProvider(scheduler, 7),
                lambda state: f"branches={len(state.items)} scale={state.scale:.3f}",
            ),
            KernelEntry(
                "apollonian-gasket",
                "Apollonian circle packing",
                lambda scheduler, seed: CirclePackingStateProvider(),
                lambda state: f"circles={state.circle_count}",
            ),
            KernelEntry(
                "dla",
                "Diffusion-limited aggregation",
                lambda scheduler, seed: DLAStateProvider(scheduler, rng=_py_rng(seed)),
                lambda state: (
                    f"particles={state.particle_count} radius={state.max_radius:.1f} "
                    f"halted={state.halted}"
                ),
            ),
            KernelEntry(
                "reaction-diffusion",
                "Gray-Scott reaction-diffusion",
                lambda scheduler, seed: GrayScottStateProvider(
                    scheduler, rng=_np_rng(seed)
                ),
                lambda state: (
                    f"steps={state.steps} mean_a={float(state.a.mean()):.4f} "
                    f"mean_b={float(state.b.mean()):.4f}"
                ),
            ),
            KernelEntry(
                "lorenz",
                "Lorenz attractor trajectory",
                lambda scheduler, seed: LorenzStateProvider(scheduler),
                lambda state: (
                    "steps={} point=({:.3f}, {:.3f}, {:.3f})".format(
                        state.steps, *state.point
                    )
                ),
            ),
            KernelEntry(
                "double-pendulum",
                "Damped double pendulum",
                lambda scheduler, seed: DoublePendulumStateProvider(scheduler),
                _summarize_pendulum,
            ),
            KernelEntry(
                "phyllotaxis",
                "Sunflower seed layout",
                lambda scheduler, seed: StaticStateProvider(phyllotaxis()),
                _summarize_points,
            ),
            KernelEntry(
                "maurer-rose",
                "Maurer rose for n=6, d=71",
                lambda scheduler, seed: StaticStateProvider(maurer_rose(6, 71)),
                _summarize_points,
            ),
            KernelEntry(
                "superformula",
                "Gielis superformula",
                lambda scheduler, seed: StaticStateProvider(superformula(6, 1, 1, 1)),
                _summarize_points,
            ),
            KernelEntry(
                "flower-of-life",
                "Flower of Life circle centres",
                lambda scheduler, seed: StaticStateProvider(flower_of_life(3)),
                lambda centres: f"circles={len(centres)}",
            ),
            KernelEntry(
                "chladni",
                "Sand on a vibrating Chladni plate",
                lambda scheduler, seed: ChladniStateProvider(scheduler, rng=_np_rng(seed)),
                lambda state: f"particles={len(state.particles)} n={state.n} m={state.m}",
            ),
            KernelEntry(
                "wave-interference",
                "Interference of circular waves",
                lambda scheduler, seed: WaveInterferenceStateProvider(scheduler),
                lambda state: f"time={state.time:.2f} mean={float(state.field.mean()):.4f}",
            ),
            KernelEntry(
                "lifecycle-flower",
                "Flower that grows, blooms and withers on a ten second cycle",
                lambda scheduler, seed: LifecycleFlowerStateProvider(
                    scheduler, rng=_np_rng(seed)
                ),
                lambda frame: (
                    f"t={frame.phase.t:.2f} stem={frame.phase.stem:.2f} "
                    f"bloom={frame.phase.bloom:.2f} seeds={len(frame.seeds)}"
                ),
            ),
        ]
    )

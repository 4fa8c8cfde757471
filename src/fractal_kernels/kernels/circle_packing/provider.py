from __future__ import annotations

import reactivex
from reactivex import operators as ops

from fractal_kernels.kernels.circle_packing.packing import apollonian_gasket
from fractal_kernels.kernels.circle_packing.state import (PackingParameters,
                                                          PackingState)
from fractal_kernels.kernels.providers import ObservableProvider
from fractal_kernels.utilities.logging import get_logger

logger = get_logger(__name__)


def build_packing(parameters: PackingParameters) -> PackingState:
    circles = apollonian_gasket(
        parameters.width,
        parameters.height,
        parameters.depth,
        radius_fraction=parameters.radius_fraction,
    )
    logger.info("Packed %s circles for %s", len(circles), parameters)
    return PackingState(parameters=parameters, circles=tuple(circles))


class CirclePackingStateProvider(ObservableProvider[PackingState]):
    """Repacks only when the parameters change; packing is not time-stepped."""

    def __init__(
        self, parameters: reactivex.Observable[PackingParameters] | None = None
    ) -> None:
        self._parameters = (
            parameters if parameters is not None else reactivex.just(PackingParameters())
        )

    def observable(self) -> reactivex.Observable[PackingState]:
        return self._parameters.pipe(
            ops.distinct_until_changed(),
            ops.map(build_packing),
            ops.share(),
        )

from __future__ import annotations

import reactivex
from reactivex import operators as ops

from fractal_kernels.kernels.escape_time.field import EscapeTimeField
from fractal_kernels.kernels.escape_time.state import (EscapeTimeParameters,
                                                       EscapeTimeState)
from fractal_kernels.kernels.providers import ObservableProvider


class EscapeTimeStateProvider(ObservableProvider[EscapeTimeState]):
    """Recomputes the escape-time field only when the view parameters change."""

    def __init__(
        self,
        parameters: reactivex.Observable[EscapeTimeParameters] | None = None,
        field: EscapeTimeField | None = None,
    ) -> None:
        self._parameters = (
            parameters
            if parameters is not None
            else reactivex.just(EscapeTimeParameters())
        )
        self._field = field or EscapeTimeField()

    def observable(self) -> reactivex.Observable[EscapeTimeState]:
        return self._parameters.pipe(
            ops.distinct_until_changed(),
            ops.map(self._field.evaluate),
            ops.share(),
        )

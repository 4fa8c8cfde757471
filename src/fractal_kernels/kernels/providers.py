from __future__ import annotations

import random
from abc import abstractmethod
from typing import Callable, Generic, TypeVar

import numpy as np
import reactivex
from reactivex import operators as ops

from fractal_kernels.utilities.env import Configuration

T = TypeVar("T")
StateT = TypeVar("StateT")


class ObservableProvider(Generic[T]):
    @abstractmethod
    def observable(self) -> reactivex.Observable[T]:
        raise NotImplementedError("")


class StaticStateProvider(ObservableProvider[T]):
    def __init__(self, state: T) -> None:
        self._state = state

    @property
    def state(self) -> T:
        return self._state

    def observable(self) -> reactivex.Observable[T]:
        return reactivex.just(self._state).pipe(ops.share())


def resolve_rng(seed: int | None = None) -> np.random.Generator:
    if seed is None:
        seed = Configuration.seed()
    return np.random.default_rng(seed)


class RngStateProvider(ObservableProvider[StateT], Generic[StateT]):
    """Base provider that manages a shared random number generator."""

    def __init__(self, *, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random(Configuration.seed())

    @property
    def rng(self) -> random.Random:
        return self._rng


ParamsT = TypeVar("ParamsT")


def parameterized_stream(
    parameters: reactivex.Observable[ParamsT],
    build_stream: Callable[[ParamsT], reactivex.Observable[StateT]],
) -> reactivex.Observable[StateT]:
    """Rebuild a kernel stream from scratch whenever its parameters change."""

    return parameters.pipe(
        ops.distinct_until_changed(),
        ops.map(build_stream),
        ops.switch_latest(),
        ops.share(),
    )

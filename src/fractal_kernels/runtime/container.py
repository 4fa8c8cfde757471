from __future__ import annotations

from typing import Any, Mapping

from lagom import Container, Singleton

from fractal_kernels.runtime.clock_driver import ClockFrameDriver
from fractal_kernels.runtime.frame_scheduler import FrameScheduler
from fractal_kernels.runtime.registry import KernelRegistry, default_registry
from fractal_kernels.utilities.logging import get_logger

RuntimeContainer = Container

logger = get_logger(__name__)


def build_runtime_container(
    overrides: Mapping[type[Any], object] | None = None,
) -> RuntimeContainer:
    container = Container()
    logger.debug("Created Lagom container for kernel runtime.")
    configure_runtime_container(container=container, overrides=overrides)
    return container


def configure_runtime_container(
    *,
    container: RuntimeContainer,
    overrides: Mapping[type[Any], object] | None = None,
) -> None:
    logger.debug(
        "Configuring Lagom runtime container with overrides=%s.",
        set(overrides.keys()) if overrides else set(),
    )
    _bind(container, overrides, FrameScheduler, Singleton(FrameScheduler))
    _bind(container, overrides, KernelRegistry, Singleton(lambda: default_registry()))
    _bind(
        container,
        overrides,
        ClockFrameDriver,
        Singleton(
            lambda resolver: ClockFrameDriver(scheduler=resolver[FrameScheduler])
        ),
    )


def _bind(
    container: RuntimeContainer,
    overrides: Mapping[type[Any], object] | None,
    key: type[Any],
    value: object,
) -> None:
    if overrides and key in overrides:
        container[key] = overrides[key]
        logger.debug("Applied Lagom override for %s.", key)
        return
    if key in container.defined_types:
        logger.debug("Lagom already defined %s; skipping registration.", key)
        return
    container[key] = value
    logger.debug("Registered Lagom provider for %s.", key)

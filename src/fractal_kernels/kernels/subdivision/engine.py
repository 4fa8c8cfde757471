"""Depth-bounded recursive subdivision driven by an explicit work list."""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar

P = TypeVar("P")


def subdivide(
    root: P,
    depth: int,
    split: Callable[[P], Iterable[P]],
) -> list[P]:
    """Split ``root`` ``depth`` times and return the leaves in depth-first order.

    Cost is ``branching_factor ** depth``; callers keep ``depth`` small.
    """

    if depth < 0:
        raise ValueError("depth must be non-negative")

    leaves: list[P] = []
    stack: list[tuple[P, int]] = [(root, depth)]
    while stack:
        primitive, remaining = stack.pop()
        if remaining == 0:
            leaves.append(primitive)
            continue
        children = list(split(primitive))
        stack.extend((child, remaining - 1) for child in reversed(children))
    return leaves


def leaf_count(branching_factor: int, depth: int) -> int:
    if depth < 0:
        raise ValueError("depth must be non-negative")
    return branching_factor**depth

"""Free-function combinators over Lazy."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from lazily.kernel import Lazy, LazyConfig

A = TypeVar("A")
B = TypeVar("B")
R = TypeVar("R")
T = TypeVar("T")


def join(outer: Lazy[Lazy[T]]) -> Lazy[T]:
    """Force ``outer`` and return its inner Lazy, unforced.

    Args:
        outer: A double-nested lazy instance

    Returns:
        The inner lazy instance

    Raises:
        NotNestedError: If ``outer`` does not hold a Lazy
    """
    return Lazy.join(outer)


def sequence(items: Iterable[Lazy[T]], config: LazyConfig | None = None) -> Lazy[list[T]]:
    """Collect several lazy values into one lazy list.

    Semantics:
        - Nothing is forced until the returned instance is
        - Items are forced in iteration order
        - The iterable is consumed eagerly, so generators are safe to pass

    Args:
        items: Lazy values to combine
        config: Optional configuration for the combined instance

    Returns:
        Lazy[list[T]]: A lazy list of the forced values.
    """
    pending = list(items)
    return Lazy.defer(lambda: [item.get() for item in pending], config)


def lift2(fn: Callable[[A, B], R], a: Lazy[A], b: Lazy[B]) -> Lazy[R]:
    """Lift a two-argument function over two lazy values.

    Built from ``map`` and ``apply``: ``b.apply(a.map(curry(fn)))``.
    ``a`` is forced before ``b``.
    """
    return b.apply(a.map(lambda x: lambda y: fn(x, y)))

"""State cell variants for Lazy."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Unevaluated(Generic[T]):
    """A value still waiting on its producer."""

    producer: Callable[[], T]


@dataclass(frozen=True)
class Evaluated(Generic[T]):
    """A computed (or directly supplied) value."""

    result: T


LazyState = Unevaluated[T] | Evaluated[T]

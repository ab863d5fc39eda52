"""Lazy - a deferred, memoized value and its combinators."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Mapping
from typing import Any, Generic, TypeVar

from pydantic import ValidationError

from lazily.errors import NotNestedError, SnapshotError
from lazily.kernel.config import DEFAULT_CONFIG, LazyConfig
from lazily.kernel.snapshot import EvaluatedSnapshot
from lazily.kernel.state import Evaluated, LazyState, Unevaluated

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


# Extension registry - class-level storage for Lazy capabilities
_extensions_registry: dict[str, Callable[..., Any]] = {}


class Lazy(Generic[T]):
    """Wrapper for values that delays evaluation and memoizes the result.

    An instance is either unevaluated (holding a producer) or evaluated
    (holding the result). The first successful ``get()`` runs the producer
    and switches to the evaluated state for good. If the producer raises,
    the error propagates and the instance stays unevaluated, so a later
    ``get()`` tries again.

    Capabilities can be registered via register_op() for extensibility.

    Example:
        >>> doubled = Lazy.defer(lambda: 3).map(lambda n: n * 2)
        >>> doubled.get()
        6
    """

    def __init__(self, state: LazyState[T], config: LazyConfig | None = None) -> None:
        self._state: LazyState[T] = state
        self._config = config or DEFAULT_CONFIG
        self._lock = threading.RLock() if self._config.thread_safe else None

    def __getstate__(self) -> dict[str, Any]:
        # Locks cannot be copied or pickled; each copy gets its own
        state = self.__dict__.copy()
        state["_lock"] = None
        return state

    def __setstate__(self, state: dict[str, Any]) -> None:
        self.__dict__.update(state)
        self._lock = threading.RLock() if self._config.thread_safe else None

    @classmethod
    def defer(cls, producer: Callable[[], T], config: LazyConfig | None = None) -> Lazy[T]:
        """Create an unevaluated instance from a producer.

        The producer is not called here.

        Args:
            producer: Zero-argument function computing the value
            config: Optional configuration inherited by derived instances

        Returns:
            A lazy instance of the to-be-evaluated value
        """
        return cls(Unevaluated(producer), config)

    lazy = defer

    @classmethod
    def pure(cls, value: T, config: LazyConfig | None = None) -> Lazy[T]:
        """Create an already evaluated instance.

        Args:
            value: An already evaluated value
            config: Optional configuration inherited by derived instances

        Returns:
            A lazy instance of the evaluated value
        """
        return cls(Evaluated(value), config)

    @classmethod
    def register_op(cls, name: str, fn: Callable[..., Any]) -> None:
        """Register an operation capability on the Lazy class.

        Args:
            name: The operation name (e.g., "cast")
            fn: Function taking the instance as its first argument
        """
        _extensions_registry[name] = fn

    def __getattr__(self, name: str) -> Any:
        """Allow calling registered extension methods."""
        if name in _extensions_registry:
            fn = _extensions_registry[name]
            return lambda *args, **kwargs: fn(self, *args, **kwargs)
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    @property
    def config(self) -> LazyConfig:
        return self._config

    @property
    def is_evaluated(self) -> bool:
        """Whether the value has been computed. Never forces."""
        return isinstance(self._state, Evaluated)

    @property
    def value(self) -> T:
        """The inner value, computed on first access."""
        return self.get()

    def get(self) -> T:
        """Return the value, running the producer if it has not run yet."""
        state = self._state
        if isinstance(state, Evaluated):
            return state.result

        if self._lock is None:
            return self._force()
        with self._lock:
            return self._force()

    def _force(self) -> T:
        # Another thread may have finished while we waited on the lock
        state = self._state
        if isinstance(state, Evaluated):
            return state.result

        name = self._config.name
        label = name or hex(id(self))
        trace = self._config.trace
        step_id: int | None = None

        try:
            if trace is not None:
                step_id = trace.record("force_begin", info={"name": name})
                if step_id is not None:
                    trace.push(step_id)

            logger.debug("Forcing lazy value %s", label)
            start_time = time.perf_counter()
            try:
                result = state.producer()
            except Exception as exc:
                logger.debug(
                    "Producer for %s raised %s; value stays unevaluated",
                    label,
                    type(exc).__name__,
                )
                if trace is not None:
                    trace.record(
                        "force_error",
                        info={"name": name, "error": str(exc)},
                        parent_id=step_id,
                    )
                raise
            duration_ms = (time.perf_counter() - start_time) * 1000

            self._state = Evaluated(result)

            if trace is not None:
                trace.record(
                    "force_end",
                    info={"name": name},
                    parent_id=step_id,
                    duration_ms=duration_ms,
                )
            logger.debug("Forced lazy value %s in %.3f ms", label, duration_ms)
            return result
        finally:
            if trace is not None and step_id is not None:
                trace.pop()

    def _derive(self, suffix: str, producer: Callable[[], U]) -> Lazy[U]:
        """Create a new unevaluated instance sharing this one's configuration."""
        return Lazy(Unevaluated(producer), self._config.derive(suffix))

    def map(self, mapper: Callable[[T], U]) -> Lazy[U]:
        """Apply a transformation on the inner value, deferred.

        Example:
            >>> Lazy.defer(lambda: 3).map(lambda x: x * 2).get()
            6
        """
        return self._derive("map", lambda: mapper(self.get()))

    def bind(self, binder: Callable[[T], Lazy[U]]) -> Lazy[U]:
        """Chain a computation that itself returns a Lazy.

        The result of ``binder`` is forced as part of forcing the returned
        instance, so evaluation is delayed as long as possible.

        Example:
            >>> Lazy.defer(lambda: 3).bind(lambda x: Lazy.defer(lambda: x * 2)).get()
            6
        """
        return self._derive("bind", lambda: binder(self.get()).get())

    def extend(self, extender: Callable[[Lazy[T]], U]) -> Lazy[U]:
        """Apply a transformation on the wrapper itself, deferred.

        ``extender`` receives this Lazy rather than its value, and decides
        whether and when to force it.

        Example:
            >>> Lazy.defer(lambda: 3).extend(lambda lz: lz.get() * 2).get()
            6
        """
        return self._derive("extend", lambda: extender(self))

    def apply(self, applier: Lazy[Callable[[T], U]]) -> Lazy[U]:
        """Apply a wrapped function to the inner value, deferred.

        Example:
            >>> Lazy.defer(lambda: 3).apply(Lazy.pure(lambda x: x * 2)).get()
            6
        """
        return self._derive("apply", lambda: applier.get()(self.get()))

    def flatten(self) -> T:
        """Return the inner Lazy of a nested Lazy without forcing it.

        Forces this (outer) instance.

        Raises:
            NotNestedError: If the forced value is not itself a Lazy
        """
        inner = self.get()
        if not isinstance(inner, Lazy):
            raise NotNestedError(inner)
        return inner

    @staticmethod
    def join(outer: Lazy[Lazy[U]]) -> Lazy[U]:
        """Return the inner Lazy of a double-nested instance.

        Example:
            >>> Lazy.join(Lazy.defer(lambda: Lazy.pure(3))).get()
            3
        """
        return outer.flatten()

    def to_snapshot(self) -> EvaluatedSnapshot:
        """Force the value and return it as an evaluated snapshot model."""
        return EvaluatedSnapshot.of(self.get())

    def to_serializable(self) -> dict[str, Any]:
        """Force the value and return ``{"evaluated": True, "value": value}``."""
        return dict(self.to_snapshot())

    def to_json(self) -> str:
        """Force the value and return the snapshot encoded as JSON."""
        return self.to_snapshot().model_dump_json()

    @classmethod
    def from_serializable(
        cls,
        data: Mapping[str, Any] | EvaluatedSnapshot,
        config: LazyConfig | None = None,
    ) -> Lazy[Any]:
        """Rebuild an evaluated instance from an exported snapshot.

        Raises:
            SnapshotError: If ``data`` is not an evaluated snapshot
        """
        try:
            snapshot = EvaluatedSnapshot.model_validate(data)
        except ValidationError as e:
            raise SnapshotError(f"Invalid lazy snapshot: {e}") from e
        return cls.pure(snapshot.value, config)

    @classmethod
    def from_json(cls, text: str | bytes, config: LazyConfig | None = None) -> Lazy[Any]:
        """Rebuild an evaluated instance from ``to_json`` output.

        Raises:
            SnapshotError: If ``text`` is not a JSON evaluated snapshot
        """
        try:
            snapshot = EvaluatedSnapshot.model_validate_json(text)
        except ValidationError as e:
            raise SnapshotError(f"Invalid lazy snapshot: {e}") from e
        return cls.pure(snapshot.value, config)

    def __str__(self) -> str:
        return str(self.get())

    def __repr__(self) -> str:
        state = self._state
        if isinstance(state, Evaluated):
            return f"Lazy(evaluated={state.result!r})"
        return "Lazy(<unevaluated>)"

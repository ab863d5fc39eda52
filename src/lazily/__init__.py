from .errors import CastError, LazyError, NotNestedError, SnapshotError
from .kernel import (
    DEFAULT_CONFIG,
    Evaluated,
    EvaluatedSnapshot,
    Evidence,
    Lazy,
    LazyConfig,
    Trace,
    Unevaluated,
)
from .combinators import join, lift2, sequence

# Registers Lazy.cast
from . import structured  # noqa: F401, E402

__all__ = [
    # Core
    "Lazy",
    "Unevaluated",
    "Evaluated",
    "LazyConfig",
    "DEFAULT_CONFIG",
    "EvaluatedSnapshot",
    # Combinators
    "join",
    "sequence",
    "lift2",
    # Errors
    "LazyError",
    "NotNestedError",
    "CastError",
    "SnapshotError",
    # Tracing
    "Trace",
    "Evidence",
]

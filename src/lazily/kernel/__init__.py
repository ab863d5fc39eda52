"""Kernel layer - the Lazy cell and its runtime support."""

from lazily.kernel.config import DEFAULT_CONFIG, LazyConfig
from lazily.kernel.lazy import Lazy
from lazily.kernel.snapshot import EvaluatedSnapshot
from lazily.kernel.state import Evaluated, LazyState, Unevaluated
from lazily.kernel.trace import Evidence, Trace

__all__ = [
    "Lazy",
    # State
    "LazyState",
    "Unevaluated",
    "Evaluated",
    # Config
    "LazyConfig",
    "DEFAULT_CONFIG",
    # Serialization
    "EvaluatedSnapshot",
    # Tracing
    "Trace",
    "Evidence",
]

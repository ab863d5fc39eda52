"""Per-instance configuration for Lazy."""

from __future__ import annotations

from dataclasses import dataclass, replace

from lazily.kernel.trace import Trace


@dataclass(frozen=True)
class LazyConfig:
    """Configuration shared by a Lazy and everything derived from it.

    Attributes:
        name: Label used in log records and trace info
        thread_safe: Guard the unevaluated -> evaluated transition with a lock
        trace: Optional recorder for force events
    """

    name: str | None = None
    thread_safe: bool = True
    trace: Trace | None = None

    def derive(self, suffix: str) -> LazyConfig:
        """Config for an instance built from this one by a combinator."""
        if self.name is None:
            return self
        return replace(self, name=f"{self.name}.{suffix}")


DEFAULT_CONFIG = LazyConfig()

"""Error types raised by lazily itself.

Failures inside user producers are never wrapped; these cover only the
package's own contracts.
"""

from __future__ import annotations


class LazyError(Exception):
    """Base class for errors defined by lazily."""


class NotNestedError(LazyError, TypeError):
    """Raised when flatten/join forces a value that is not a Lazy."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Expected a nested Lazy, got {type(value).__name__}")


class CastError(LazyError):
    """Error raised when value casting/validation fails.

    This error preserves the raw value for debugging purposes.
    """

    def __init__(self, message: str, raw_value: object) -> None:
        self.raw_value = raw_value
        super().__init__(message)

    def __repr__(self) -> str:
        return f"CastError({super().__repr__()}, raw_value={self.raw_value!r})"


class SnapshotError(LazyError, ValueError):
    """Raised when a serialized snapshot cannot be turned back into a Lazy."""

"""Runtime trace infrastructure - separate from the values being computed.

This module captures force events for profiling and debugging.
Nested forcing (a derived Lazy forcing its source) shows up as parent-child
links, which are reconstructed only during visualization via as_tree().
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class Evidence:
    """A single force event captured at runtime."""

    action: str
    id: int = 0
    parent_id: int | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)
    duration_ms: float | None = None


class Trace:
    """Recorder for force events.

    Each thread keeps its own stack of open events so that a producer which
    forces another Lazy records that inner force as a child. The event list
    itself is shared and guarded by a lock.

    Performance guarantees:
    - Trace disabled -> single flag check overhead
    - Evidence append is O(1)
    - No recursive tree construction during execution
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[Evidence] = []
        self._next_id: int = 0
        self._lock = threading.Lock()
        self._local = threading.local()

    def __getstate__(self) -> dict[str, Any]:
        state = self.__dict__.copy()
        del state["_lock"], state["_local"]
        return state

    def __setstate__(self, state: dict[str, Any]) -> None:
        self.__dict__.update(state)
        self._lock = threading.Lock()
        self._local = threading.local()

    def _stack(self) -> list[int]:
        stack = getattr(self._local, "stack", None)
        if stack is None:
            stack = []
            self._local.stack = stack
        return stack

    def push(self, event_id: int) -> None:
        """Push an event onto the current thread's stack as the active parent."""
        self._stack().append(event_id)

    def pop(self) -> int | None:
        """Pop the current thread's stack frame.

        Returns:
            The event ID that was on top of the stack, or None if it was empty
        """
        stack = self._stack()
        if stack:
            return stack.pop()
        return None

    def record(
        self,
        action: str,
        info: dict[str, Any] | None = None,
        parent_id: int | None = None,
        duration_ms: float | None = None,
    ) -> int | None:
        """Record an evidence event.

        Args:
            action: What happened (e.g., "force_begin", "force_error")
            info: Additional context
            parent_id: Explicit parent event ID for tree relationships
            duration_ms: Execution duration

        Returns:
            Event ID for linking child events, or None if tracing disabled
        """
        if not self.enabled:
            return None

        if parent_id is None:
            stack = self._stack()
            parent_id = stack[-1] if stack else None

        with self._lock:
            event_id = self._next_id
            self._next_id += 1
            self._events.append(
                Evidence(
                    action=action,
                    id=event_id,
                    parent_id=parent_id,
                    info=info or {},
                    duration_ms=duration_ms,
                )
            )
        return event_id

    def get_events(self) -> list[Evidence]:
        """Get all recorded events (for visualization)."""
        with self._lock:
            return list(self._events)

    def find_all(self, **kwargs: Any) -> list[Evidence]:
        """Find events whose attributes or info entries match every criterion.

        Example:
            >>> trace.find_all(action="force_error", name="total")
        """
        return [
            e
            for e in self.get_events()
            if all(getattr(e, k, None) == v or e.info.get(k) == v for k, v in kwargs.items())
        ]

    def as_tree(self) -> dict[int | None, list[int]]:
        """Reconstruct parent-child relationships for visualization.

        Returns:
            Dict mapping parent_id to list of child_ids
        """
        tree: dict[int | None, list[int]] = {}
        for ev in self.get_events():
            tree.setdefault(ev.parent_id, []).append(ev.id)
        return tree

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def clear(self) -> None:
        """Clear all events (for reuse)."""
        with self._lock:
            self._events.clear()
            self._next_id = 0
        self._local = threading.local()

"""Plain evaluated export of a Lazy."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, field_serializer


class EvaluatedSnapshot(BaseModel):
    """The serializable shape of a forced Lazy: ``{"evaluated": true, "value": ...}``.

    There is no unevaluated counterpart; a producer is never exported.
    Both fields are required when validating input.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    evaluated: Literal[True]
    value: Any

    @classmethod
    def of(cls, value: Any) -> EvaluatedSnapshot:
        """Snapshot of an already forced value."""
        return cls(evaluated=True, value=value)

    @field_serializer("value", mode="wrap", when_used="json")
    def serialize_value(self, value: Any, handler: SerializerFunctionWrapHandler) -> Any:
        return handler(_force_nested(value))


def _force_nested(value: Any) -> Any:
    """Replace every Lazy inside lists, tuples, sets and dicts by its snapshot."""
    from lazily.kernel.lazy import Lazy

    if isinstance(value, Lazy):
        return value.to_snapshot().model_dump(mode="json")
    if isinstance(value, dict):
        return {k: _force_nested(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_force_nested(v) for v in value]
    return value

"""Schemas that validate a forced value and convert it to a target type."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol, TypeVar

from pydantic import TypeAdapter

from lazily.structured.parser import parse_json_if_needed

T = TypeVar("T")


class OutputSchema(Protocol[T]):
    """Protocol for value schemas used by Lazy.cast()."""

    def validate(self, value: Any) -> T:
        """Return ``value`` converted to T.

        Raises:
            Exception: If the value does not conform
        """
        ...

    def describe(self) -> str:
        """Short label used in CastError messages."""
        ...


@dataclass(frozen=True)
class CallableSchema(OutputSchema[T]):
    """Validate by calling ``fn``; whatever it raises counts as a failure."""

    fn: Callable[[Any], T]
    description: str | None = None

    def validate(self, value: Any) -> T:
        return self.fn(value)

    def describe(self) -> str:
        return self.description or getattr(self.fn, "__qualname__", repr(self.fn))


@dataclass(frozen=True)
class PydanticSchema(OutputSchema[T]):
    """Validate against any type pydantic understands.

    ``target`` may be a BaseModel subclass, a dataclass, a TypedDict or a
    plain annotation such as ``list[int]``.
    """

    target: Any
    _adapter: TypeAdapter[Any] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_adapter", TypeAdapter(self.target))

    def validate(self, value: Any) -> T:
        return self._adapter.validate_python(value)

    def describe(self) -> str:
        return f"PydanticSchema({getattr(self.target, '__name__', repr(self.target))})"


@dataclass(frozen=True)
class JsonSchema(OutputSchema[T]):
    """Decode JSON text before handing the result to ``inner``.

    Non-string values reach ``inner`` unchanged. Strings are only decoded
    when a caller opts in by wrapping a schema in JsonSchema.
    """

    inner: OutputSchema[T]

    def validate(self, value: Any) -> T:
        return self.inner.validate(parse_json_if_needed(value))

    def describe(self) -> str:
        return f"JsonSchema({self.inner.describe()})"

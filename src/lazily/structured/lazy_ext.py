"""Lazy extensions for structured value transformations."""

from typing import TypeVar

from lazily.kernel.lazy import Lazy
from lazily.structured.cast import make_caster
from lazily.structured.schema import OutputSchema

T = TypeVar("T")


def cast(self: Lazy, schema: OutputSchema[T]) -> Lazy[T]:
    """Cast the deferred value to a new type using a schema.

    Nothing is validated until the returned instance is forced. A failed
    validation raises CastError and leaves the returned instance retryable.

    Args:
        schema: The output schema to validate against

    Returns:
        New lazy instance holding the validated value

    Example:
        >>> from lazily.structured import CallableSchema
        >>> Lazy.defer(lambda: "42").cast(CallableSchema(int)).get()
        42
    """
    return self._derive("cast", lambda: make_caster(schema)(self.get()))


# Register the cast operation
Lazy.register_op("cast", cast)

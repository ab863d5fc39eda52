"""Type casting for Lazy value transformation."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from lazily.errors import CastError
from lazily.structured.schema import OutputSchema

logger = logging.getLogger(__name__)

T = TypeVar("T")


def make_caster(schema: OutputSchema[T]) -> Callable[[Any], T]:
    """Create a function that validates a value with ``schema``.

    The value is passed through as-is; wrap the schema in JsonSchema to
    decode JSON text first. Any validation failure is raised as CastError
    carrying the raw value.
    """
    def caster(value: Any) -> T:
        try:
            return schema.validate(value)
        except CastError:
            raise
        except Exception as e:
            logger.debug("Value failed %s: %s", schema.describe(), e)
            raise CastError(f"Validation against {schema.describe()} failed: {e}", value) from e

    return caster

"""Structured value casting for Lazy type transformation.

This module provides the Lazy.cast() operation for validating and
converting deferred values.
"""

from lazily.errors import CastError

# Import lazy_ext to register capabilities
from . import lazy_ext  # noqa: F401
from .cast import make_caster
from .parser import parse_json_if_needed
from .schema import (
    CallableSchema,
    JsonSchema,
    OutputSchema,
    PydanticSchema,
)

__all__ = [
    "CastError",
    "OutputSchema",
    "CallableSchema",
    "PydanticSchema",
    "JsonSchema",
    "parse_json_if_needed",
    "make_caster",
]

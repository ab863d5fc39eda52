"""JSON parsing utilities for structured value casting."""

from __future__ import annotations

import json
from typing import Any

from lazily.errors import CastError


def parse_json_if_needed(value: str | Any) -> Any:
    """Parse JSON string if the value is a string.

    Non-string values are returned as-is.

    Raises:
        CastError: If the value is a string but cannot be parsed as JSON
    """
    if isinstance(value, str):
        try:
            return json.loads(value)
        except json.JSONDecodeError as e:
            raise CastError(f"Invalid JSON: {e.msg} at position {e.pos}", value) from e
    return value

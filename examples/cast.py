#!/usr/bin/env python3
"""
Lazy.cast() example - validated deferred values.

Key concepts:
- cast() validates and transforms the deferred value when it is forced
- JSON text is decoded only when the schema is wrapped in JsonSchema
- A failed validation raises CastError and can be retried
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel

from lazily import CastError, Lazy
from lazily.structured import CallableSchema, JsonSchema, PydanticSchema


@dataclass(frozen=True)
class UserProfile:
    """User profile with validated fields."""
    name: str
    email: str


class Order(BaseModel):
    item: str
    quantity: int


def parse_user_profile(data: dict) -> UserProfile:
    if "name" not in data or "email" not in data:
        raise ValueError("name and email are required")
    return UserProfile(name=data["name"], email=data["email"])


def main() -> None:
    raw_user = Lazy.defer(lambda: '{"name": "Ada", "email": "ada@example.com"}')
    user = raw_user.cast(JsonSchema(CallableSchema(parse_user_profile)))
    print(user.get())

    order = Lazy.pure({"item": "book", "quantity": "2"}).cast(PydanticSchema(Order))
    print(order.get())

    broken = Lazy.pure({"name": "Ada"}).cast(CallableSchema(parse_user_profile))
    try:
        broken.get()
    except CastError as e:
        print(f"cast failed: {e} (raw={e.raw_value!r})")


if __name__ == "__main__":
    main()

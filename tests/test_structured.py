"""Tests for structured value casting (Lazy.cast)."""

from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from lazily import Lazy
from lazily.structured import (
    CallableSchema,
    CastError,
    JsonSchema,
    PydanticSchema,
    make_caster,
    parse_json_if_needed,
)
from fakes import CountingProducer


@dataclass(frozen=True)
class UserProfile:
    name: str
    email: str


def parse_user_profile(data: dict) -> UserProfile:
    """Parse a user profile from a dict."""
    if not isinstance(data, dict):
        raise ValueError("Expected dict")
    for field in ("name", "email"):
        if field not in data:
            raise ValueError(f"Missing required field: {field}")
    return UserProfile(name=data["name"], email=data["email"])


class Point(BaseModel):
    x: int
    y: int


@dataclass
class Row:
    id: int
    label: str


def test_parse_json_if_needed_with_string() -> None:
    result = parse_json_if_needed('{"name": "test", "email": "test@example.com"}')
    assert result == {"name": "test", "email": "test@example.com"}


def test_parse_json_if_needed_with_dict() -> None:
    data = {"name": "test"}
    assert parse_json_if_needed(data) is data


def test_parse_json_if_needed_with_invalid_json() -> None:
    with pytest.raises(CastError) as exc_info:
        parse_json_if_needed('{"name": "test", invalid}')
    assert "Invalid JSON" in str(exc_info.value)
    assert exc_info.value.raw_value == '{"name": "test", invalid}'


def test_callable_schema() -> None:
    schema = CallableSchema(parse_user_profile)
    result = schema.validate({"name": "John", "email": "john@example.com"})
    assert result == UserProfile("John", "john@example.com")
    assert schema.describe() == "parse_user_profile"
    assert CallableSchema(int, "integer").describe() == "integer"


def test_pydantic_schema_with_model() -> None:
    schema = PydanticSchema(Point)
    assert schema.validate({"x": 1, "y": 2}) == Point(x=1, y=2)
    assert schema.describe() == "PydanticSchema(Point)"


def test_pydantic_schema_with_annotations() -> None:
    assert PydanticSchema(list[int]).validate(["1", 2]) == [1, 2]
    assert PydanticSchema(Row).validate({"id": "3", "label": "x"}) == Row(id=3, label="x")
    with pytest.raises(ValueError):
        PydanticSchema(Row).validate({"id": 3})


def test_json_schema_decodes_text_only() -> None:
    schema = JsonSchema(PydanticSchema(Point))
    assert schema.validate('{"x": 1, "y": 2}') == Point(x=1, y=2)
    assert schema.validate({"x": 3, "y": 4}) == Point(x=3, y=4)
    assert schema.describe() == "JsonSchema(PydanticSchema(Point))"


def test_make_caster_wraps_validation_errors() -> None:
    caster = make_caster(PydanticSchema(Point))
    with pytest.raises(CastError) as exc_info:
        caster({"x": "not-an-int"})
    assert exc_info.value.raw_value == {"x": "not-an-int"}
    assert exc_info.value.__cause__ is not None


def test_cast_plain_string_is_not_decoded() -> None:
    assert Lazy.pure("hello").cast(CallableSchema(str.upper)).get() == "HELLO"
    assert Lazy.pure("42").cast(CallableSchema(str)).get() == "42"


def test_cast_is_deferred() -> None:
    producer = CountingProducer('{"x": 1, "y": 2}')
    point = Lazy.defer(producer).cast(JsonSchema(PydanticSchema(Point)))
    assert producer.calls == 0
    assert point.get() == Point(x=1, y=2)
    assert producer.calls == 1


def test_cast_with_callable_schema() -> None:
    assert Lazy.defer(lambda: "42").cast(CallableSchema(int)).get() == 42


def test_cast_failure_raises_and_stays_retryable() -> None:
    source = Lazy.pure({"name": "John"})
    profile = source.cast(CallableSchema(parse_user_profile))

    with pytest.raises(CastError, match="email"):
        profile.get()
    assert not profile.is_evaluated

    with pytest.raises(CastError):
        profile.get()


def test_cast_invalid_json_raises_cast_error() -> None:
    with pytest.raises(CastError, match="Invalid JSON"):
        Lazy.pure("{oops").cast(JsonSchema(PydanticSchema(dict))).get()

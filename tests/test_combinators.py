import pytest

from lazily import Lazy, NotNestedError, join, lift2, sequence
from fakes import CountingProducer


def test_join_forces_only_outer() -> None:
    outer_producer = CountingProducer(None)
    inner_producer = CountingProducer("inner")
    inner = Lazy.defer(inner_producer)
    outer_producer.value = inner
    outer = Lazy.defer(outer_producer)

    result = join(outer)

    assert result is inner
    assert outer_producer.calls == 1
    assert inner_producer.calls == 0


def test_join_rejects_flat_value() -> None:
    with pytest.raises(NotNestedError):
        join(Lazy.pure("flat"))


def test_sequence_is_deferred_and_ordered() -> None:
    order = []

    def make(n: int) -> Lazy[int]:
        def producer() -> int:
            order.append(n)
            return n

        return Lazy.defer(producer)

    combined = sequence(make(n) for n in range(3))
    assert order == []
    assert combined.get() == [0, 1, 2]
    assert order == [0, 1, 2]


def test_sequence_empty() -> None:
    assert sequence([]).get() == []


def test_sequence_memoizes_items() -> None:
    producer = CountingProducer(1)
    item = Lazy.defer(producer)
    assert sequence([item, item]).get() == [1, 1]
    assert producer.calls == 1


def test_lift2() -> None:
    a = Lazy.defer(lambda: 3)
    b = Lazy.defer(lambda: 4)
    total = lift2(lambda x, y: x + y, a, b)
    assert not a.is_evaluated
    assert total.get() == 7
    assert a.is_evaluated and b.is_evaluated


def test_lift2_forces_left_first() -> None:
    order = []
    a = Lazy.defer(lambda: order.append("a") or 1)
    b = Lazy.defer(lambda: order.append("b") or 2)
    assert lift2(lambda x, y: (x, y), a, b).get() == (1, 2)
    assert order == ["a", "b"]

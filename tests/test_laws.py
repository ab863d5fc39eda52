"""Algebraic laws of Lazy, checked on a handful of representative values."""

import pytest

from lazily import Lazy, join
from lazily.combinators import laws
from fakes import CountingProducer


def double(x: int) -> int:
    return x * 2


def increment(x: int) -> int:
    return x + 1


def deferred_double(x: int) -> Lazy[int]:
    return Lazy.defer(lambda: x * 2)


def deferred_str(x: int) -> Lazy[str]:
    return Lazy.pure(str(x))


@pytest.mark.parametrize("make", [lambda: Lazy.pure(4), lambda: Lazy.defer(lambda: 4)])
def test_functor_laws(make) -> None:
    assert laws.functor_identity(make())
    assert laws.functor_composition(make(), double, increment)


@pytest.mark.parametrize("make", [lambda: Lazy.pure(4), lambda: Lazy.defer(lambda: 4)])
def test_monad_laws(make) -> None:
    assert laws.monad_left_identity(4, deferred_double)
    assert laws.monad_right_identity(make())
    assert laws.monad_associativity(make(), deferred_double, deferred_str)


def test_applicative_identity() -> None:
    assert laws.applicative_identity(Lazy.defer(lambda: "value"))


def test_comonad_extract() -> None:
    assert laws.comonad_extract(Lazy.defer(lambda: [1, 2]))


def test_bind_pure_is_identity() -> None:
    producer = CountingProducer(7)
    x = Lazy.defer(producer)
    assert x.bind(Lazy.pure).get() == x.get()
    assert producer.calls == 1


def test_join_of_pure_wrapper() -> None:
    x = Lazy.defer(lambda: 9)
    assert join(Lazy.pure(x)).get() == x.get()


def test_laws_detect_a_broken_function() -> None:
    calls = []

    def impure(x: int) -> int:
        calls.append(x)
        return len(calls)

    # map(f).map(g) and map(g . f) call impure separately and disagree
    assert not laws.functor_composition(Lazy.pure(1), impure, increment)

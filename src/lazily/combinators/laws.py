"""Combinator laws as executable checks.

Lazy satisfies the following algebraic laws, compared observationally
(by forced values):

1. Functor identity: x.map(id) == x
2. Functor composition: x.map(f).map(g) == x.map(lambda v: g(f(v)))
3. Monad left identity: Lazy.pure(a).bind(f) == f(a)
4. Monad right identity: x.bind(Lazy.pure) == x
5. Monad associativity: x.bind(f).bind(g) == x.bind(lambda v: f(v).bind(g))
6. Applicative identity: x.apply(Lazy.pure(id)) == x
7. Comonad extract: x.extend(lambda lz: lz.get()) == x

Each check returns True when the law holds for the given arguments.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from lazily.kernel import Lazy

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


def _identity(value: A) -> A:
    return value


def functor_identity(x: Lazy[Any]) -> bool:
    return x.map(_identity).get() == x.get()


def functor_composition(x: Lazy[A], f: Callable[[A], B], g: Callable[[B], C]) -> bool:
    return x.map(f).map(g).get() == x.map(lambda v: g(f(v))).get()


def monad_left_identity(a: A, f: Callable[[A], Lazy[B]]) -> bool:
    return Lazy.pure(a).bind(f).get() == f(a).get()


def monad_right_identity(x: Lazy[Any]) -> bool:
    return x.bind(Lazy.pure).get() == x.get()


def monad_associativity(
    x: Lazy[A],
    f: Callable[[A], Lazy[B]],
    g: Callable[[B], Lazy[C]],
) -> bool:
    return x.bind(f).bind(g).get() == x.bind(lambda v: f(v).bind(g)).get()


def applicative_identity(x: Lazy[Any]) -> bool:
    return x.apply(Lazy.pure(_identity)).get() == x.get()


def comonad_extract(x: Lazy[Any]) -> bool:
    return x.extend(lambda lz: lz.get()).get() == x.get()

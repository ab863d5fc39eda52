"""Combinators - free-function forms and algebraic laws for Lazy."""

from . import laws
from .ops import join, lift2, sequence

__all__ = [
    "join",
    "sequence",
    "lift2",
    "laws",
]

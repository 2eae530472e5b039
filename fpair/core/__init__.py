"""
Core type classes, combinators and applicatives.
"""

from .combinators import compose, constant, flip, identity
from .either import Either, Left, Right, try_either
from .maybe import Just, Maybe, Nothing, maybe_from_nullable
from .typeclasses import (
    Applicative,
    Apply,
    Chain,
    Functor,
    Monoid,
    Semigroup,
    Setoid,
    concat_values,
    equals,
    is_applicative,
    is_apply,
    is_functor,
    is_semigroup,
    is_setoid,
)

__all__ = [
    "Applicative",
    "Apply",
    "Chain",
    "Either",
    "Functor",
    "Just",
    "Left",
    "Maybe",
    "Monoid",
    "Nothing",
    "Right",
    "Semigroup",
    "Setoid",
    "compose",
    "concat_values",
    "constant",
    "equals",
    "flip",
    "identity",
    "is_applicative",
    "is_apply",
    "is_functor",
    "is_semigroup",
    "is_setoid",
    "maybe_from_nullable",
    "try_either",
]

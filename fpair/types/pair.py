"""
Pair: an immutable product of two values.

Pair is a Setoid, Semigroup, Functor, Bifunctor, Apply, Chain, Traversable
and Extend. Operations that combine two pairs (concat, ap, chain) require
the first positions to be semigroups of the same type; the semigroup for the
second position is only needed by concat.

Laws:
1. Functor identity:      p.map(identity) == p
2. Functor composition:   p.map(compose(g, f)) == p.map(f).map(g)
3. Semigroup:             a.concat(b).concat(c) == a.concat(b.concat(c))
4. Chain associativity:   p.chain(f).chain(g) == p.chain(lambda x: f(x).chain(g))
"""

import math
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from fpair.core.combinators import identity
from fpair.core.typeclasses import (
    concat_values,
    constraint_error,
    equals,
    is_applicative,
    is_apply,
    is_nan,
    is_semigroup,
)

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")


def _require_function(func: object, operation: str, requirement: str) -> None:
    if not callable(func):
        raise constraint_error(operation, requirement, func)


def _unit(of: Any, operation: str) -> Callable[[Any], Any]:
    """Resolve the lifting function from a TypeRep with ``of`` or a plain callable."""
    if is_applicative(of):
        return of.of
    if callable(of):
        return of
    raise constraint_error(
        operation,
        "Applicative TypeRep or Apply returning function required for first argument",
        of,
    )


@dataclass(frozen=True, eq=False)
class Pair(Generic[A, B]):
    """Immutable ordered pair of values."""

    first: A
    second: B

    def fst(self) -> A:
        return self.first

    def snd(self) -> B:
        return self.second

    def to_list(self) -> list[A | B]:
        """Return [first, second]."""
        return [self.first, self.second]

    def equals(self, other: object) -> bool:
        """Structural equality; False for anything that is not a Pair."""
        return (
            isinstance(other, Pair)
            and equals(self.first, other.first)
            and equals(self.second, other.second)
        )

    def concat(self, other: "Pair[A, B]") -> "Pair[A, B]":
        """Combine both positions with their semigroup operation."""
        if not isinstance(other, Pair):
            raise constraint_error(
                "Pair.concat", "Pair of Semigroups required", other
            )
        return Pair(
            concat_values(self.first, other.first, "Pair.concat"),
            concat_values(self.second, other.second, "Pair.concat"),
        )

    def map(self, func: Callable[[B], C]) -> "Pair[A, C]":
        """Apply func to the second value only."""
        _require_function(func, "Pair.map", "Function required")
        return self.bimap(identity, func)

    def bimap(self, first: Callable[[A], C], second: Callable[[B], D]) -> "Pair[C, D]":
        """Apply one function to each position independently."""
        if not (callable(first) and callable(second)):
            raise constraint_error(
                "Pair.bimap",
                "Functions required for both arguments",
                first if not callable(first) else second,
            )
        return Pair(first(self.first), second(self.second))

    def ap(self, other: "Pair[A, Any]") -> "Pair[A, Any]":
        """Apply the function in the second position to other's second value.

        First positions are combined left to right: self.first, then
        other.first, matching chain.
        """
        if not isinstance(other, Pair):
            raise constraint_error("Pair.ap", "Pair required", other)
        if not is_semigroup(self.first):
            raise constraint_error(
                "Pair.ap", "Semigroup required in first of Pair", self.first
            )
        _require_function(
            self.second, "Pair.ap", "Function required in second of Pair"
        )
        return Pair(
            concat_values(self.first, other.first, "Pair.ap"),
            self.second(other.second),  # type: ignore[operator]
        )

    def chain(self, func: Callable[[B], "Pair[A, C]"]) -> "Pair[A, C]":
        """Sequence a Pair-returning function, concatenating first positions."""
        _require_function(func, "Pair.chain", "Function required")
        if not is_semigroup(self.first):
            raise constraint_error(
                "Pair.chain", "Semigroup required in first of Pair", self.first
            )

        result = func(self.second)
        if not isinstance(result, Pair):
            raise constraint_error(
                "Pair.chain", "Function must return a Pair", result
            )
        return Pair(
            concat_values(self.first, result.first, "Pair.chain"), result.second
        )

    def sequence(self, of: Any) -> Any:
        """Swap the nesting when the second value is an Apply or a list."""
        lift = _unit(of, "Pair.sequence")
        return self._distribute(self.second, lift, "Pair.sequence")

    def traverse(self, of: Any, func: Callable[[B], Any]) -> Any:
        """Map func over the second value and swap the resulting nesting."""
        lift = _unit(of, "Pair.traverse")
        _require_function(
            func, "Pair.traverse", "Function required for second argument"
        )
        return self._distribute(func(self.second), lift, "Pair.traverse")

    def _distribute(
        self, value: Any, lift: Callable[[Any], Any], operation: str
    ) -> Any:
        applied = value if is_apply(value) or isinstance(value, list) else lift(value)
        if isinstance(applied, list):
            return [Pair(self.first, x) for x in applied]
        if not is_apply(applied):
            raise constraint_error(
                operation, "Apply required in second of Pair", value
            )
        return applied.map(lambda x: Pair(self.first, x))

    def extend(self, func: Callable[["Pair[A, B]"], C]) -> "Pair[A, C]":
        """Replace the second value with func applied to the whole Pair."""
        _require_function(func, "Pair.extend", "Function required")
        return Pair(self.first, func(self))

    def swap(self, first: Callable[[A], C], second: Callable[[B], D]) -> "Pair[D, C]":
        """Transpose positions, mapping first with `first` and second with `second`."""
        if not (callable(first) and callable(second)):
            raise constraint_error(
                "Pair.swap",
                "Functions required for both arguments",
                first if not callable(first) else second,
            )
        return Pair(second(self.second), first(self.first))

    def merge(self, func: Callable[[A, B], C]) -> C:
        """Fold the Pair with a binary function called as func(first, second)."""
        _require_function(func, "Pair.merge", "Binary function required")
        return func(self.first, self.second)

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        # NaNs compare equal, so they must share a hash
        return hash(tuple(math.nan if is_nan(v) else v for v in self))

    def __iter__(self) -> Iterator[A | B]:
        yield self.first
        yield self.second

    def __repr__(self) -> str:
        return f"Pair({self.first!r}, {self.second!r})"


__all__ = ["Pair"]

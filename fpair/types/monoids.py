"""
Monoid wrappers for numbers and booleans.

Each monoid is an immutable value object with ``concat`` and a classmethod
``empty``. Monoids only combine with their own type.
"""

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import ClassVar, Self, TypeAlias

from fpair.core.typeclasses import constraint_error, equals

NUMBER_TYPES = (int, float, Decimal, Fraction)

Number: TypeAlias = int | float | Decimal | Fraction


@dataclass(frozen=True)
class _Monoid(ABC):
    """Shared behaviour: identity element, same-type concat, equality."""

    value: object
    identity: ClassVar[object]

    @classmethod
    def empty(cls) -> Self:
        return cls(cls.identity)

    def concat(self, other: Self) -> Self:
        if type(other) is not type(self):
            raise constraint_error(
                f"{type(self).__name__}.concat",
                f"{type(self).__name__} required",
                other,
            )
        return type(self)(self._combine(self.value, other.value))

    @abstractmethod
    def _combine(self, a, b):
        """Combine two raw values."""

    def equals(self, other: object) -> bool:
        if type(other) is not type(self):
            return False
        return equals(self.value, other.value)  # type: ignore[attr-defined]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


@dataclass(frozen=True, repr=False)
class _NumericMonoid(_Monoid):
    value: Number

    def __post_init__(self) -> None:
        if not isinstance(self.value, NUMBER_TYPES) or isinstance(self.value, bool):
            raise constraint_error(type(self).__name__, "Number required", self.value)


@dataclass(frozen=True, repr=False)
class Sum(_NumericMonoid):
    """Addition."""

    identity: ClassVar[Number] = 0

    def _combine(self, a: Number, b: Number) -> Number:
        return a + b  # type: ignore[operator]


@dataclass(frozen=True, repr=False)
class Prod(_NumericMonoid):
    """Multiplication."""

    identity: ClassVar[Number] = 1

    def _combine(self, a: Number, b: Number) -> Number:
        return a * b  # type: ignore[operator]


@dataclass(frozen=True, repr=False)
class Min(_NumericMonoid):
    """Smallest value wins; empty is positive infinity."""

    identity: ClassVar[Number] = math.inf

    def _combine(self, a: Number, b: Number) -> Number:
        return min(a, b)  # type: ignore[type-var]


@dataclass(frozen=True, repr=False)
class Max(_NumericMonoid):
    """Largest value wins; empty is negative infinity."""

    identity: ClassVar[Number] = -math.inf

    def _combine(self, a: Number, b: Number) -> Number:
        return max(a, b)  # type: ignore[type-var]


@dataclass(frozen=True, repr=False)
class _BooleanMonoid(_Monoid):
    value: bool

    def __post_init__(self) -> None:
        # stored by truthiness
        object.__setattr__(self, "value", bool(self.value))


@dataclass(frozen=True, repr=False)
class All(_BooleanMonoid):
    """Logical conjunction."""

    identity: ClassVar[bool] = True

    def _combine(self, a: bool, b: bool) -> bool:
        return a and b


@dataclass(frozen=True, repr=False)
class Any(_BooleanMonoid):
    """Logical disjunction."""

    identity: ClassVar[bool] = False

    def _combine(self, a: bool, b: bool) -> bool:
        return a or b


def mconcat(monoid: type, values: Iterable[object]) -> object:
    """Wrap every value with monoid and fold them from monoid.empty()."""
    result = monoid.empty()  # type: ignore[attr-defined]
    for value in values:
        result = result.concat(monoid(value))
    return result


def mreduce(monoid: type, values: Iterable[object]) -> object:
    """Like mconcat, returning the raw folded value."""
    return mconcat(monoid, values).value  # type: ignore[attr-defined]


__all__ = ["All", "Any", "Max", "Min", "Prod", "Sum", "mconcat", "mreduce"]

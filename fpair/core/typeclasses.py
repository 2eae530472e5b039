"""
Capability interfaces for the algebraic types.

Each type class is a runtime-checkable Protocol, so any value providing the
right methods qualifies, whether or not it inherits from anything in fpair.
Built-in str, list and tuple count as semigroups and combine with ``+``.
"""

import logging
import math
from collections.abc import Callable
from typing import Any, Protocol, Self, runtime_checkable

from fpair.errors import TypeConstraintError

logger = logging.getLogger(__name__)

BUILTIN_SEMIGROUPS = (str, list, tuple)


@runtime_checkable
class Setoid(Protocol):
    """Values with structural equality."""

    def equals(self, other: Any) -> bool: ...


@runtime_checkable
class Semigroup(Protocol):
    """Values with an associative combining operation."""

    def concat(self, other: Self) -> Self: ...


@runtime_checkable
class Monoid(Semigroup, Protocol):
    """Semigroups with an identity element."""

    @classmethod
    def empty(cls) -> Self: ...


@runtime_checkable
class Functor(Protocol):
    """Structures that can map over their value."""

    def map(self, func: Callable[[Any], Any]) -> Any: ...


@runtime_checkable
class Apply(Functor, Protocol):
    """Functors that can apply a wrapped function to a wrapped value."""

    def ap(self, other: Any) -> Any: ...


@runtime_checkable
class Applicative(Apply, Protocol):
    """Apply with a unit constructor."""

    @classmethod
    def of(cls, value: Any) -> Any: ...


@runtime_checkable
class Chain(Apply, Protocol):
    """Apply supporting sequencing of structure-producing functions."""

    def chain(self, func: Callable[[Any], Any]) -> Any: ...


def constraint_error(
    operation: str, requirement: str, received: object = None
) -> TypeConstraintError:
    """Build (and log) the error for a violated constraint; the caller raises it."""
    from fpair.config import settings_or_default

    error = TypeConstraintError(operation, requirement, received)
    if settings_or_default().log_violations:
        logger.debug(
            "Type constraint violated in %s (received %s): %s",
            operation,
            error.received,
            requirement,
        )
    return error


def is_setoid(value: object) -> bool:
    return not isinstance(value, type) and isinstance(value, Setoid)


def is_semigroup(value: object) -> bool:
    if isinstance(value, type):
        return False
    return isinstance(value, BUILTIN_SEMIGROUPS) or isinstance(value, Semigroup)


def is_functor(value: object) -> bool:
    return not isinstance(value, type) and isinstance(value, Functor)


def is_apply(value: object) -> bool:
    return not isinstance(value, type) and isinstance(value, Apply)


def is_applicative(value: object) -> bool:
    """True for a TypeRep (or instance) exposing a callable ``of``."""
    return callable(getattr(value, "of", None))


def is_nan(value: object) -> bool:
    return isinstance(value, float) and math.isnan(value)


def equals(a: object, b: object) -> bool:
    """Structural equality.

    A value always equals itself, and two float NaNs are equal. Setoids are
    compared with their own ``equals`` and must share a runtime type;
    everything else falls back to ``==``, which recurses through containers
    using each element's ``__eq__``.
    """
    if a is b or (is_nan(a) and is_nan(b)):
        return True
    if is_setoid(a):
        return type(a) is type(b) and bool(a.equals(b))  # type: ignore[union-attr]
    return bool(a == b)


def same_semigroup(a: object, b: object) -> bool:
    return is_semigroup(a) and is_semigroup(b) and type(a) is type(b)


def concat_values(a: Any, b: Any, operation: str) -> Any:
    """Combine two semigroups of the same runtime type."""
    if not same_semigroup(a, b):
        raise constraint_error(
            operation,
            f"Semigroups of the same type required, got "
            f"{type(a).__name__} and {type(b).__name__}",
            b,
        )
    if isinstance(a, BUILTIN_SEMIGROUPS):
        return a + b
    return a.concat(b)


__all__ = [
    "Applicative",
    "Apply",
    "Chain",
    "Functor",
    "Monoid",
    "Semigroup",
    "Setoid",
    "concat_values",
    "constraint_error",
    "equals",
    "is_applicative",
    "is_apply",
    "is_functor",
    "is_nan",
    "is_semigroup",
    "is_setoid",
    "same_semigroup",
]

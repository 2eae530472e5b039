"""
Maybe applicative for values that may be absent.

Just wraps a value and Nothing represents its absence. Maybe is a full
Applicative (it has ``of``), which makes it a natural target for
Pair.traverse and Pair.sequence.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Generic, TypeVar, cast

from fpair.core.typeclasses import constraint_error, equals

T = TypeVar("T")
U = TypeVar("U")


class Maybe(Generic[T], ABC):
    """Abstract base class for Maybe."""

    @classmethod
    def of(cls, value: T) -> "Maybe[T]":
        """Lift a value into Just."""
        return Just(value)

    @abstractmethod
    def is_just(self) -> bool:
        """Check if this holds a value."""

    @abstractmethod
    def map(self, func: Callable[[T], U]) -> "Maybe[U]":
        """Map function over a Just value, preserving Nothing."""

    @abstractmethod
    def chain(self, func: Callable[[T], "Maybe[U]"]) -> "Maybe[U]":
        """Apply a Maybe-returning function to a Just value."""

    @abstractmethod
    def option(self, default: T) -> T:
        """Return the held value, or default for Nothing."""

    def is_nothing(self) -> bool:
        return not self.is_just()

    def ap(self, other: "Maybe[Any]") -> "Maybe[Any]":
        """Apply the held function to the value held by other."""
        if not isinstance(other, Maybe):
            raise constraint_error("Maybe.ap", "Maybe required", other)
        if self.is_nothing():
            return cast("Maybe[Any]", self)

        func = cast("Just[Any]", self).value
        if not callable(func):
            raise constraint_error("Maybe.ap", "Wrapped value must be a function", func)
        return other.map(func)

    def equals(self, other: object) -> bool:
        if not isinstance(other, Maybe) or self.is_just() != other.is_just():
            return False
        if self.is_nothing():
            return True
        return equals(cast("Just[T]", self).value, cast("Just[T]", other).value)

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, getattr(self, "value", None)))


class Just(Maybe[T]):
    """Maybe holding a value."""

    def __init__(self, value: T) -> None:
        self.value = value

    def is_just(self) -> bool:
        return True

    def map(self, func: Callable[[T], U]) -> Maybe[U]:
        return Just(func(self.value))

    def chain(self, func: Callable[[T], Maybe[U]]) -> Maybe[U]:
        result = func(self.value)
        if not isinstance(result, Maybe):
            raise constraint_error(
                "Maybe.chain", "Function must return a Maybe", result
            )
        return result

    def option(self, default: T) -> T:
        return self.value

    def __repr__(self) -> str:
        return f"Just({self.value!r})"


class Nothing(Maybe[T]):
    """Maybe without a value."""

    def is_just(self) -> bool:
        return False

    def map(self, func: Callable[[T], U]) -> Maybe[U]:
        return cast("Maybe[U]", self)

    def chain(self, func: Callable[[T], Maybe[U]]) -> Maybe[U]:
        return cast("Maybe[U]", self)

    def option(self, default: T) -> T:
        return default

    def __repr__(self) -> str:
        return "Nothing()"


def maybe_from_nullable(value: T | None) -> Maybe[T]:
    """Create a Maybe from a value that may be None."""
    return Just(value) if value is not None else Nothing()


__all__ = ["Just", "Maybe", "Nothing", "maybe_from_nullable"]

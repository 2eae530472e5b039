"""
Either applicative for computations that may fail.

Left carries an error and short-circuits every operation; Right carries a
success value. Either is also the result type of settings parsing.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Generic, TypeVar, cast

from fpair.core.typeclasses import constraint_error, equals

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class Either(Generic[E, T], ABC):
    """Abstract base class for Either."""

    def __init__(self, value: E | T) -> None:
        self.value = value

    @classmethod
    def of(cls, value: T) -> "Either[Any, T]":
        """Lift a value into Right."""
        return Right(value)

    @abstractmethod
    def is_right(self) -> bool:
        """Check if this is a Right (success) value."""

    @abstractmethod
    def map(self, func: Callable[[T], U]) -> "Either[E, U]":
        """Map function over Right value, preserving Left."""

    @abstractmethod
    def chain(self, func: Callable[[T], "Either[E, U]"]) -> "Either[E, U]":
        """Apply an Either-returning function to a Right value."""

    @abstractmethod
    def either(self, left_func: Callable[[E], U], right_func: Callable[[T], U]) -> U:
        """Fold Either by applying the function for its side."""

    def is_left(self) -> bool:
        return not self.is_right()

    def ap(self, other: "Either[E, Any]") -> "Either[E, Any]":
        """Apply the held function to the value held by other.

        The first Left encountered (self, then other) is returned.
        """
        if not isinstance(other, Either):
            raise constraint_error("Either.ap", "Either required", other)
        if self.is_left():
            return cast("Either[E, Any]", self)
        if not callable(self.value):
            raise constraint_error(
                "Either.ap", "Wrapped value must be a function", self.value
            )
        return other.map(cast("Callable[[Any], Any]", self.value))

    def equals(self, other: object) -> bool:
        return (
            isinstance(other, Either)
            and self.is_right() == other.is_right()
            and equals(self.value, other.value)
        )

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self.value))


class Left(Either[E, T]):
    """Left side of Either representing an error/failure."""

    def is_right(self) -> bool:
        return False

    def map(self, func: Callable[[T], U]) -> Either[E, U]:
        return cast("Either[E, U]", self)

    def chain(self, func: Callable[[T], Either[E, U]]) -> Either[E, U]:
        return cast("Either[E, U]", self)

    def either(self, left_func: Callable[[E], U], right_func: Callable[[T], U]) -> U:
        return left_func(cast(E, self.value))

    def __repr__(self) -> str:
        return f"Left({self.value!r})"


class Right(Either[E, T]):
    """Right side of Either representing success."""

    def is_right(self) -> bool:
        return True

    def map(self, func: Callable[[T], U]) -> Either[E, U]:
        return Right(func(cast(T, self.value)))

    def chain(self, func: Callable[[T], Either[E, U]]) -> Either[E, U]:
        result = func(cast(T, self.value))
        if not isinstance(result, Either):
            raise constraint_error(
                "Either.chain", "Function must return an Either", result
            )
        return result

    def either(self, left_func: Callable[[E], U], right_func: Callable[[T], U]) -> U:
        return right_func(cast(T, self.value))

    def __repr__(self) -> str:
        return f"Right({self.value!r})"


def try_either(func: Callable[[], T]) -> Either[Exception, T]:
    """Run a thunk, capturing a raised exception as Left."""
    try:
        return Right(func())
    except Exception as e:
        return Left(e)


__all__ = ["Either", "Left", "Right", "try_either"]

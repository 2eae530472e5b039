"""
Writer: a result paired with an accumulated log.

The log is any semigroup (a monoid such as Sum, or a list of messages).
Chaining concatenates logs left to right.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from fpair.core.typeclasses import concat_values, constraint_error, equals, is_semigroup
from fpair.types.pair import Pair

W = TypeVar("W")
T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, eq=False)
class Writer(Generic[W, T]):
    log: W
    value: T

    def __post_init__(self) -> None:
        if not is_semigroup(self.log):
            raise constraint_error("Writer", "Semigroup required for log", self.log)

    @classmethod
    def of(cls, value: T, monoid: Any) -> "Writer[Any, T]":
        """Wrap value with the empty log of monoid."""
        if not callable(getattr(monoid, "empty", None)):
            raise constraint_error("Writer.of", "Monoid required", monoid)
        return cls(monoid.empty(), value)

    def read(self) -> Pair[W, T]:
        """Expose the writer as Pair(log, value)."""
        return Pair(self.log, self.value)

    def map(self, func: Callable[[T], U]) -> "Writer[W, U]":
        if not callable(func):
            raise constraint_error("Writer.map", "Function required", func)
        return Writer(self.log, func(self.value))

    def ap(self, other: "Writer[W, Any]") -> "Writer[W, Any]":
        if not isinstance(other, Writer):
            raise constraint_error("Writer.ap", "Writer required", other)
        if not callable(self.value):
            raise constraint_error(
                "Writer.ap", "Wrapped value must be a function", self.value
            )
        return Writer(
            concat_values(self.log, other.log, "Writer.ap"), self.value(other.value)
        )

    def chain(self, func: Callable[[T], "Writer[W, U]"]) -> "Writer[W, U]":
        if not callable(func):
            raise constraint_error("Writer.chain", "Function required", func)
        result = func(self.value)
        if not isinstance(result, Writer):
            raise constraint_error(
                "Writer.chain", "Function must return a Writer", result
            )
        return Writer(concat_values(self.log, result.log, "Writer.chain"), result.value)

    def equals(self, other: object) -> bool:
        return (
            isinstance(other, Writer)
            and equals(self.log, other.log)
            and equals(self.value, other.value)
        )

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.log, self.value))

    def __repr__(self) -> str:
        return f"Writer({self.log!r}, {self.value!r})"


__all__ = ["Writer"]

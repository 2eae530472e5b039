"""
Helpers that build Pairs from other values.

``branch`` and ``fanout`` start a parallel computation over a single input;
``Pair.bimap`` transforms each side and ``Pair.merge`` folds the result:

    >>> branch([9, 77, 34]).bimap(sum, len).merge(lambda total, n: total / n)
    40.0
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from fpair.core.typeclasses import constraint_error
from fpair.types.pair import Pair
from fpair.types.writer import Writer

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
K = TypeVar("K")


def branch(value: T) -> Pair[T, T]:
    """Duplicate a value into both positions of a Pair."""
    return Pair(value, value)


def fanout(
    first: Callable[[T], U], second: Callable[[T], V]
) -> Callable[[T], Pair[U, V]]:
    """Build a function that feeds its input to both functions."""
    if not (callable(first) and callable(second)):
        raise constraint_error(
            "fanout",
            "Functions required for both arguments",
            first if not callable(first) else second,
        )
    return lambda value: Pair(first(value), second(value))


def to_pairs(mapping: Mapping[K, T | None]) -> list[Pair[K, T]]:
    """Convert a mapping into a list of Pair(key, value) in iteration order.

    Entries whose value is None are left out. Values are not copied.
    """
    if not isinstance(mapping, Mapping):
        raise constraint_error("to_pairs", "Mapping required for argument", mapping)

    pairs = [Pair(key, value) for key, value in mapping.items() if value is not None]
    logger.debug("to_pairs kept %d of %d entries", len(pairs), len(mapping))
    return pairs


def writer_to_pair(writer: Writer[Any, T]) -> Pair[Any, T]:
    """Read a Writer as Pair(log, value)."""
    if not isinstance(writer, Writer):
        raise constraint_error("writer_to_pair", "Writer required", writer)
    return writer.read()


def lift_writer_to_pair(
    func: Callable[[U], Writer[Any, T]],
) -> Callable[[U], Pair[Any, T]]:
    """Turn a Writer-returning function into a Pair-returning one."""
    if not callable(func):
        raise constraint_error(
            "lift_writer_to_pair", "Writer returning function required", func
        )

    def lifted(value: U) -> Pair[Any, T]:
        result = func(value)
        if not isinstance(result, Writer):
            raise constraint_error(
                "lift_writer_to_pair", "Function must return a Writer", result
            )
        return result.read()

    return lifted


__all__ = [
    "branch",
    "fanout",
    "lift_writer_to_pair",
    "to_pairs",
    "writer_to_pair",
]

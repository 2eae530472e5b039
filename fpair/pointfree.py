"""
Data-last versions of the instance methods.

Each function takes the structure as its last argument so it can be
partially applied with functools.partial and composed:

    average = compose(partial(merge, truediv), partial(bimap, sum, len), branch)

``fst``, ``snd`` and ``merge`` only accept a Pair; the rest dispatch to the
method of any value that provides it.
"""

from collections.abc import Callable
from typing import Any, TypeVar

from fpair.core.typeclasses import constraint_error
from fpair.types.pair import Pair

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


def _method(value: Any, name: str, requirement: str) -> Callable[..., Any]:
    method = getattr(value, name, None)
    if isinstance(value, type) or not callable(method):
        raise constraint_error(name, requirement, value)
    return method


def _require_pair(value: object, operation: str) -> None:
    if not isinstance(value, Pair):
        raise constraint_error(operation, "Pair required", value)


def fst(pair: Pair[A, B]) -> A:
    _require_pair(pair, "fst")
    return pair.fst()


def snd(pair: Pair[A, B]) -> B:
    _require_pair(pair, "snd")
    return pair.snd()


def merge(func: Callable[[A, B], C], pair: Pair[A, B]) -> C:
    _require_pair(pair, "merge")
    return pair.merge(func)


def map(func: Callable[[Any], Any], functor: Any) -> Any:  # noqa: A001
    return _method(functor, "map", "Functor required")(func)


def bimap(
    first: Callable[[Any], Any], second: Callable[[Any], Any], bifunctor: Any
) -> Any:
    return _method(bifunctor, "bimap", "Bifunctor required")(first, second)


def concat(other: Any, semigroup: Any) -> Any:
    """concat(x, m) == m.concat(x)"""
    return _method(semigroup, "concat", "Semigroup required")(other)


def ap(value: Any, wrapped_function: Any) -> Any:
    """ap(x, m) == m.ap(x), where m holds the function."""
    return _method(wrapped_function, "ap", "Apply required")(value)


def chain(func: Callable[[Any], Any], monad: Any) -> Any:
    return _method(monad, "chain", "Chain required")(func)


def sequence(of: Any, traversable: Any) -> Any:
    return _method(traversable, "sequence", "Traversable required")(of)


def traverse(of: Any, func: Callable[[Any], Any], traversable: Any) -> Any:
    return _method(traversable, "traverse", "Traversable required")(of, func)


def extend(func: Callable[[Any], Any], extendable: Any) -> Any:
    return _method(extendable, "extend", "Extend required")(func)


def swap(
    first: Callable[[Any], Any], second: Callable[[Any], Any], pair: Any
) -> Any:
    return _method(pair, "swap", "Pair required")(first, second)


__all__ = [
    "ap",
    "bimap",
    "chain",
    "concat",
    "extend",
    "fst",
    "map",
    "merge",
    "sequence",
    "snd",
    "swap",
    "traverse",
]

"""Basic function combinators."""

from collections.abc import Callable
from functools import reduce
from typing import Any, TypeVar

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")


def identity(value: T) -> T:
    """Return the argument unchanged."""
    return value


def compose(*funcs: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose functions right to left: compose(f, g)(x) == f(g(x))."""
    if not funcs:
        return identity

    def composed(value: Any) -> Any:
        return reduce(lambda acc, func: func(acc), reversed(funcs), value)

    return composed


def constant(value: T) -> Callable[..., T]:
    """Build a function that ignores its arguments and returns value."""
    return lambda *_args, **_kwargs: value


def flip(func: Callable[[T, U], V]) -> Callable[[U, T], V]:
    """Swap the order of a binary function's arguments."""
    return lambda b, a: func(a, b)


__all__ = ["compose", "constant", "flip", "identity"]

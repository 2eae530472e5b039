"""Algebraic data types: Pair and its collaborators."""

from .monoids import All, Any, Max, Min, Prod, Sum, mconcat, mreduce
from .pair import Pair
from .writer import Writer

__all__ = [
    "All",
    "Any",
    "Max",
    "Min",
    "Pair",
    "Prod",
    "Sum",
    "Writer",
    "mconcat",
    "mreduce",
]

"""
fpair: a Pair product type with the type-class instances that go with it.

    >>> from fpair import Pair, Sum
    >>> Pair(Sum(3), [3]).concat(Pair(Sum(10), [10]))
    Pair(Sum(13), [3, 10])
"""

import logging

from .config import Settings, configure_logging, get_settings, reset_settings
from .core import Either, Just, Left, Maybe, Nothing, Right, compose, identity
from .errors import ConfigurationError, FpairError, TypeConstraintError
from .helpers import branch, fanout, lift_writer_to_pair, to_pairs, writer_to_pair
from .types import All, Any, Max, Min, Pair, Prod, Sum, Writer, mconcat, mreduce

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "All",
    "Any",
    "ConfigurationError",
    "Either",
    "FpairError",
    "Just",
    "Left",
    "Max",
    "Maybe",
    "Min",
    "Nothing",
    "Pair",
    "Prod",
    "Right",
    "Settings",
    "Sum",
    "TypeConstraintError",
    "Writer",
    "branch",
    "compose",
    "configure_logging",
    "fanout",
    "get_settings",
    "identity",
    "lift_writer_to_pair",
    "mconcat",
    "mreduce",
    "reset_settings",
    "to_pairs",
    "writer_to_pair",
]

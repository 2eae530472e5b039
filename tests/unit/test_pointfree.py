"""Tests for the data-last wrappers."""

from functools import partial
from operator import truediv

import pytest

from fpair import pointfree
from fpair.core.combinators import compose, identity
from fpair.core.maybe import Just, Maybe
from fpair.errors import TypeConstraintError
from fpair.helpers import branch
from fpair.types import Pair, Sum


class TestPairOnly:
    def test_fst_and_snd(self):
        pair = Pair("a", "b")

        assert pointfree.fst(pair) == "a"
        assert pointfree.snd(pair) == "b"

    def test_merge(self):
        assert pointfree.merge(lambda a, b: a + b, Pair(1, 2)) == 3

    @pytest.mark.parametrize("func", [pointfree.fst, pointfree.snd])
    def test_projections_require_pair(self, func):
        with pytest.raises(TypeConstraintError, match="Pair required"):
            func(("a", "b"))

    def test_merge_requires_pair(self):
        with pytest.raises(TypeConstraintError, match="merge"):
            pointfree.merge(truediv, (1, 2))  # type: ignore[arg-type]


class TestComposition:
    def test_average_pipeline(self, sample_scores):
        average = compose(
            partial(pointfree.merge, truediv),
            partial(pointfree.bimap, sum, len),
            branch,
        )

        assert average(sample_scores) == 40

    def test_projections_compose(self):
        first_of_swapped = compose(
            pointfree.fst, partial(pointfree.swap, identity, identity)
        )

        assert first_of_swapped(Pair(1, 2)) == 2


class TestDispatch:
    def test_map(self):
        assert pointfree.map(len, Pair(1, "abc")) == Pair(1, 3)
        assert pointfree.map(len, Just("abc")) == Just(3)

    def test_concat_appends_argument(self):
        result = pointfree.concat(Pair(Sum(1), "b"), Pair(Sum(2), "a"))

        assert result == Pair(Sum(3), "ab")

    def test_ap_applies_held_function(self):
        result = pointfree.ap(Pair("y", 2), Pair("x", lambda v: v * 3))

        assert result == Pair("xy", 6)

    def test_chain(self):
        result = pointfree.chain(lambda v: Pair([v], v + 1), Pair([0], 0))

        assert result == Pair([0, 0], 1)

    def test_sequence_and_traverse(self):
        assert pointfree.sequence(Maybe, Pair(1, Just(2))) == Just(Pair(1, 2))
        assert pointfree.traverse(Maybe, Just, Pair(1, 2)) == Just(Pair(1, 2))

    def test_extend(self):
        assert pointfree.extend(pointfree.fst, Pair(1, 2)) == Pair(1, 1)

    def test_swap(self):
        assert pointfree.swap(str, len, Pair(1, "ab")) == Pair(2, "1")

    @pytest.mark.parametrize(
        "call",
        [
            lambda: pointfree.map(identity, 5),
            lambda: pointfree.bimap(identity, identity, Just(1)),
            lambda: pointfree.chain(identity, "text"),
            lambda: pointfree.concat(1, 2),
            lambda: pointfree.swap(identity, identity, Pair),
        ],
    )
    def test_missing_capability(self, call):
        with pytest.raises(TypeConstraintError):
            call()

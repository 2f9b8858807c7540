"""Tests for the shrink-order modifiers."""

from itertools import count

import pytest

from shrinkwrap.core.arbitrary import Arbitrary
from shrinkwrap.core.gen import constant
from shrinkwrap.modifiers.ordering import (
    DoubleShrink,
    DoubleShrinkArbitrary,
    RankedShrink,
    RankedShrinkArbitrary,
)
from shrinkwrap.utils.helpers import interleave, take


class FixedShrinks(Arbitrary):
    """Arbitrary whose shrinks are the same fixed candidates for every value."""

    def __init__(self, candidates):
        self.candidates = candidates

    def arbitrary(self):
        return constant("x")

    def shrink(self, value):
        return iter(self.candidates)


class EndlessShrinks(Arbitrary):
    """Arbitrary with an infinite shrink list 1, 2, 3, ..."""

    def arbitrary(self):
        return constant(0)

    def shrink(self, value):
        return count(1)


@pytest.fixture
def letters():
    """Seven candidates ys0..ys6."""
    return FixedShrinks(list("abcdefg"))


class TestDoubleShrink:
    """Tests for DoubleShrink."""

    def test_one_step_then_two_step(self):
        candidates = [c.value for c in DoubleShrinkArbitrary(int).shrink(DoubleShrink(4))]

        # shrink(4) = [0, 2, 3]; shrink(2) = [0, 1]; shrink(3) = [0, 2]
        assert candidates == [0, 2, 3, 0, 1, 0, 2]

    def test_superset_of_base(self):
        arbitrary = DoubleShrinkArbitrary(int)
        base = set(arbitrary.base.shrink(1000))
        doubled = {c.value for c in arbitrary.shrink(DoubleShrink(1000))}

        assert base <= doubled

    def test_lazy(self):
        arbitrary = DoubleShrinkArbitrary(EndlessShrinks())

        assert [c.value for c in take(arbitrary.shrink(DoubleShrink(0)), 5)] == [1, 2, 3, 4, 5]

    def test_minimal_value_has_no_shrinks(self):
        assert list(DoubleShrinkArbitrary(int).shrink(DoubleShrink(0))) == []


class TestRankedShrink:
    """Tests for RankedShrink."""

    def test_interleaves_around_rank(self, letters):
        arbitrary = RankedShrinkArbitrary(letters)
        candidates = list(arbitrary.shrink(RankedShrink("x", rank=5)))

        assert [(c.value, c.rank) for c in candidates] == [
            ("d", 3),
            ("a", 0),
            ("e", 4),
            ("b", 1),
            ("f", 5),
            ("c", 2),
            ("g", 6),
        ]

    @pytest.mark.parametrize("rank", [0, 1, 2])
    def test_low_rank_keeps_base_order(self, letters, rank):
        arbitrary = RankedShrinkArbitrary(letters)
        candidates = list(arbitrary.shrink(RankedShrink("x", rank=rank)))

        assert [c.value for c in candidates] == list("abcdefg")
        assert [c.rank for c in candidates] == list(range(7))

    def test_rank_beyond_candidates(self, letters):
        arbitrary = RankedShrinkArbitrary(letters)
        candidates = list(arbitrary.shrink(RankedShrink("x", rank=20)))

        assert [c.value for c in candidates] == list("abcdefg")

    @pytest.mark.parametrize("rank", range(12))
    def test_same_candidates_as_base(self, rank):
        arbitrary = RankedShrinkArbitrary(int)
        base = sorted(arbitrary.base.shrink(1000))
        ranked = sorted(c.value for c in arbitrary.shrink(RankedShrink(1000, rank=rank)))

        assert ranked == base

    def test_lazy(self):
        arbitrary = RankedShrinkArbitrary(EndlessShrinks())
        candidates = take(arbitrary.shrink(RankedShrink(0, rank=4)), 4)

        assert [c.value for c in candidates] == [3, 1, 4, 2]

    def test_rank_is_bookkeeping(self):
        assert RankedShrink(5, rank=3) == RankedShrink(5)
        assert hash(RankedShrink(5, rank=3)) == hash(RankedShrink(5))
        assert "rank" not in repr(RankedShrink(5, rank=3))

    def test_generated_rank_is_zero(self):
        wrapped = RankedShrinkArbitrary(int).arbitrary().generate(size=10, seed=1)

        assert wrapped.rank == 0

    def test_negative_rank_rejected(self):
        with pytest.raises(ValueError):
            RankedShrink(5, rank=-1)


class TestInterleave:
    """Tests for the interleave helper."""

    def test_alternates_then_drains(self):
        assert list(interleave([1, 2, 3, 4], ["a"])) == [1, "a", 2, 3, 4]
        assert list(interleave([1], ["a", "b", "c"])) == [1, "a", "b", "c"]
        assert list(interleave([], ["a"])) == ["a"]

"""Tests for the invariant and basic modifiers."""

import pytest
from pydantic import ValidationError

from shrinkwrap.core.arbitrary import IntegralArbitrary
from shrinkwrap.core.gen import choose, constant, frequency
from shrinkwrap.modifiers.basic import NoShrink, NoShrinkArbitrary, Opaque, OpaqueArbitrary
from shrinkwrap.modifiers.invariants import (
    NonEmpty,
    NonEmptyArbitrary,
    NonNegative,
    NonNegativeArbitrary,
    NonZero,
    NonZeroArbitrary,
    Positive,
    PositiveArbitrary,
    Sorted,
    SortedArbitrary,
    is_sorted,
)
from shrinkwrap.settings.base import GenerationSettings
from shrinkwrap.utils.helpers import take


class MostlyMinInt8(IntegralArbitrary):
    """int8 values that are usually -128, whose absolute value overflows."""

    def __init__(self):
        super().__init__("int8")

    def arbitrary(self):
        return frequency([(9, constant(-128)), (1, choose(1, 127))])


@pytest.fixture
def settings():
    """Settings ramping sizes up to 100."""
    return GenerationSettings(seed=1234, count=200, max_size=100)


INVARIANTS = [
    (SortedArbitrary(int), is_sorted),
    (NonEmptyArbitrary(int), lambda xs: len(xs) > 0),
    (PositiveArbitrary(int), lambda x: x > 0),
    (PositiveArbitrary(float), lambda x: x > 0),
    (NonZeroArbitrary(int), lambda x: x != 0),
    (NonNegativeArbitrary(int), lambda x: x >= 0),
    (NonNegativeArbitrary("int8"), lambda x: x >= 0),
]


class TestInvariantsHold:
    """Every generated value and every shrink candidate satisfies its predicate."""

    @pytest.mark.parametrize("arbitrary,predicate", INVARIANTS)
    def test_generated(self, arbitrary, predicate, settings):
        for wrapped in arbitrary.sample(settings=settings):
            assert predicate(wrapped.value)

    @pytest.mark.parametrize("arbitrary,predicate", INVARIANTS)
    def test_shrunk(self, arbitrary, predicate, settings):
        for wrapped in arbitrary.sample(count=20, settings=settings):
            for candidate in take(arbitrary.shrink(wrapped), 50):
                assert predicate(candidate.value)
                assert candidate != wrapped


class TestSorted:
    """Tests for Sorted."""

    def test_payload_is_tuple(self):
        assert Sorted([1, 2, 2]).value == (1, 2, 2)

    def test_rejects_unsorted(self):
        with pytest.raises(ValidationError):
            Sorted([3, 1])

    def test_empty_is_sorted(self):
        assert Sorted([]).value == ()

    def test_shrink_keeps_order(self):
        arbitrary = SortedArbitrary(int)
        candidates = [c.value for c in arbitrary.shrink(Sorted([1, 5]))]

        assert candidates[:3] == [(), (5,), (1,)]
        assert (0, 5) in candidates
        assert all(is_sorted(c) for c in candidates)


class TestNonEmpty:
    """Tests for NonEmpty."""

    def test_rejects_empty(self):
        with pytest.raises(ValidationError):
            NonEmpty([])

    def test_generates_at_size_zero(self):
        gen = NonEmptyArbitrary(int).arbitrary()

        assert len(gen.generate(size=0, seed=1).value) > 0

    def test_shrink_never_empties(self):
        arbitrary = NonEmptyArbitrary(int)
        candidates = [c.value for c in arbitrary.shrink(NonEmpty([5]))]

        assert candidates == [(0,), (3,), (4,)]


class TestSignedModifiers:
    """Tests for Positive, NonZero and NonNegative."""

    def test_validation(self):
        with pytest.raises(ValidationError):
            Positive(0)
        with pytest.raises(ValidationError):
            Positive(-1)
        with pytest.raises(ValidationError):
            NonZero(0)
        with pytest.raises(ValidationError):
            NonNegative(-1)
        assert NonNegative(0).value == 0

    def test_positive_shrink(self):
        candidates = [c.value for c in PositiveArbitrary(int).shrink(Positive(100))]

        assert candidates == [50, 75, 88, 94, 97, 99]

    def test_non_zero_shrink(self):
        candidates = [c.value for c in NonZeroArbitrary(int).shrink(NonZero(-10))]

        assert candidates == [10, -5, -8, -9]

    def test_non_negative_shrink(self):
        candidates = [c.value for c in NonNegativeArbitrary(int).shrink(NonNegative(10))]

        assert candidates == [0, 5, 8, 9]

    def test_positive_resamples_overflowing_abs(self):
        arbitrary = PositiveArbitrary(MostlyMinInt8())
        values = [w.value for w in arbitrary.sample(count=100, settings=GenerationSettings(seed=3))]

        assert all(1 <= v <= 127 for v in values)

    def test_non_negative_resamples_overflowing_abs(self):
        arbitrary = NonNegativeArbitrary(MostlyMinInt8())
        values = [w.value for w in arbitrary.sample(count=100, settings=GenerationSettings(seed=4))]

        assert all(0 <= v <= 127 for v in values)

    def test_non_negative_zero_frequency(self):
        arbitrary = NonNegativeArbitrary(int)
        settings = GenerationSettings(seed=1234, size=100, count=6000)
        values = [w.value for w in arbitrary.sample(settings=settings)]
        zero_fraction = values.count(0) / len(values)

        # About one in six values is the literal zero.
        assert 0.14 < zero_fraction < 0.20

    def test_numeric_base_required(self):
        with pytest.raises(TypeError):
            PositiveArbitrary("char")
        with pytest.raises(TypeError):
            NonNegativeArbitrary(str)


class TestOpaque:
    """Tests for Opaque."""

    def test_hidden_representation(self):
        wrapped = Opaque(lambda x: x)

        assert repr(wrapped) == "(*)"
        assert str(wrapped) == "(*)"

    def test_generation_unchanged(self):
        wrapped = OpaqueArbitrary(int).arbitrary().generate(size=10, seed=5)
        plain = IntegralArbitrary().arbitrary().generate(size=10, seed=5)

        assert wrapped.value == plain

    def test_shrink_delegates(self):
        candidates = [c.value for c in OpaqueArbitrary(int).shrink(Opaque(4))]

        assert candidates == [0, 2, 3]


class TestNoShrink:
    """Tests for NoShrink."""

    def test_never_shrinks(self):
        assert list(NoShrinkArbitrary(int).shrink(NoShrink(100))) == []
        assert list(NoShrinkArbitrary(str).shrink(NoShrink("abc"))) == []

    def test_generation_unchanged(self):
        wrapped = NoShrinkArbitrary(int).arbitrary().generate(size=10, seed=6)
        plain = IntegralArbitrary().arbitrary().generate(size=10, seed=6)

        assert wrapped == NoShrink(plain)

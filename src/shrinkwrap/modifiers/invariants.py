"""Invariant modifiers - payloads restricted by a predicate.

Each wrapper below names one predicate. The predicate is checked by the
model itself when a wrapper is built, produced by the generator (by
construction or by retry-filtering) and re-checked on every shrink
candidate. Retry-filtering is unbounded: a base generator that can never
satisfy the predicate makes generation hang.
"""

from itertools import pairwise
from typing import Any, Sequence, TypeVar

from pydantic import field_validator

from shrinkwrap.core.arbitrary import Arbitrary, NumericArbitrary, as_list_arbitrary
from shrinkwrap.core.gen import Gen, constant, frequency
from shrinkwrap.modifiers.base import InvariantArbitrary, Modifier

T = TypeVar("T")

# Weights of (absolute value of a sample, literal zero) for NonNegative.
# The ratio is a tuning constant, not something callers should rely on.
NON_NEGATIVE_WEIGHTS = (5, 1)


def is_sorted(values: Sequence[Any]) -> bool:
    return all(a <= b for a, b in pairwise(values))


class Sorted(Modifier[T]):
    """A sequence in non-decreasing order."""

    value: tuple[T, ...]

    @field_validator("value")
    @classmethod
    def check_sorted(cls, value: tuple[Any, ...]) -> tuple[Any, ...]:
        if not is_sorted(value):
            raise ValueError("Sorted requires a non-decreasing sequence")
        return value


class NonEmpty(Modifier[T]):
    """A sequence with at least one element."""

    value: tuple[T, ...]

    @field_validator("value")
    @classmethod
    def check_non_empty(cls, value: tuple[Any, ...]) -> tuple[Any, ...]:
        if len(value) == 0:
            raise ValueError("NonEmpty requires at least one element")
        return value


class Positive(Modifier[T]):
    """A number strictly greater than zero."""

    @field_validator("value")
    @classmethod
    def check_positive(cls, value: Any) -> Any:
        if not value > 0:
            raise ValueError(f"Positive requires value > 0, got {value!r}")
        return value


class NonZero(Modifier[T]):
    """A number other than zero."""

    @field_validator("value")
    @classmethod
    def check_non_zero(cls, value: Any) -> Any:
        if value == 0:
            raise ValueError("NonZero requires value != 0")
        return value


class NonNegative(Modifier[T]):
    """A number greater than or equal to zero."""

    @field_validator("value")
    @classmethod
    def check_non_negative(cls, value: Any) -> Any:
        if not value >= 0:
            raise ValueError(f"NonNegative requires value >= 0, got {value!r}")
        return value


class SortedArbitrary(InvariantArbitrary[Sorted[Any]]):
    """Sorted lists: sort a base list, keep only sorted shrinks."""

    modifier = Sorted

    def __init__(self, base: Arbitrary[Any] | str | type = int):
        super().__init__(base)
        self.base = as_list_arbitrary(self.base)

    def holds(self, value: Sequence[Any]) -> bool:
        return is_sorted(value)

    def payloads(self) -> Gen[list[Any]]:
        return self.base.arbitrary().map(sorted)


class NonEmptyArbitrary(InvariantArbitrary[NonEmpty[Any]]):
    modifier = NonEmpty

    def __init__(self, base: Arbitrary[Any] | str | type = int):
        super().__init__(base)
        self.base = as_list_arbitrary(self.base)

    def holds(self, value: Sequence[Any]) -> bool:
        return len(value) > 0

    def payloads(self) -> Gen[list[Any]]:
        return self.base.arbitrary().such_that(self.holds)


class NumericInvariantArbitrary(InvariantArbitrary[Any]):
    """Invariant arbitraries over a numeric base."""

    base: NumericArbitrary[Any]

    def __init__(self, base: Arbitrary[Any] | str | type = int):
        super().__init__(base)
        if not isinstance(self.base, NumericArbitrary):
            raise TypeError(
                f"{type(self).__name__} needs a numeric base arbitrary, got {self.base!r}"
            )


class PositiveArbitrary(NumericInvariantArbitrary):
    modifier = Positive

    def holds(self, value: Any) -> bool:
        return value > 0

    def payloads(self) -> Gen[Any]:
        # abs of the most negative fixed-width value stays negative,
        # hence the second filter.
        non_zero = self.base.arbitrary().such_that(lambda x: x != 0)
        return non_zero.map(self.base.abs).such_that(self.holds)


class NonZeroArbitrary(NumericInvariantArbitrary):
    modifier = NonZero

    def holds(self, value: Any) -> bool:
        return value != 0

    def payloads(self) -> Gen[Any]:
        return self.base.arbitrary().such_that(self.holds)


class NonNegativeArbitrary(NumericInvariantArbitrary):
    modifier = NonNegative

    def holds(self, value: Any) -> bool:
        return value >= 0

    def payloads(self) -> Gen[Any]:
        magnitude_weight, zero_weight = NON_NEGATIVE_WEIGHTS
        shaped = frequency([
            (magnitude_weight, self.base.arbitrary().map(self.base.abs)),
            (zero_weight, constant(self.base.zero)),
        ])
        return shaped.such_that(self.holds)

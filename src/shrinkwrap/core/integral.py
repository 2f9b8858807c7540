"""Integral types with fixed representable ranges.

Python ints never overflow, so fixed-width behavior (including the
two's-complement wrap of negating the most negative value) is modelled
explicitly by IntegralType.wrap.
"""

from enum import Enum
from typing import Iterator

from shrinkwrap.core.gen import Gen, choose, sized


class IntegralType(str, Enum):
    """Representable integral domains."""

    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    INTEGER = "integer"

    @property
    def bits(self) -> int | None:
        if self is IntegralType.INTEGER:
            return None
        return int(self.value.removeprefix("u").removeprefix("int"))

    @property
    def signed(self) -> bool:
        return not self.value.startswith("uint")

    @property
    def bounded(self) -> bool:
        return self.bits is not None

    @property
    def min_value(self) -> int | None:
        if self.bits is None:
            return None
        if not self.signed:
            return 0
        return -(2 ** (self.bits - 1))

    @property
    def max_value(self) -> int | None:
        if self.bits is None:
            return None
        if not self.signed:
            return 2 ** self.bits - 1
        return 2 ** (self.bits - 1) - 1

    def wrap(self, value: int) -> int:
        """Reduce an exact result into this type's range, as the hardware would."""
        if self.bits is None:
            return value
        modulus = 2 ** self.bits
        value %= modulus
        if self.signed and value > self.max_value:
            value -= modulus
        return value

    def contains(self, value: int) -> bool:
        if self.bits is None:
            return True
        return self.min_value <= value <= self.max_value

    def clamp(self, low: int, high: int) -> tuple[int, int]:
        if self.bits is None:
            return low, high
        return max(low, self.min_value), min(high, self.max_value)


def _quot(x: int, y: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(x) // abs(y)
    return q if (x >= 0) == (y >= 0) else -q


def shrink_integral(value: int, itype: IntegralType = IntegralType.INTEGER) -> Iterator[int]:
    """Yield simpler integers, closest to zero first.

    For value x the candidates are -x (only when x is negative and the
    negation does not overflow), then 0, x - x/2, x - x/4, ... as long as
    each candidate is strictly smaller in magnitude than x.
    """
    if value < 0:
        negated = itype.wrap(-value)
        if negated > value:
            yield negated

    yield from _halvings(value)


def _halvings(value: int) -> Iterator[int]:
    if value == 0:
        return
    yield 0
    step = _quot(value, 2)
    while step != 0:
        candidate = value - step
        if abs(candidate) >= abs(value):
            break
        yield candidate
        step = _quot(step, 2)


def sized_integral(itype: IntegralType = IntegralType.INTEGER) -> Gen[int]:
    """Integers whose magnitude is bounded by the ambient size."""

    def bounded_by(n: int) -> Gen[int]:
        low = -n if itype.signed else 0
        low, high = itype.clamp(low, n)
        return choose(low, high)

    return sized(bounded_by)


def bounded_integral(itype: IntegralType) -> Gen[int]:
    """Integers drawn uniformly from the whole range of a bounded type."""
    if not itype.bounded:
        raise ValueError(f"Integral type '{itype.value}' has no bounds")
    return choose(itype.min_value, itype.max_value)

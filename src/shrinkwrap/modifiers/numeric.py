"""Bounded numeric modifiers - choosing the range integers are drawn from.

Base integers grow with the ambient size so that small test cases stay
readable. WideNum opts out of that and draws from the whole representable
range of a bounded type; NarrowNum makes the size scaling explicit.
"""

from typing import Any, Iterator, TypeVar

from shrinkwrap.core.arbitrary import Arbitrary, IntegralArbitrary
from shrinkwrap.core.gen import Gen
from shrinkwrap.core.integral import bounded_integral, shrink_integral, sized_integral
from shrinkwrap.modifiers.base import Modifier, ModifierArbitrary

T = TypeVar("T")


class WideNum(Modifier[T]):
    """An integer drawn from the full range of its type."""


class NarrowNum(Modifier[T]):
    """An integer whose magnitude is bounded by the ambient size."""


class IntegralModifierArbitrary(ModifierArbitrary[Any]):
    """Modifiers over an integral base; both shrink with shrink_integral."""

    base: IntegralArbitrary

    def __init__(self, base: Arbitrary[Any] | str | type = int):
        super().__init__(base)
        if not isinstance(self.base, IntegralArbitrary):
            raise TypeError(
                f"{type(self).__name__} needs an integral base arbitrary, got {self.base!r}"
            )

    def shrink(self, value: Modifier[int]) -> Iterator[Modifier[int]]:
        return (self.wrap(x) for x in shrink_integral(value.value, self.base.itype))


class WideNumArbitrary(IntegralModifierArbitrary):
    modifier = WideNum

    def __init__(self, base: Arbitrary[Any] | str | type = int):
        super().__init__(base)
        if not self.base.itype.bounded:
            raise ValueError(
                f"WideNum needs a bounded integral type, got '{self.base.itype.value}'"
            )

    def arbitrary(self) -> Gen[WideNum[int]]:
        return bounded_integral(self.base.itype).map(self.wrap)


class NarrowNumArbitrary(IntegralModifierArbitrary):
    modifier = NarrowNum

    def arbitrary(self) -> Gen[NarrowNum[int]]:
        return sized_integral(self.base.itype).map(self.wrap)

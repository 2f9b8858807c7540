"""Base classes for Arbitraries - the generate/shrink contract.

An Arbitrary pairs a generator for values of some type with a shrinker
that proposes simpler values. Shrinkers are lazy: they yield candidates on
demand so a search can stop at the first interesting one.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterable, Iterator, TypeVar
import math

from shrinkwrap.core.gen import Gen, choose, choose_float, frequency, list_of, sized
from shrinkwrap.core.integral import IntegralType, shrink_integral, sized_integral

if TYPE_CHECKING:
    from shrinkwrap.settings.base import GenerationSettings

T = TypeVar("T")
N = TypeVar("N", int, float)

ASCII_MAX = 0x7F
LATIN1_MAX = 0xFF


class Arbitrary(ABC, Generic[T]):
    """Abstract base class for everything that can be generated and shrunk."""

    @abstractmethod
    def arbitrary(self) -> Gen[T]:
        """Return the generator for this type."""
        pass

    def shrink(self, value: T) -> Iterator[T]:
        """Yield values simpler than value. Nothing by default."""
        return iter(())

    def sample(
        self,
        count: int | None = None,
        settings: "GenerationSettings | None" = None,
    ) -> list[T]:
        """Generate values following the size schedule of the settings.

        Args:
            count: Number of values (defaults to settings.count)
            settings: Generation settings (defaults apply when omitted)

        Returns:
            The generated values
        """
        from shrinkwrap.settings.base import GenerationSettings

        settings = settings or GenerationSettings()
        count = settings.count if count is None else count
        settings.apply_logging()
        return list(self.arbitrary().stream(settings.sizes(count), seed=settings.seed))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class NumericArbitrary(Arbitrary[N]):
    """An arbitrary over a numeric type with a type-faithful absolute value."""

    zero: N

    @abstractmethod
    def abs(self, value: N) -> N:
        """Absolute value as the underlying type computes it (may overflow)."""
        pass


class IntegralArbitrary(NumericArbitrary[int]):
    """Integers of a given integral type, scaled by the ambient size."""

    zero = 0

    def __init__(self, itype: IntegralType | str = IntegralType.INT64):
        self.itype = IntegralType(itype)

    def arbitrary(self) -> Gen[int]:
        return sized_integral(self.itype)

    def shrink(self, value: int) -> Iterator[int]:
        return shrink_integral(value, self.itype)

    def abs(self, value: int) -> int:
        return self.itype.wrap(abs(value))

    def __repr__(self) -> str:
        return f"IntegralArbitrary({self.itype.value!r})"


def shrink_float(value: float) -> Iterator[float]:
    if not math.isfinite(value):
        yield 0.0
        return
    if value < 0:
        yield -value
    if value != 0:
        yield 0.0
    truncated = float(math.trunc(value))
    if truncated not in (value, 0.0):
        yield truncated
    half = value / 2
    while abs(half) > 1:
        yield half
        half /= 2


class FloatArbitrary(NumericArbitrary[float]):
    """Floats uniform in [-size, size]."""

    zero = 0.0

    def arbitrary(self) -> Gen[float]:
        return sized(lambda n: choose_float(-float(n), float(n)))

    def shrink(self, value: float) -> Iterator[float]:
        return shrink_float(value)

    def abs(self, value: float) -> float:
        return abs(value)


class BoolArbitrary(Arbitrary[bool]):
    def arbitrary(self) -> Gen[bool]:
        return choose(0, 1).map(bool)

    def shrink(self, value: bool) -> Iterator[bool]:
        if value:
            yield False


def _char_stamp(c: str) -> tuple[tuple[bool, bool, bool], tuple[bool, bool, str]]:
    return (
        (not c.islower(), not c.isupper(), not c.isdigit()),
        (c != " ", not c.isspace(), c),
    )


_SIMPLE_CHARS = "abc"
_SIMPLE_UPPER = "ABC"
_SIMPLE_DIGITS = "123"


def shrink_char(c: str) -> Iterator[str]:
    """Yield characters simpler than c: lower case first, then upper case,
    digits and whitespace."""
    candidates = list(_SIMPLE_CHARS)
    if c.isupper():
        candidates.append(c.lower())
    candidates += list(_SIMPLE_UPPER) + list(_SIMPLE_DIGITS) + [" ", "\n"]

    stamp = _char_stamp(c)
    seen: set[str] = set()
    for candidate in candidates:
        if candidate in seen or len(candidate) != 1:
            continue
        seen.add(candidate)
        if _char_stamp(candidate) < stamp:
            yield candidate


def code_point(low: int, high: int) -> Gen[str]:
    return choose(low, high).map(chr)


def char_gen() -> Gen[str]:
    """Latin-1 characters, biased 3:1 toward ASCII."""
    return frequency([
        (3, code_point(0, ASCII_MAX)),
        (1, code_point(0, LATIN1_MAX)),
    ])


class CharArbitrary(Arbitrary[str]):
    """Single Latin-1 characters."""

    def arbitrary(self) -> Gen[str]:
        return char_gen()

    def shrink(self, value: str) -> Iterator[str]:
        return shrink_char(value)


def _removals(items: list[T], k: int) -> Iterator[list[T]]:
    for start in range(0, len(items) - k + 1, k):
        yield items[:start] + items[start + k:]


def shrink_list(
    shrink_element: Callable[[T], Iterable[T]],
    values: Iterable[T],
) -> Iterator[list[T]]:
    """Yield simpler lists.

    Chunks of length n, n/2, ..., 1 are removed first (at every aligned
    offset), then each element in turn is replaced by its own shrinks.

    Args:
        shrink_element: Shrinker for a single element
        values: The list to shrink

    Yields:
        Candidate lists, shortest first
    """
    items = list(values)
    k = len(items)
    while k > 0:
        yield from _removals(items, k)
        k //= 2

    for i, item in enumerate(items):
        for smaller in shrink_element(item):
            yield items[:i] + [smaller] + items[i + 1:]


class ListArbitrary(Arbitrary[list[T]]):
    """Lists of elements, with length scaled by the ambient size."""

    def __init__(self, element: Arbitrary[T]):
        self.element = element

    def arbitrary(self) -> Gen[list[T]]:
        return list_of(self.element.arbitrary())

    def shrink(self, value: list[T]) -> Iterator[list[T]]:
        return shrink_list(self.element.shrink, value)

    def __repr__(self) -> str:
        return f"ListArbitrary({self.element!r})"


class TextArbitrary(Arbitrary[str]):
    """Strings of characters drawn from a character generator."""

    def __init__(self, char: Arbitrary[str] | None = None):
        self.char = char or CharArbitrary()

    def arbitrary(self) -> Gen[str]:
        return list_of(self.char.arbitrary()).map("".join)

    def shrink(self, value: str) -> Iterator[str]:
        return ("".join(chars) for chars in shrink_list(self.char.shrink, value))


def as_list_arbitrary(base: Arbitrary[Any]) -> Arbitrary[list[Any]]:
    """Lift an element arbitrary to lists, leaving list arbitraries alone."""
    if isinstance(base, ListArbitrary):
        return base
    return ListArbitrary(base)

"""Utility helper functions."""

from itertools import islice
from typing import Iterable, Iterator, TypeVar
import random

T = TypeVar("T")

_EXHAUSTED = object()


def generate_seed() -> int:
    """Generate a random seed value."""
    return random.randint(0, 2**31 - 1)


def interleave(first: Iterable[T], second: Iterable[T]) -> Iterator[T]:
    """Alternate between two iterables, starting with the first.

    Once either side runs out the remainder of the other follows, so every
    element of both appears exactly once.

    Args:
        first: Iterable supplying elements 0, 2, 4, ...
        second: Iterable supplying elements 1, 3, 5, ...

    Yields:
        Elements of both iterables
    """
    a, b = iter(first), iter(second)
    while True:
        x = next(a, _EXHAUSTED)
        if x is _EXHAUSTED:
            yield from b
            return
        yield x

        y = next(b, _EXHAUSTED)
        if y is _EXHAUSTED:
            yield from a
            return
        yield y


def take(values: Iterable[T], limit: int) -> list[T]:
    """First limit elements of an iterable, consuming no more than that."""
    return list(islice(values, limit))

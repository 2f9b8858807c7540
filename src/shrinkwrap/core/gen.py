"""Random value generators - the Sampling Layer.

A Gen is a pure description of how to draw a value from a random source
under an ambient size parameter. Generators never hold state: running the
same Gen with the same seed and size always yields the same value.
"""

from bisect import bisect_right
from itertools import accumulate
from typing import Any, Callable, Generic, Iterable, Iterator, Sequence, TypeVar
import random

from shrinkwrap.logging import get_logger

T = TypeVar("T")
U = TypeVar("U")

logger = get_logger(__name__)

DEFAULT_SIZE = 30
DISCARD_REPORT_INTERVAL = 1000


class Gen(Generic[T]):
    """A sampler parameterized by a random source and a non-negative size."""

    def __init__(self, run: Callable[[random.Random, int], T]):
        """Initialize the generator.

        Args:
            run: Function drawing a value from (rng, size)
        """
        self._run = run

    def run(self, rng: random.Random, size: int) -> T:
        return self._run(rng, max(size, 0))

    def generate(self, size: int = DEFAULT_SIZE, seed: int | None = None) -> T:
        """Draw a single value.

        Args:
            size: Ambient size parameter
            seed: Optional random seed for deterministic generation

        Returns:
            The generated value
        """
        return self.run(random.Random(seed), size)

    def stream(
        self,
        sizes: Iterable[int],
        seed: int | None = None,
    ) -> Iterator[T]:
        """Yield one value per size, sharing one random source.

        Args:
            sizes: Size for each successive value
            seed: Optional random seed for deterministic generation

        Yields:
            Generated values one at a time
        """
        rng = random.Random(seed)
        for size in sizes:
            yield self.run(rng, size)

    def map(self, f: Callable[[T], U]) -> "Gen[U]":
        return Gen(lambda rng, size: f(self.run(rng, size)))

    def bind(self, f: Callable[[T], "Gen[U]"]) -> "Gen[U]":
        return Gen(lambda rng, size: f(self.run(rng, size)).run(rng, size))

    def resize(self, size: int) -> "Gen[T]":
        return Gen(lambda rng, _size: self.run(rng, size))

    def such_that(self, predicate: Callable[[T], bool]) -> "Gen[T]":
        """Retry-filter: resample until the predicate holds.

        At size n the candidates are drawn at sizes n..2n; when none of them
        is accepted the search restarts one size larger. There is no upper
        bound on the number of retries, so an unsatisfiable predicate never
        returns.

        Args:
            predicate: Condition every produced value must satisfy

        Returns:
            A generator that only yields accepted values
        """

        def run(rng: random.Random, size: int) -> T:
            n = size
            discarded = 0
            while True:
                for k in range(n, 2 * n + 1):
                    value = self.run(rng, k)
                    if predicate(value):
                        return value
                    discarded += 1
                    if discarded % DISCARD_REPORT_INTERVAL == 0:
                        logger.debug(
                            "such_that has discarded %d values (size now %d)",
                            discarded,
                            k,
                        )
                n += 1

        return Gen(run)


def constant(value: T) -> Gen[T]:
    return Gen(lambda rng, size: value)


def choose(low: int, high: int) -> Gen[int]:
    """Uniform integer in the inclusive range [low, high]."""
    if low > high:
        raise ValueError(f"Empty range: [{low}, {high}]")
    return Gen(lambda rng, size: rng.randint(low, high))


def choose_float(low: float, high: float) -> Gen[float]:
    if low > high:
        raise ValueError(f"Empty range: [{low}, {high}]")
    return Gen(lambda rng, size: rng.uniform(low, high))


def elements(values: Sequence[T]) -> Gen[T]:
    if not values:
        raise ValueError("elements() needs at least one value")
    items = list(values)
    return Gen(lambda rng, size: rng.choice(items))


def one_of(*gens: Gen[T]) -> Gen[T]:
    """Pick one of the generators uniformly, then run it."""
    if not gens:
        raise ValueError("one_of() needs at least one generator")
    return Gen(lambda rng, size: rng.choice(gens).run(rng, size))


def frequency(weighted: Sequence[tuple[int, Gen[T]]]) -> Gen[T]:
    """Pick a generator with probability proportional to its weight.

    Args:
        weighted: (weight, generator) pairs; weights are non-negative ints

    Returns:
        A generator drawing from the chosen alternative
    """
    pairs = list(weighted)
    if any(weight < 0 for weight, _ in pairs):
        raise ValueError("frequency() weights must be non-negative")
    cumulative = list(accumulate(weight for weight, _ in pairs))
    if not cumulative or cumulative[-1] <= 0:
        raise ValueError("frequency() needs a positive total weight")
    gens = [gen for _, gen in pairs]
    total = cumulative[-1]

    def run(rng: random.Random, size: int) -> T:
        ticket = rng.randrange(total)
        return gens[bisect_right(cumulative, ticket)].run(rng, size)

    return Gen(run)


def sized(f: Callable[[int], Gen[T]]) -> Gen[T]:
    return Gen(lambda rng, size: f(size).run(rng, size))


def vector_of(length: int, gen: Gen[T]) -> Gen[list[T]]:
    return Gen(lambda rng, size: [gen.run(rng, size) for _ in range(length)])


def list_of(gen: Gen[T]) -> Gen[list[T]]:
    """Lists whose length is uniform in [0, size]."""
    return sized(lambda n: choose(0, n).bind(lambda length: vector_of(length, gen)))


def sample(gen: Gen[Any], count: int, size: int = DEFAULT_SIZE, seed: int | None = None) -> list[Any]:
    return list(gen.stream([size] * count, seed=seed))

"""Shrink-order modifiers - same candidates, different exploration.

DoubleShrink widens each shrink step with the candidates two steps away.
RankedShrink remembers where in the candidate list the last successful
shrink came from and revisits that neighbourhood first next time. Neither
drops a candidate: the search still reaches a minimal counterexample.
"""

from itertools import islice
from typing import Any, ClassVar, Iterator, TypeVar

from pydantic import Field

from shrinkwrap.modifiers.base import Modifier, ModifierArbitrary
from shrinkwrap.utils.helpers import interleave

T = TypeVar("T")

# How far behind the last successful rank the next search restarts.
RANK_SLACK = 2


class DoubleShrink(Modifier[T]):
    """A payload whose shrink step may take one or two base steps at once."""


class RankedShrink(Modifier[T]):
    """A payload paired with the rank of the shrink that produced it.

    The rank is search bookkeeping only: it is ignored by equality,
    hashing, ordering and repr.
    """

    positional_fields: ClassVar[tuple[str, ...]] = ("value", "rank")

    rank: int = Field(default=0, ge=0, repr=False)


class DoubleShrinkArbitrary(ModifierArbitrary[DoubleShrink[Any]]):
    modifier = DoubleShrink

    def shrink(self, value: DoubleShrink[Any]) -> Iterator[DoubleShrink[Any]]:
        """Yield every one-step candidate, then every two-step candidate.

        The base shrinker is pure, so it is simply re-run for the second
        pass instead of buffering the first.
        """
        x = value.value
        for y in self.base.shrink(x):
            yield self.wrap(y)
        for y in self.base.shrink(x):
            for z in self.base.shrink(y):
                yield self.wrap(z)


class RankedShrinkArbitrary(ModifierArbitrary[RankedShrink[Any]]):
    modifier = RankedShrink

    def shrink(self, value: RankedShrink[Any]) -> Iterator[RankedShrink[Any]]:
        """Yield the base candidates reordered around the previous rank.

        Candidates are numbered 0, 1, 2, ... and split at
        max(0, rank - 2). Those from the split point on are interleaved
        with those before it, starting with the split point, and each
        candidate carries its own number as its rank. Only the part before
        the split is buffered.
        """
        numbered = (
            RankedShrink(y, rank=j)
            for j, y in enumerate(self.base.shrink(value.value))
        )
        split = max(0, value.rank - RANK_SLACK)
        front = list(islice(numbered, split))
        # Starts with the split point, not with the front part as a plain
        # take/drop interleave would.
        yield from interleave(numbered, front)

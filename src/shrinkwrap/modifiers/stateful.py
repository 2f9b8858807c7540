"""Stateful shrinking - a user-defined shrink state machine.

A ShrinkState supplies the initial state for a freshly generated payload
and the transition from a (payload, state) pair to its shrink candidates.
The framework threads the pairs through unchanged and never looks inside
the state; a pair whose step yields nothing is terminal.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Generic, Iterable, Iterator, TypeVar

from pydantic import Field

from shrinkwrap.core.arbitrary import Arbitrary
from shrinkwrap.core.gen import Gen
from shrinkwrap.modifiers.base import Modifier, ModifierArbitrary

T = TypeVar("T")
S = TypeVar("S")


class ShrinkState(ABC, Generic[T, S]):
    """The two capabilities a shrink state machine provides."""

    @abstractmethod
    def init(self, value: T) -> S:
        """State attached to a newly generated value."""
        pass

    @abstractmethod
    def step(self, value: T, state: S) -> Iterable[tuple[T, S]]:
        """Shrink candidates of (value, state), each with its next state."""
        pass


class FunctionShrinkState(ShrinkState[T, S]):
    """A ShrinkState built from two plain callables."""

    def __init__(
        self,
        init: Callable[[T], S],
        step: Callable[[T, S], Iterable[tuple[T, S]]],
    ):
        self._init = init
        self._step = step

    def init(self, value: T) -> S:
        return self._init(value)

    def step(self, value: T, state: S) -> Iterable[tuple[T, S]]:
        return self._step(value, state)


class Stateful(Modifier[T], Generic[T, S]):
    """A payload carrying an opaque shrink state.

    The state is ignored by equality, hashing, ordering and repr.
    """

    positional_fields: ClassVar[tuple[str, ...]] = ("value", "state")

    state: Any = Field(default=None, repr=False)


class StatefulArbitrary(ModifierArbitrary[Stateful[Any, Any]]):
    """Generation from the base; shrinking entirely by the state machine."""

    modifier = Stateful

    def __init__(
        self,
        machine: ShrinkState[Any, Any],
        base: Arbitrary[Any] | str | type = int,
    ):
        """Initialize the arbitrary.

        Args:
            machine: The shrink state machine
            base: Base arbitrary, registered name or Python type of the payload
        """
        super().__init__(base)
        self.machine = machine

    def wrap(self, value: Any) -> Stateful[Any, Any]:
        return Stateful(value, self.machine.init(value))

    def arbitrary(self) -> Gen[Stateful[Any, Any]]:
        return self.base.arbitrary().map(self.wrap)

    def shrink(self, value: Stateful[Any, Any]) -> Iterator[Stateful[Any, Any]]:
        return (
            Stateful(smaller, state)
            for smaller, state in self.machine.step(value.value, value.state)
        )

    def __repr__(self) -> str:
        return f"StatefulArbitrary({self.machine!r}, {self.base!r})"

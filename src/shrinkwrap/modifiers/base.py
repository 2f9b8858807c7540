"""Base classes for Modifiers - the Wrapper Layer.

Modifiers are immutable wrappers around a payload value that change how
the payload is generated or shrunk:
- Enforcing an invariant on every generated and shrunk value
- Reshaping the distribution of generated values
- Reordering or widening the shrink search

They never change the payload's meaning. Identity, hashing and ordering are
defined on the payload alone; auxiliary fields (ranks, shrink states) are
bookkeeping and take no part in them.
"""

from abc import abstractmethod
from typing import Any, Callable, ClassVar, Generic, Iterator, TypeVar

from pydantic import BaseModel, ConfigDict

from shrinkwrap.core.arbitrary import Arbitrary
from shrinkwrap.core.gen import Gen
from shrinkwrap.core.registry import resolve_base

T = TypeVar("T")
W = TypeVar("W", bound="Modifier[Any]")


def _frozen(value: Any) -> Any:
    """A hashable stand-in for a payload, for payloads built from lists,
    dicts and sets."""
    if isinstance(value, (list, tuple)):
        return tuple(_frozen(item) for item in value)
    if isinstance(value, dict):
        return frozenset((key, _frozen(item)) for key, item in value.items())
    if isinstance(value, set):
        return frozenset(value)
    return value


class Modifier(BaseModel, Generic[T]):
    """An immutable wrapper around a payload value.

    Subclasses state their invariant as a validator on ``value``; building a
    wrapper whose payload breaks it raises a pydantic ValidationError.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    positional_fields: ClassVar[tuple[str, ...]] = ("value",)

    value: T

    def __init__(self, *args: Any, **data: Any):
        if len(args) > len(self.positional_fields):
            raise TypeError(
                f"{type(self).__name__} takes at most "
                f"{len(self.positional_fields)} positional arguments"
            )
        for name, arg in zip(self.positional_fields, args):
            if name in data:
                raise TypeError(f"{type(self).__name__} got multiple values for '{name}'")
            data[name] = arg
        super().__init__(**data)

    @classmethod
    def family(cls) -> type:
        """The wrapper type with any generic parameters erased."""
        return cls.__pydantic_generic_metadata__["origin"] or cls

    def unwrap(self) -> T:
        return self.value

    def map(self, f: Callable[[T], Any]) -> "Modifier[Any]":
        """Apply f to the payload, keeping the wrapper (and its invariant)."""
        fields = dict(self)
        fields["value"] = f(self.value)
        return type(self)(**fields)

    def _same_family(self, other: object) -> bool:
        return isinstance(other, Modifier) and self.family() is other.family()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Modifier):
            return NotImplemented
        return self._same_family(other) and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.family(), _frozen(self.value)))

    def __lt__(self, other: object) -> bool:
        if not self._same_family(other):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not self._same_family(other):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not self._same_family(other):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not self._same_family(other):
            return NotImplemented
        return self.value >= other.value


class ModifierArbitrary(Arbitrary[W]):
    """Generate/shrink for a modifier layered on a base arbitrary.

    By default generation and shrinking delegate to the base and wrap the
    results; subclasses override whichever phase the modifier changes.
    """

    modifier: ClassVar[type[Modifier[Any]]]

    def __init__(self, base: Arbitrary[Any] | str | type = int):
        """Initialize the arbitrary.

        Args:
            base: Base arbitrary, registered name or Python type of the payload
        """
        self.base = resolve_base(base)

    def wrap(self, value: Any) -> W:
        return self.modifier(value)

    def arbitrary(self) -> Gen[W]:
        return self.base.arbitrary().map(self.wrap)

    def shrink(self, value: W) -> Iterator[W]:
        return (self.wrap(smaller) for smaller in self.base.shrink(value.value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.base!r})"


class InvariantArbitrary(ModifierArbitrary[W]):
    """A modifier whose payload must satisfy a predicate.

    Generation produces satisfying payloads by construction or by
    retry-filtering; shrinking post-filters the base candidates. Either way
    no value that breaks the predicate ever escapes.
    """

    @abstractmethod
    def holds(self, value: Any) -> bool:
        """The invariant every payload must satisfy."""
        pass

    @abstractmethod
    def payloads(self) -> Gen[Any]:
        """Generator of payloads that satisfy the invariant."""
        pass

    def arbitrary(self) -> Gen[W]:
        return self.payloads().map(self.wrap)

    def shrink(self, value: W) -> Iterator[W]:
        return (
            self.wrap(smaller)
            for smaller in self.base.shrink(value.value)
            if self.holds(smaller)
        )

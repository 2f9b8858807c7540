"""Modifier Registry for managing available modifiers."""

from enum import Enum
from typing import Any, Type

from shrinkwrap.core.arbitrary import Arbitrary
from shrinkwrap.logging import get_logger
from shrinkwrap.modifiers.base import ModifierArbitrary

logger = get_logger(__name__)


class ModifierKind(str, Enum):
    """Names of the available modifiers."""

    OPAQUE = "opaque"
    NO_SHRINK = "no_shrink"
    SORTED = "sorted"
    NON_EMPTY = "non_empty"
    POSITIVE = "positive"
    NON_ZERO = "non_zero"
    NON_NEGATIVE = "non_negative"
    WIDE_NUM = "wide_num"
    NARROW_NUM = "narrow_num"
    DOUBLE_SHRINK = "double_shrink"
    RANKED_SHRINK = "ranked_shrink"
    STATEFUL = "stateful"
    ASCII = "ascii"
    LATIN1 = "latin1"
    UNICODE = "unicode"
    PRINTABLE = "printable"
    ALL_UNICODE = "all_unicode"
    ASCII_STRING = "ascii_string"
    LATIN1_STRING = "latin1_string"
    UNICODE_STRING = "unicode_string"
    PRINTABLE_STRING = "printable_string"


class ModifierRegistry:
    """Registry for modifier arbitraries.

    Maps each modifier kind to the arbitrary class implementing it and
    provides factory methods for building instances over a base.
    """

    def __init__(self):
        self._modifiers: dict[ModifierKind, Type[ModifierArbitrary[Any]]] = {}
        self._descriptions: dict[ModifierKind, str] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register the default modifiers."""
        from shrinkwrap.modifiers.basic import NoShrinkArbitrary, OpaqueArbitrary
        from shrinkwrap.modifiers.invariants import (
            NonEmptyArbitrary,
            NonNegativeArbitrary,
            NonZeroArbitrary,
            PositiveArbitrary,
            SortedArbitrary,
        )
        from shrinkwrap.modifiers.numeric import NarrowNumArbitrary, WideNumArbitrary
        from shrinkwrap.modifiers.ordering import DoubleShrinkArbitrary, RankedShrinkArbitrary
        from shrinkwrap.modifiers.stateful import StatefulArbitrary
        from shrinkwrap.modifiers.text import (
            AllUnicodeArbitrary,
            ASCIIArbitrary,
            ASCIIStringArbitrary,
            Latin1Arbitrary,
            Latin1StringArbitrary,
            PrintableArbitrary,
            PrintableStringArbitrary,
            UnicodeArbitrary,
            UnicodeStringArbitrary,
        )

        defaults = [
            (ModifierKind.OPAQUE, OpaqueArbitrary, "Generated and shrunk as usual, displayed as (*)"),
            (ModifierKind.NO_SHRINK, NoShrinkArbitrary, "Generated as usual, never shrunk"),
            (ModifierKind.SORTED, SortedArbitrary, "Lists in non-decreasing order"),
            (ModifierKind.NON_EMPTY, NonEmptyArbitrary, "Lists with at least one element"),
            (ModifierKind.POSITIVE, PositiveArbitrary, "Numbers > 0"),
            (ModifierKind.NON_ZERO, NonZeroArbitrary, "Numbers != 0"),
            (ModifierKind.NON_NEGATIVE, NonNegativeArbitrary, "Numbers >= 0, zero one time in six"),
            (ModifierKind.WIDE_NUM, WideNumArbitrary, "Integers from the full range of a bounded type"),
            (ModifierKind.NARROW_NUM, NarrowNumArbitrary, "Integers bounded by the ambient size"),
            (ModifierKind.DOUBLE_SHRINK, DoubleShrinkArbitrary, "Shrinks one or two steps at once"),
            (ModifierKind.RANKED_SHRINK, RankedShrinkArbitrary, "Shrinks near the last successful rank first"),
            (ModifierKind.STATEFUL, StatefulArbitrary, "Shrinks with a user-defined state machine"),
            (ModifierKind.ASCII, ASCIIArbitrary, "Characters in U+0000..U+007F"),
            (ModifierKind.LATIN1, Latin1Arbitrary, "Characters in U+0000..U+00FF"),
            (ModifierKind.UNICODE, UnicodeArbitrary, "Unicode scalar values (no surrogates)"),
            (ModifierKind.PRINTABLE, PrintableArbitrary, "Printable Unicode characters"),
            (ModifierKind.ALL_UNICODE, AllUnicodeArbitrary, "Any code point, lone surrogates included"),
            (ModifierKind.ASCII_STRING, ASCIIStringArbitrary, "Strings of ASCII characters"),
            (ModifierKind.LATIN1_STRING, Latin1StringArbitrary, "Strings of Latin-1 characters"),
            (ModifierKind.UNICODE_STRING, UnicodeStringArbitrary, "Strings of Unicode scalar values"),
            (ModifierKind.PRINTABLE_STRING, PrintableStringArbitrary, "Strings of printable characters"),
        ]
        for kind, arbitrary_class, description in defaults:
            self.register(kind, arbitrary_class, description)

    def register(
        self,
        kind: ModifierKind,
        arbitrary_class: Type[ModifierArbitrary[Any]],
        description: str = "",
    ) -> None:
        """Register a modifier arbitrary for a kind.

        Args:
            kind: The modifier kind
            arbitrary_class: The arbitrary class to register
            description: One-line description for listings
        """
        self._modifiers[kind] = arbitrary_class
        self._descriptions[kind] = description
        logger.debug("Registered modifier %s -> %s", kind.value, arbitrary_class.__name__)

    def get(self, kind: ModifierKind | str) -> Type[ModifierArbitrary[Any]] | None:
        """Get an arbitrary class by kind.

        Args:
            kind: The modifier kind (can be string or enum)

        Returns:
            The arbitrary class or None if not found
        """
        if isinstance(kind, str):
            try:
                kind = ModifierKind(kind)
            except ValueError:
                return None

        return self._modifiers.get(kind)

    def create(
        self,
        kind: ModifierKind | str,
        base: Arbitrary[Any] | str | type | None = None,
        **options: Any,
    ) -> ModifierArbitrary[Any] | None:
        """Create a modifier arbitrary instance.

        Args:
            kind: The modifier kind to create
            base: Base arbitrary, registered name or Python type; None uses
                the modifier's own default
            **options: Extra constructor arguments (e.g. machine for stateful)

        Returns:
            An arbitrary instance or None if kind not found
        """
        arbitrary_class = self.get(kind)
        if arbitrary_class is None:
            return None
        if base is not None:
            options["base"] = base
        return arbitrary_class(**options)

    def describe(self, kind: ModifierKind) -> str:
        return self._descriptions.get(kind, "")

    def list_kinds(self) -> list[ModifierKind]:
        """List all registered modifier kinds."""
        return list(self._modifiers.keys())

    def unregister(self, kind: ModifierKind) -> bool:
        """Remove a modifier from the registry.

        Returns:
            True if removed, False if not found
        """
        if kind in self._modifiers:
            del self._modifiers[kind]
            self._descriptions.pop(kind, None)
            return True
        return False

    def __contains__(self, kind: ModifierKind | str) -> bool:
        """Check if a modifier kind is registered."""
        return self.get(kind) is not None


_global_registry: ModifierRegistry | None = None


def get_global_modifier_registry() -> ModifierRegistry:
    """Get the global modifier registry singleton."""
    global _global_registry
    if _global_registry is None:
        _global_registry = ModifierRegistry()
    return _global_registry

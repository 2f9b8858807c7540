"""Modifiers that change presentation or switch shrinking off."""

from typing import Any, Iterator, TypeVar

from shrinkwrap.modifiers.base import Modifier, ModifierArbitrary

T = TypeVar("T")

OPAQUE_PLACEHOLDER = "(*)"


class Opaque(Modifier[T]):
    """A payload that is generated and shrunk as usual but never displayed.

    Useful for payloads without a meaningful representation, such as
    functions.
    """

    def __repr__(self) -> str:
        return OPAQUE_PLACEHOLDER

    def __str__(self) -> str:
        return OPAQUE_PLACEHOLDER


class NoShrink(Modifier[T]):
    """A payload that is generated as usual but never shrunk."""


class OpaqueArbitrary(ModifierArbitrary[Opaque[Any]]):
    modifier = Opaque


class NoShrinkArbitrary(ModifierArbitrary[NoShrink[Any]]):
    modifier = NoShrink

    def shrink(self, value: NoShrink[Any]) -> Iterator[NoShrink[Any]]:
        return iter(())

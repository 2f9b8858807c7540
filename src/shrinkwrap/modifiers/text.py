"""Character and string classes.

Each character class fixes a set of code points and a way of drawing from
it; each string class is a size-scaled sequence of one character class.
String shrinking reuses the generic list shrinker with the base character
shrink, and every candidate is re-checked against the class so shrinking
can never leave it.
"""

from typing import Any, ClassVar, Iterator

from pydantic import field_validator

from shrinkwrap.core.arbitrary import ASCII_MAX, LATIN1_MAX, char_gen, code_point
from shrinkwrap.core.gen import Gen, frequency, list_of, one_of
from shrinkwrap.modifiers.base import InvariantArbitrary, Modifier

MAX_CODE_POINT = 0x10FFFF
SURROGATE_MIN = 0xD800
SURROGATE_MAX = 0xDFFF


def is_surrogate(c: str) -> bool:
    return SURROGATE_MIN <= ord(c) <= SURROGATE_MAX


def is_printable(c: str) -> bool:
    return c.isprintable()


def ascii_gen() -> Gen[str]:
    return code_point(0, ASCII_MAX)


def unicode_gen() -> Gen[str]:
    """Unicode scalar values, biased 3:1 toward ASCII.

    The non-ASCII branch picks one of the two ranges either side of the
    surrogate block, then a code point within it.
    """
    scalar = one_of(
        code_point(0, SURROGATE_MIN - 1),
        code_point(SURROGATE_MAX + 1, MAX_CODE_POINT),
    )
    return frequency([(3, ascii_gen()), (1, scalar)])


def printable_gen() -> Gen[str]:
    return unicode_gen().such_that(is_printable)


def all_unicode_gen() -> Gen[str]:
    """Any code point, lone surrogates included, biased 3:1 toward ASCII."""
    return frequency([
        (3, ascii_gen()),
        (1, code_point(0, MAX_CODE_POINT)),
    ])


def _reject_base(arbitrary: Any, base: Any) -> None:
    if base is not None:
        raise ValueError(
            f"{type(arbitrary).__name__} has a fixed payload type and takes no base, got {base!r}"
        )


def _single_char(value: str, kind: str) -> str:
    if len(value) != 1:
        raise ValueError(f"{kind} requires a single character, got {value!r}")
    return value


class ASCII(Modifier[str]):
    """A character in [U+0000, U+007F]."""

    @field_validator("value")
    @classmethod
    def check_ascii(cls, value: str) -> str:
        if ord(_single_char(value, "ASCII")) > ASCII_MAX:
            raise ValueError(f"ASCII requires a code point <= 0x7F, got {value!r}")
        return value


class Latin1(Modifier[str]):
    """A character in [U+0000, U+00FF], generated like a plain character."""

    @field_validator("value")
    @classmethod
    def check_latin1(cls, value: str) -> str:
        if ord(_single_char(value, "Latin1")) > LATIN1_MAX:
            raise ValueError(f"Latin1 requires a code point <= 0xFF, got {value!r}")
        return value


class Unicode(Modifier[str]):
    """A Unicode scalar value (any code point but a surrogate)."""

    @field_validator("value")
    @classmethod
    def check_unicode(cls, value: str) -> str:
        if is_surrogate(_single_char(value, "Unicode")):
            raise ValueError(f"Unicode excludes surrogate code points, got {value!r}")
        return value


class Printable(Modifier[str]):
    """A printable Unicode character."""

    @field_validator("value")
    @classmethod
    def check_printable(cls, value: str) -> str:
        if not is_printable(_single_char(value, "Printable")):
            raise ValueError(f"Printable requires a printable character, got {value!r}")
        return value


class AllUnicode(Modifier[Any]):
    """Any code point, including lone surrogates."""

    # Declared as Any: pydantic's own str validation may reject lone
    # surrogates before the check below runs.
    value: Any

    @field_validator("value")
    @classmethod
    def check_all_unicode(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise ValueError(f"AllUnicode requires a str, got {type(value).__name__}")
        return _single_char(value, "AllUnicode")


class ASCIIString(Modifier[str]):
    @field_validator("value")
    @classmethod
    def check_ascii(cls, value: str) -> str:
        if not value.isascii():
            raise ValueError("ASCIIString requires ASCII characters only")
        return value


class Latin1String(Modifier[str]):
    @field_validator("value")
    @classmethod
    def check_latin1(cls, value: str) -> str:
        if any(ord(c) > LATIN1_MAX for c in value):
            raise ValueError("Latin1String requires Latin-1 characters only")
        return value


class UnicodeString(Modifier[str]):
    @field_validator("value")
    @classmethod
    def check_unicode(cls, value: str) -> str:
        if any(is_surrogate(c) for c in value):
            raise ValueError("UnicodeString excludes surrogate code points")
        return value


class PrintableString(Modifier[str]):
    @field_validator("value")
    @classmethod
    def check_printable(cls, value: str) -> str:
        if not value.isprintable():
            raise ValueError("PrintableString requires printable characters only")
        return value


class CharClassArbitrary(InvariantArbitrary[Any]):
    """A character class. Only classes with ``shrinks`` set shrink at all."""

    shrinks: ClassVar[bool] = False

    def __init__(self, base: Any = None):
        _reject_base(self, base)
        super().__init__("char")

    def shrink(self, value: Modifier[str]) -> Iterator[Modifier[str]]:
        if not self.shrinks:
            return iter(())
        return super().shrink(value)


class ASCIIArbitrary(CharClassArbitrary):
    modifier = ASCII

    def holds(self, value: str) -> bool:
        return ord(value) <= ASCII_MAX

    def payloads(self) -> Gen[str]:
        return ascii_gen()


class Latin1Arbitrary(CharClassArbitrary):
    modifier = Latin1
    shrinks = True

    def holds(self, value: str) -> bool:
        return ord(value) <= LATIN1_MAX

    def payloads(self) -> Gen[str]:
        return char_gen()


class UnicodeArbitrary(CharClassArbitrary):
    modifier = Unicode

    def holds(self, value: str) -> bool:
        return not is_surrogate(value)

    def payloads(self) -> Gen[str]:
        return unicode_gen()


class PrintableArbitrary(CharClassArbitrary):
    modifier = Printable

    def holds(self, value: str) -> bool:
        return is_printable(value)

    def payloads(self) -> Gen[str]:
        return printable_gen()


class AllUnicodeArbitrary(CharClassArbitrary):
    modifier = AllUnicode

    def holds(self, value: str) -> bool:
        return len(value) == 1

    def payloads(self) -> Gen[str]:
        return all_unicode_gen()


class StringClassArbitrary(InvariantArbitrary[Any]):
    """Strings over a character class, shrunk as lists of characters."""

    char_class: ClassVar[type[CharClassArbitrary]]

    def __init__(self, base: Any = None):
        _reject_base(self, base)
        super().__init__("text")
        self.chars = self.char_class()

    def holds(self, value: str) -> bool:
        return all(self.chars.holds(c) for c in value)

    def payloads(self) -> Gen[str]:
        return list_of(self.chars.payloads()).map("".join)


class ASCIIStringArbitrary(StringClassArbitrary):
    modifier = ASCIIString
    char_class = ASCIIArbitrary


class Latin1StringArbitrary(StringClassArbitrary):
    modifier = Latin1String
    char_class = Latin1Arbitrary


class UnicodeStringArbitrary(StringClassArbitrary):
    modifier = UnicodeString
    char_class = UnicodeArbitrary


class PrintableStringArbitrary(StringClassArbitrary):
    modifier = PrintableString
    char_class = PrintableArbitrary

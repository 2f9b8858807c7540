"""Modifiers module - The Wrapper Layer of the platform.

Modifiers wrap a payload and change how it is generated or shrunk:
- Invariants (sorted, non-empty, sign constraints)
- Numeric ranges (full-range vs. size-scaled integers)
- Shrink orderings (double-step, rank-tracking)
- User-defined stateful shrinking
- Character and string classes
"""

from shrinkwrap.modifiers.base import Modifier, ModifierArbitrary, InvariantArbitrary
from shrinkwrap.modifiers.basic import Opaque, NoShrink, OpaqueArbitrary, NoShrinkArbitrary
from shrinkwrap.modifiers.invariants import (
    Sorted,
    NonEmpty,
    Positive,
    NonZero,
    NonNegative,
    SortedArbitrary,
    NonEmptyArbitrary,
    PositiveArbitrary,
    NonZeroArbitrary,
    NonNegativeArbitrary,
)
from shrinkwrap.modifiers.numeric import WideNum, NarrowNum, WideNumArbitrary, NarrowNumArbitrary
from shrinkwrap.modifiers.ordering import (
    DoubleShrink,
    RankedShrink,
    DoubleShrinkArbitrary,
    RankedShrinkArbitrary,
)
from shrinkwrap.modifiers.stateful import (
    ShrinkState,
    FunctionShrinkState,
    Stateful,
    StatefulArbitrary,
)
from shrinkwrap.modifiers.text import (
    ASCII,
    Latin1,
    Unicode,
    Printable,
    AllUnicode,
    ASCIIString,
    Latin1String,
    UnicodeString,
    PrintableString,
    ASCIIArbitrary,
    Latin1Arbitrary,
    UnicodeArbitrary,
    PrintableArbitrary,
    AllUnicodeArbitrary,
    ASCIIStringArbitrary,
    Latin1StringArbitrary,
    UnicodeStringArbitrary,
    PrintableStringArbitrary,
)
from shrinkwrap.modifiers.registry import (
    ModifierKind,
    ModifierRegistry,
    get_global_modifier_registry,
)

__all__ = [
    "Modifier",
    "ModifierArbitrary",
    "InvariantArbitrary",
    "Opaque",
    "NoShrink",
    "OpaqueArbitrary",
    "NoShrinkArbitrary",
    "Sorted",
    "NonEmpty",
    "Positive",
    "NonZero",
    "NonNegative",
    "SortedArbitrary",
    "NonEmptyArbitrary",
    "PositiveArbitrary",
    "NonZeroArbitrary",
    "NonNegativeArbitrary",
    "WideNum",
    "NarrowNum",
    "WideNumArbitrary",
    "NarrowNumArbitrary",
    "DoubleShrink",
    "RankedShrink",
    "DoubleShrinkArbitrary",
    "RankedShrinkArbitrary",
    "ShrinkState",
    "FunctionShrinkState",
    "Stateful",
    "StatefulArbitrary",
    "ASCII",
    "Latin1",
    "Unicode",
    "Printable",
    "AllUnicode",
    "ASCIIString",
    "Latin1String",
    "UnicodeString",
    "PrintableString",
    "ASCIIArbitrary",
    "Latin1Arbitrary",
    "UnicodeArbitrary",
    "PrintableArbitrary",
    "AllUnicodeArbitrary",
    "ASCIIStringArbitrary",
    "Latin1StringArbitrary",
    "UnicodeStringArbitrary",
    "PrintableStringArbitrary",
    "ModifierKind",
    "ModifierRegistry",
    "get_global_modifier_registry",
]

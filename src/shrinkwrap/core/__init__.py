"""Core module - generators, base arbitraries and shrinkers.

Provides the collaborators that modifiers are layered on:
- Gen and its combinators (choose, frequency, such_that, list_of, ...)
- Integral types with fixed representable ranges
- Base arbitraries for numbers, booleans, characters, text and lists
- A registry resolving names and Python types to base arbitraries
"""

from shrinkwrap.core.gen import (
    Gen,
    choose,
    constant,
    elements,
    frequency,
    list_of,
    one_of,
    sized,
)
from shrinkwrap.core.integral import IntegralType, shrink_integral
from shrinkwrap.core.arbitrary import (
    Arbitrary,
    NumericArbitrary,
    IntegralArbitrary,
    FloatArbitrary,
    BoolArbitrary,
    CharArbitrary,
    TextArbitrary,
    ListArbitrary,
    shrink_list,
)
from shrinkwrap.core.registry import ArbitraryRegistry, get_global_arbitrary_registry

__all__ = [
    "Gen",
    "choose",
    "constant",
    "elements",
    "frequency",
    "list_of",
    "one_of",
    "sized",
    "IntegralType",
    "shrink_integral",
    "Arbitrary",
    "NumericArbitrary",
    "IntegralArbitrary",
    "FloatArbitrary",
    "BoolArbitrary",
    "CharArbitrary",
    "TextArbitrary",
    "ListArbitrary",
    "shrink_list",
    "ArbitraryRegistry",
    "get_global_arbitrary_registry",
]

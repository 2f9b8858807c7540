"""
shrinkwrap - Test-data modifiers for property-based testing.

Modifiers wrap generated values to enforce invariants (sorted, non-empty,
positive, ...), reshape distributions, and change how counterexamples are
shrunk, while keeping generation and shrinking consistent with each other.
"""

__version__ = "0.1.0"

from shrinkwrap.core.gen import Gen
from shrinkwrap.core.arbitrary import Arbitrary
from shrinkwrap.modifiers.base import Modifier
from shrinkwrap.modifiers.registry import ModifierKind, ModifierRegistry
from shrinkwrap.settings.base import GenerationSettings

__all__ = [
    "Gen",
    "Arbitrary",
    "Modifier",
    "ModifierKind",
    "ModifierRegistry",
    "GenerationSettings",
]

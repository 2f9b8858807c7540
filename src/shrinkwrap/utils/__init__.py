"""Utility functions for shrinkwrap."""

from shrinkwrap.utils.helpers import (
    generate_seed,
    interleave,
    take,
)

__all__ = [
    "generate_seed",
    "interleave",
    "take",
]

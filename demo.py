#!/usr/bin/env python3
"""
Demo script showing basic usage of shrinkwrap.

Run this script after installing the package:
    pip install -e .
    python demo.py
"""

from shrinkwrap.modifiers import (
    FunctionShrinkState,
    NonNegativeArbitrary,
    PositiveArbitrary,
    RankedShrink,
    RankedShrinkArbitrary,
    SortedArbitrary,
    StatefulArbitrary,
    UnicodeStringArbitrary,
    WideNumArbitrary,
)
from shrinkwrap.settings.base import SettingsBuilder
from shrinkwrap.utils.helpers import take


def demo_invariants(settings):
    """Demonstrate invariant modifiers."""
    print("=" * 60)
    print("1. INVARIANT MODIFIERS")
    print("=" * 60)

    for arbitrary in (PositiveArbitrary(int), NonNegativeArbitrary("int8"), SortedArbitrary(int)):
        values = arbitrary.sample(count=5, settings=settings)
        print(f"{arbitrary!r}:")
        for value in values:
            print(f"  {value!r}")
    print()


def demo_numeric_ranges(settings):
    """Demonstrate full-range integers."""
    print("=" * 60)
    print("2. FULL-RANGE INTEGERS")
    print("=" * 60)

    for value in WideNumArbitrary("int16").sample(count=5, settings=settings):
        print(f"  {value!r}")
    print()


def demo_shrink_orders():
    """Demonstrate rank-tracking shrink order."""
    print("=" * 60)
    print("3. SHRINK ORDERS")
    print("=" * 60)

    arbitrary = RankedShrinkArbitrary(int)
    for rank in (0, 5):
        candidates = take(arbitrary.shrink(RankedShrink(1000, rank=rank)), 6)
        print(f"rank={rank}: {[(c.value, c.rank) for c in candidates]}")
    print()


def demo_stateful_shrinking():
    """Demonstrate a user-defined shrink state machine."""
    print("=" * 60)
    print("4. STATEFUL SHRINKING")
    print("=" * 60)

    # Subtract a shrinking step size; stop once the step reaches zero.
    machine = FunctionShrinkState(
        init=lambda x: max(abs(x) // 2, 1),
        step=lambda x, step: [(x - step, step // 2)] if step else [],
    )
    arbitrary = StatefulArbitrary(machine, base=int)
    value = arbitrary.wrap(40)
    while True:
        print(f"  {value.value} (state={value.state})")
        candidates = list(arbitrary.shrink(value))
        if not candidates:
            break
        value = candidates[0]
    print()


def demo_strings(settings):
    """Demonstrate string classes."""
    print("=" * 60)
    print("5. STRING CLASSES")
    print("=" * 60)

    for value in UnicodeStringArbitrary().sample(count=3, settings=settings):
        print(f"  {value!r}")
    print()


def main():
    """Run all demos."""
    print()
    print("SHRINKWRAP DEMO")
    print("=" * 60)
    print()

    settings = SettingsBuilder().seed(42).size(20).build()

    demo_invariants(settings)
    demo_numeric_ranges(settings)
    demo_shrink_orders()
    demo_stateful_shrinking()
    demo_strings(settings)

    print("=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print()
    print("To use the CLI, install the package and run:")
    print("  pip install -e .")
    print("  shrinkwrap --help")
    print()


if __name__ == "__main__":
    main()

"""Tests for stateful shrinking."""

import pytest

from shrinkwrap.modifiers.stateful import (
    FunctionShrinkState,
    ShrinkState,
    Stateful,
    StatefulArbitrary,
)


class HalvingSteps(ShrinkState):
    """Try subtracting step, step/2, ..., 1; the next state is the step used."""

    def init(self, value):
        return 64

    def step(self, value, state):
        k = state
        while k >= 1:
            yield value - k, k
            k //= 2


def minimize(arbitrary, wrapped, fails):
    """Greedy shrink loop: take the first failing candidate until none is left."""
    while True:
        for candidate in arbitrary.shrink(wrapped):
            if fails(candidate.value):
                wrapped = candidate
                break
        else:
            return wrapped


@pytest.fixture
def recording_machine():
    """A machine with fixed candidates that records the states it sees."""
    seen = []

    def step(value, state):
        seen.append(state)
        return [(1, "s1"), (value + 1, "s2")]

    machine = FunctionShrinkState(init=lambda x: ("init", x), step=step)
    machine.seen = seen
    return machine


class TestStateful:
    """Tests for StatefulArbitrary."""

    def test_generation_attaches_initial_state(self, recording_machine):
        wrapped = StatefulArbitrary(recording_machine, int).arbitrary().generate(size=10, seed=3)

        assert wrapped.state == ("init", wrapped.value)

    def test_shrink_is_exactly_the_step(self, recording_machine):
        arbitrary = StatefulArbitrary(recording_machine, int)
        candidates = list(arbitrary.shrink(Stateful(7, "current")))

        # No filtering: a candidate larger than the input is passed through.
        assert [(c.value, c.state) for c in candidates] == [(1, "s1"), (8, "s2")]
        assert recording_machine.seen == ["current"]

    def test_empty_step_is_terminal(self):
        machine = FunctionShrinkState(init=lambda x: None, step=lambda x, s: [])
        arbitrary = StatefulArbitrary(machine, int)

        assert list(arbitrary.shrink(Stateful(1000))) == []

    def test_state_is_opaque(self):
        token = object()
        machine = FunctionShrinkState(init=lambda x: token, step=lambda x, s: [(x, s)])
        arbitrary = StatefulArbitrary(machine, int)
        (candidate,) = arbitrary.shrink(arbitrary.wrap(3))

        assert candidate.state is token

    def test_state_threads_to_minimum(self):
        arbitrary = StatefulArbitrary(HalvingSteps(), int)
        result = minimize(arbitrary, arbitrary.wrap(100), lambda x: x >= 13)

        assert result.value == 13
        assert result.state == 1

    def test_state_is_bookkeeping(self):
        assert Stateful(5, "a") == Stateful(5, "b")
        assert hash(Stateful(5, "a")) == hash(Stateful(5, "b"))
        assert repr(Stateful(5, "a")) == "Stateful(value=5)"

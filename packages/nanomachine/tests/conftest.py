"""Shared fixtures: the five-state example machine with recording callbacks."""
import pytest

from nanomachine import Machine


def build(calls: list) -> Machine:
    """Return a machine starting at "A" whose callbacks append to *calls*."""

    def configure(m: Machine) -> None:
        m.transition("A", ["B", "C", "E", "X"])
        m.transition("B", ["A"])
        m.transition("C", ["A", "D"])
        m.transition("D", [])
        m.transition("E", ["B", "C"])

        m.on_transition(lambda *a, **kw: calls.append(("to", a, kw)), to="B")
        m.on_transition(lambda *a, **kw: calls.append(("from", a, kw)), from_="A")
        m.on_transition(lambda *a, **kw: calls.append(("from_to", a, kw)), from_="A", to="B")
        m.on_transition(lambda *a, **kw: calls.append(("from_to_e", a, kw)), from_="E", to="C")
        m.on_transition(lambda *a, **kw: calls.append(("any", a, kw)))

    return Machine("A", configure)


@pytest.fixture
def calls():
    return []


@pytest.fixture
def fsm(calls):
    return build(calls)

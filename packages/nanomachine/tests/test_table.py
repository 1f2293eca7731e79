"""Tests for TransitionTable."""
import enum

import pytest

from nanomachine import Machine, TransitionTable


class Color(enum.Enum):
    GREEN = "green"


def test_declare_and_get():
    table = TransitionTable()
    table.declare("A", ["B", "C"])
    assert table.get("A") == frozenset({"B", "C"})


def test_declare_returns_normalized_set():
    table = TransitionTable()
    assert table.declare("A", ["B", "B"]) == frozenset({"B"})


def test_declare_replaces():
    table = TransitionTable()
    table.declare("A", ["B", "C"])
    table.declare("A", ["D"])
    assert table.get("A") == frozenset({"D"})


def test_get_undeclared_is_empty_and_not_stored():
    table = TransitionTable()
    assert table.get("missing") == frozenset()
    assert "missing" not in table
    assert len(table) == 0


def test_allows():
    table = TransitionTable()
    table.declare("A", ["B"])
    assert table.allows("A", "B")
    assert not table.allows("A", "C")
    assert not table.allows("B", "A")


def test_empty_declaration_is_kept():
    """A terminal state declared with no targets still shows up as a source."""
    table = TransitionTable()
    table.declare("done", [])
    assert "done" in table
    assert table.get("done") == frozenset()


def test_as_dict_is_a_copy():
    table = TransitionTable()
    table.declare("A", ["B"])
    copy = table.as_dict()
    copy["A"] = frozenset()
    copy["Z"] = frozenset({"A"})
    assert table.get("A") == frozenset({"B"})
    assert table.sources() == ["A"]


def test_clear():
    table = TransitionTable()
    table.declare("A", ["B"])
    table.clear()
    assert len(table) == 0


@pytest.mark.parametrize("targets", ["published", b"published", Color.GREEN])
def test_declare_rejects_single_state_as_targets(targets):
    """A lone state is not split into characters; it must be wrapped in a collection."""
    table = TransitionTable()
    with pytest.raises(TypeError, match="collection of states"):
        table.declare("unpublished", targets)
    assert "unpublished" not in table


def test_machine_transition_rejects_bare_string():
    machine = Machine("unpublished")
    with pytest.raises(TypeError, match="collection of states"):
        machine.transition("unpublished", "published")
    assert machine.transitions == {}

"""TransitionTable - permitted destinations per source state."""

from __future__ import annotations

from typing import Any, Iterable

from nanomachine.states import check_targets, to_state
from nanomachine.types import State

_EMPTY: frozenset[State] = frozenset()


class TransitionTable:
    """Maps a source state to the set of states reachable from it.

    Sources that were never declared have no outbound transitions. Lookups
    never insert keys.
    """

    def __init__(self) -> None:
        self._table: dict[State, frozenset[State]] = {}

    def declare(self, source: Any, targets: Iterable[Any]) -> frozenset[State]:
        """Replace the destinations of *source*. Returns the stored set."""
        check_targets(targets)
        destinations = frozenset(to_state(t) for t in targets)
        self._table[to_state(source)] = destinations
        return destinations

    def get(self, source: State) -> frozenset[State]:
        return self._table.get(source, _EMPTY)

    def allows(self, source: State, target: State) -> bool:
        return target in self.get(source)

    def sources(self) -> list[State]:
        return list(self._table)

    def as_dict(self) -> dict[State, frozenset[State]]:
        """Return a copy of the table."""
        return dict(self._table)

    def clear(self) -> None:
        self._table.clear()

    def __contains__(self, source: object) -> bool:
        return source in self._table

    def __len__(self) -> int:
        return len(self._table)

"""MachineDefinition - declarative machine configuration."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping

from nanomachine.machine import Machine
from nanomachine.states import check_targets


@dataclass(frozen=True)
class MachineDefinition:
    """Immutable description of a machine: its initial state and table.

    Attributes:
        initial: State every built machine starts in.
        transitions: Source state mapped to the states reachable from it,
            stored as a read-only mapping of tuples.
    """

    initial: Any
    transitions: Mapping[Any, Iterable[Any]] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        frozen = {}
        for source, targets in self.transitions.items():
            check_targets(targets)
            frozen[source] = tuple(targets)
        object.__setattr__(self, "transitions", MappingProxyType(frozen))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MachineDefinition:
        """Build a definition from ``{"initial": ..., "transitions": {...}}``."""
        if "initial" not in data:
            raise ValueError("Machine definition requires an 'initial' state")
        return cls(initial=data["initial"], transitions=data.get("transitions") or {})

    def build(self, configure: Callable[[Machine], Any] | None = None) -> Machine:
        """Return a new machine with the table declared, then run *configure* on it."""

        def _setup(machine: Machine) -> None:
            for source, targets in self.transitions.items():
                machine.transition(source, targets)
            if configure is not None:
                configure(machine)

        return Machine(self.initial, _setup)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible dict of the normalized definition."""
        machine = self.build()
        return {
            "initial": machine.state,
            "transitions": {
                source: sorted(targets)
                for source, targets in machine.transitions.items()
            },
        }

"""Shared types, sentinels, and errors for nanomachine."""

from __future__ import annotations

from typing import Any, Callable, NamedTuple

State = str


class _Any:
    """Wildcard selector component matching every state."""

    def __repr__(self) -> str:
        return "ANY"


class _Rejected:
    """Returned by ``Machine.transition_to`` when the move is not allowed."""

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "REJECTED"


ANY = _Any()
REJECTED = _Rejected()


class Transition(NamedTuple):
    from_state: State
    to_state: State


Callback = Callable[..., Any]


class NanomachineError(Exception):
    """Base class for errors raised by nanomachine."""


class InvalidStateError(NanomachineError, ValueError):
    """Raised when a value cannot be accepted as a state."""


class InvalidTransitionError(NanomachineError):
    """Raised when the machine cannot move from its state to a target."""

    def __init__(self, state: State, target: State) -> None:
        self.state = state
        self.target = target
        super().__init__(f"cannot transition from {state!r} to {target!r}")


class SnapshotError(NanomachineError):
    """Raised on restore failures (version mismatch, malformed data)."""

"""Machine - current state, transition table, and callback dispatch."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Mapping

from nanomachine.callbacks import CallbackRegistry
from nanomachine.states import to_state
from nanomachine.table import TransitionTable
from nanomachine.types import (
    ANY,
    REJECTED,
    Callback,
    InvalidStateError,
    InvalidTransitionError,
    SnapshotError,
    State,
    Transition,
    _Any,
    _Rejected,
)

logger = logging.getLogger(__name__)

_SNAPSHOT_VERSION = 1

_SELECTOR_KEYS = {"from_": "from_", "from": "from_", "to": "to"}


class Machine:
    """A state machine that moves between states rather than on events.

    Example::

        def configure(fsm):
            fsm.transition("unpublished", ["published", "removed"])
            fsm.transition("published", ["unpublished", "removed"])

        machine = Machine("unpublished", configure)
        machine.on_transition(lambda t: print(t.to_state), to="published")

        if machine.transition_to("published") is REJECTED:
            print(f"Publish failed, still {machine.state}")

    Not safe for concurrent use; hosts that share a machine across threads
    must serialize calls themselves.
    """

    def __init__(
        self,
        initial_state: Any,
        configure: Callable[[Machine], Any] | None = None,
    ) -> None:
        try:
            self._state: State = to_state(initial_state)
        except InvalidStateError as exc:
            raise InvalidStateError(f"invalid initial state: {exc}") from None
        self._table = TransitionTable()
        self._callbacks = CallbackRegistry()
        if configure is not None:
            configure(self)

    @property
    def state(self) -> State:
        return self._state

    @property
    def transitions(self) -> dict[State, frozenset[State]]:
        """Mapping of source state to permitted targets (a copy)."""
        return self._table.as_dict()

    def transition(self, from_state: Any, to_states: Iterable[Any]) -> None:
        """Declare the states reachable from *from_state*, replacing any prior set.

        Targets need no declaration of their own; an undeclared state has no
        way out.
        """
        self._table.declare(from_state, to_states)

    def on_transition(self, callback: Callback | None = None, **selector: Any) -> None:
        """Register *callback* to run after a successful transition.

        ``from_`` (or ``from``) and ``to`` restrict the callback to transitions
        leaving or entering a given state; omitted sides match any state.
        The callback is called as ``callback(Transition(prev, target), *args,
        **kwargs)`` with whatever extra arguments ``transition_to`` received.

        Raises ``TypeError`` if *callback* is missing or an unknown selector
        key is given.
        """
        if not callable(callback):
            raise TypeError("no callback given")
        from_state, to_state_ = self._selector(selector)
        self._callbacks.add(callback, from_state, to_state_)

    def off_transition(self, callback: Callback, **selector: Any) -> None:
        """Unregister *callback* from the given selector. No-op if absent."""
        from_state, to_state_ = self._selector(selector)
        self._callbacks.remove(callback, from_state, to_state_)

    def callbacks(self, **selector: Any) -> list[Callback]:
        """Return a copy of the callbacks registered under exactly *selector*."""
        from_state, to_state_ = self._selector(selector)
        return self._callbacks.bucket(from_state, to_state_)

    def transition_to(self, target: Any, *args: Any, **kwargs: Any) -> State | _Rejected:
        """Move to *target* if the table allows it.

        Returns the previous state, or ``REJECTED`` (falsy) without touching
        state or callbacks. Matching callbacks run after the state changes,
        most generic selector first, each bucket in registration order.
        Extra positional and keyword arguments are passed through untouched.
        """
        target = to_state(target)
        if not self._table.allows(self._state, target):
            logger.debug("rejected transition %r -> %r", self._state, target)
            return REJECTED

        previous, self._state = self._state, target
        logger.debug("transition %r -> %r", previous, target)
        transition = Transition(previous, target)
        for callback in list(self._callbacks.matching(previous, target)):
            callback(transition, *args, **kwargs)
        return previous

    def transition_to_or_raise(self, target: Any, *args: Any, **kwargs: Any) -> State:
        """Same as ``transition_to`` but raises ``InvalidTransitionError`` on rejection."""
        current = self._state
        previous = self.transition_to(target, *args, **kwargs)
        if previous is REJECTED:
            raise InvalidTransitionError(current, to_state(target))
        return previous

    def can_transition_to(self, target: Any) -> bool:
        return self._table.allows(self._state, to_state(target))

    def snapshot(self) -> dict[str, Any]:
        """Return a JSON-compatible dict of the current state and table.

        Callbacks are not included.
        """
        return {
            "version": _SNAPSHOT_VERSION,
            "state": self._state,
            "transitions": {
                source: sorted(targets)
                for source, targets in self._table.as_dict().items()
            },
        }

    def restore(self, data: Mapping[str, Any]) -> None:
        """Load state and table from a ``snapshot()`` dict without firing callbacks."""
        if not isinstance(data, Mapping):
            raise SnapshotError(f"Snapshot must be a mapping, got {type(data).__name__}")
        version = data.get("version")
        if version != _SNAPSHOT_VERSION:
            raise SnapshotError(
                f"Unsupported snapshot version {version!r}, expected {_SNAPSHOT_VERSION}"
            )
        table = TransitionTable()
        try:
            state = to_state(data["state"])
            transitions = data["transitions"]
            if not isinstance(transitions, Mapping):
                raise SnapshotError(
                    f"Snapshot transitions must be a mapping, got {type(transitions).__name__}"
                )
            for source, targets in transitions.items():
                table.declare(source, targets)
        except KeyError as exc:
            raise SnapshotError(f"Snapshot is missing {exc.args[0]!r}") from None
        except InvalidStateError as exc:
            raise SnapshotError(f"Snapshot has an invalid state: {exc}") from None
        except TypeError as exc:
            raise SnapshotError(f"Snapshot has malformed transitions: {exc}") from None

        self._table = table
        self._state = state

    def __repr__(self) -> str:
        return f"Machine(state={self._state!r})"

    @staticmethod
    def _selector(selector: dict[str, Any]) -> tuple[State | _Any, State | _Any]:
        unknown = [key for key in selector if key not in _SELECTOR_KEYS]
        if unknown:
            raise TypeError(f"unknown options: {', '.join(unknown)}")
        if "from" in selector and "from_" in selector:
            raise TypeError("conflicting options: from, from_")
        sides: dict[str, State | _Any] = {"from_": ANY, "to": ANY}
        for key, value in selector.items():
            sides[_SELECTOR_KEYS[key]] = ANY if value is None or value is ANY else to_state(value)
        return sides["from_"], sides["to"]

"""CallbackRegistry - transition callbacks bucketed by (from, to) selector."""

from __future__ import annotations

from typing import Iterator, Union

from nanomachine.types import ANY, Callback, State, _Any

Selector = tuple[Union[State, _Any], Union[State, _Any]]


class CallbackRegistry:
    """Ordered callback buckets keyed by selector.

    A selector side is either a concrete state or ``ANY``. The four buckets
    that can match one transition are kept apart and consulted from the
    most generic to the most specific.
    """

    def __init__(self) -> None:
        self._buckets: dict[Selector, list[Callback]] = {}

    def add(
        self,
        callback: Callback,
        from_state: State | _Any = ANY,
        to_state: State | _Any = ANY,
    ) -> None:
        self._buckets.setdefault((from_state, to_state), []).append(callback)

    def remove(
        self,
        callback: Callback,
        from_state: State | _Any = ANY,
        to_state: State | _Any = ANY,
    ) -> None:
        """Remove the first registration of *callback* under the selector.

        No-op if it was never registered there.
        """
        callbacks = self._buckets.get((from_state, to_state))
        if callbacks is None:
            return
        try:
            callbacks.remove(callback)
        except ValueError:
            pass

    def bucket(
        self,
        from_state: State | _Any = ANY,
        to_state: State | _Any = ANY,
    ) -> list[Callback]:
        """Return a copy of one bucket, empty if nothing is registered."""
        return list(self._buckets.get((from_state, to_state), ()))

    def matching(self, previous: State, target: State) -> Iterator[Callback]:
        """Yield the callbacks for ``previous -> target`` in invocation order."""
        for selector in (
            (ANY, ANY),
            (previous, ANY),
            (ANY, target),
            (previous, target),
        ):
            yield from self._buckets.get(selector, ())

    def clear(self) -> None:
        self._buckets.clear()

    def __len__(self) -> int:
        return sum(len(callbacks) for callbacks in self._buckets.values())

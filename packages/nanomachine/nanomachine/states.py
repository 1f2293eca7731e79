"""State normalization."""

from __future__ import annotations

import enum
from typing import Any

from nanomachine.types import InvalidStateError, State


def to_state(value: Any) -> State:
    """Return the canonical state for *value*.

    Accepts ``str`` and ``enum.Enum`` members. A str-valued member becomes
    its value, any other member its name. Raises ``InvalidStateError`` for
    ``None`` and every other type.
    """
    if value is None:
        raise InvalidStateError("state cannot be None")
    if isinstance(value, enum.Enum):
        if isinstance(value.value, str):
            return value.value
        return value.name
    if isinstance(value, str):
        return str(value)
    raise InvalidStateError(
        f"state must be a str or Enum member, got {type(value).__name__}"
    )


def check_targets(targets: Any) -> None:
    """Raise ``TypeError`` if *targets* is one state rather than a collection."""
    if isinstance(targets, (str, bytes, enum.Enum)):
        raise TypeError(
            f"targets must be a collection of states, got {type(targets).__name__} {targets!r}"
        )

"""nanomachine - A minimal state machine that transitions between states."""

import logging

from nanomachine.callbacks import CallbackRegistry
from nanomachine.config import MachineDefinition
from nanomachine.machine import Machine
from nanomachine.states import to_state
from nanomachine.table import TransitionTable
from nanomachine.types import (
    ANY,
    REJECTED,
    Callback,
    InvalidStateError,
    InvalidTransitionError,
    NanomachineError,
    SnapshotError,
    State,
    Transition,
)

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ANY",
    "REJECTED",
    "Callback",
    "CallbackRegistry",
    "InvalidStateError",
    "InvalidTransitionError",
    "Machine",
    "MachineDefinition",
    "NanomachineError",
    "SnapshotError",
    "State",
    "Transition",
    "TransitionTable",
    "to_state",
]

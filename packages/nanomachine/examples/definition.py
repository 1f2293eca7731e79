"""Traffic light built from a JSON-compatible definition.

Demonstrates:
- MachineDefinition.from_dict and build
- Strict transitions with transition_to_or_raise
- Snapshot and restore of the current state

Run: python -m examples.definition
"""

import json

from nanomachine import InvalidTransitionError, MachineDefinition

LIGHT = {
    "initial": "initial",
    "transitions": {
        "initial": ["green", "orange"],
        "green": ["orange", "error"],
        "orange": ["green", "error"],
    },
}


def main() -> None:
    print("=== Traffic light ===\n")

    definition = MachineDefinition.from_dict(LIGHT)
    machine = definition.build(
        lambda fsm: fsm.on_transition(
            lambda t, message="": print(f"  error after {t.from_state}: {message}"),
            to="error",
        )
    )

    for target in ("green", "orange", "green"):
        previous = machine.transition_to_or_raise(target)
        print(f"  {previous} -> {machine.state}")

    saved = json.dumps(machine.snapshot())

    machine.transition_to("error", message="bulb burnt out")
    try:
        machine.transition_to_or_raise("green")
    except InvalidTransitionError as exc:
        print(f"  {exc}")

    machine.restore(json.loads(saved))
    print(f"\nRestored to {machine.state}.")


if __name__ == "__main__":
    main()

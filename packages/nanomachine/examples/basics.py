"""Publishing workflow -- the smallest useful nanomachine program.

Demonstrates:
- Declaring transitions per source state inside the configure callable
- A catch-all callback and a callback for one target state
- Passing extra arguments through transition_to to callbacks
- Checking a rejected transition with REJECTED

Run: python -m examples.basics
"""

from nanomachine import REJECTED, Machine, Transition


def configure(fsm: Machine) -> None:
    fsm.transition("published", ["unpublished", "processing", "removed"])
    fsm.transition("unpublished", ["published", "processing", "removed"])
    fsm.transition("processing", ["published", "unpublished"])
    fsm.transition("removed", [])  # explicit, but not required

    def log_any(transition: Transition, *args: object) -> None:
        print(f"  {transition.from_state} -> {transition.to_state}")

    def on_removed(transition: Transition, reason: str = "") -> None:
        print(f"  removed from {transition.from_state}: {reason}")

    fsm.on_transition(log_any)
    fsm.on_transition(on_removed, to="removed")


def main() -> None:
    print("=== Publishing ===\n")

    machine = Machine("unpublished", configure)

    if machine.transition_to("published"):
        print("Publish success!")

    machine.transition_to("removed", "spam")

    if machine.transition_to("published") is REJECTED:
        print(f"Publish failure! We're in {machine.state}.")


if __name__ == "__main__":
    main()

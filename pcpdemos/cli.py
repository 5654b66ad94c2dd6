"""Interactive menu that runs one of the demos by name."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from typing import Optional

from pcpdemos import advent, bank, language, routines, stacks, weather

DEMOS: dict[str, Callable[[], object]] = {
    "language": language.demo,
    "advent": advent.demo,
    "stacks": stacks.demo,
    "routines": routines.demo,
    "bank": bank.demo,
    "weather": weather.demo,
}


def help_text() -> str:
    """Return the list of available demos."""
    lines = ["Available demos:"]
    lines.extend(f"- {name}" for name in DEMOS)
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Prompt for demo names on standard input until ``exit`` or end of input."""
    parser = argparse.ArgumentParser(
        prog="pcpdemos",
        description="Run the demos interactively.",
    )
    parser.parse_args(argv)

    print("Hello! What program do you want to run?")
    print(help_text())

    while True:
        print("Enter demo name (or 'help' or 'exit'): ", end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            print()
            print("Goodbye!")
            return 0

        choice = line.lower().strip()

        if choice == "exit":
            print("Goodbye!")
            return 0
        if choice == "help":
            print(help_text())
            continue

        demo = DEMOS.get(choice)
        if demo is None:
            print("Unknown demo. Type 'help' to see available demos.")
            continue

        print(f"Running demo: {choice}\n")
        demo()
        print("\nDone.")


if __name__ == "__main__":
    sys.exit(main())
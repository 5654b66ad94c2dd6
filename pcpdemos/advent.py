"""Population growth of lanternfish timers, counted by timer value."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

TIMER_STATES = 9
RESET_TIMER = 6

DEMO_START = (3, 4, 3, 1, 2)
DEMO_STEPS = 30


def advent(start: Iterable[int], steps: int) -> int:
    """Return the population size after ``steps`` days.

    Each value in ``start`` is a timer between 0 and 8; values outside
    that range are ignored. A timer at 0 resets to 6 and spawns a new
    one at 8.
    """
    counts: deque[int] = deque([0] * TIMER_STATES)
    for value in start:
        if 0 <= value < TIMER_STATES:
            counts[value] += 1

    for _ in range(steps):
        counts.rotate(-1)
        counts[RESET_TIMER] += counts[TIMER_STATES - 1]

    return sum(counts)


def demo() -> int:
    """Compute, print and return the population size for the sample start."""
    size = advent(DEMO_START, DEMO_STEPS)
    print(f"The slice is {size} big")
    return size
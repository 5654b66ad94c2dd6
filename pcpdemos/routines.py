"""Two concurrent blocking tasks whose results are awaited together."""

from __future__ import annotations

import queue
import threading
import time

TICK_MS = 500
LONG_TASK_MS = 3000
LONGER_TASK_MS = 6000
FINAL_WAIT_MS = 2000


def do_blocking_wait(milliseconds: int) -> None:
    """Block the calling thread for ``milliseconds``."""
    time.sleep(milliseconds / 1000)


def long_lasting_task(results: queue.Queue[int]) -> None:
    """Wait three seconds, then report the wait on ``results``."""
    do_blocking_wait(LONG_TASK_MS)
    print(LONG_TASK_MS, end="", flush=True)
    results.put(LONG_TASK_MS)


def even_longer_lasting_task(results: queue.Queue[int]) -> None:
    """Wait six seconds, then report the wait on ``results``."""
    do_blocking_wait(LONGER_TASK_MS)
    print(LONGER_TASK_MS, end="", flush=True)
    results.put(LONGER_TASK_MS)


def last_task() -> str:
    """Run both tasks concurrently, wait for both, then wait once more."""
    results: queue.Queue[int] = queue.Queue()
    for task in (long_lasting_task, even_longer_lasting_task):
        threading.Thread(target=task, args=(results,), daemon=True).start()

    total = results.get() + results.get()

    do_blocking_wait(FINAL_WAIT_MS)
    return f"Was waiting for {total + FINAL_WAIT_MS} ms"


def _tick(stop: threading.Event) -> None:
    while not stop.is_set():
        print(".", end="", flush=True)
        do_blocking_wait(TICK_MS)


def demo() -> None:
    """Print progress dots while the concurrent tasks run."""
    print("->Now waiting for things to happen")

    stop = threading.Event()
    threading.Thread(target=_tick, args=(stop,), daemon=True).start()

    print(last_task())

    stop.set()

    print("-> Done.", end="", flush=True)
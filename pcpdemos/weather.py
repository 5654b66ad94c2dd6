"""Query several unreliable weather services and take the first answer."""

from __future__ import annotations

import queue
import random
import threading
import time
from typing import Optional

SERVICE_COUNT = 3
MIN_DELAY_MS = 200
DELAY_SPREAD_MS = 800


class WeatherServiceError(Exception):
    """Raised when a weather service call fails."""


def call_weather_service(
    number: int,
    results: queue.Queue[str],
    rng: Optional[random.Random] = None,
) -> None:
    """Call service ``number`` after a random delay; it fails half the time.

    On success a message is put on ``results``; on failure
    :class:`WeatherServiceError` is raised.
    """
    rng = rng if rng is not None else random.Random()
    delay = MIN_DELAY_MS + rng.randrange(DELAY_SPREAD_MS)
    time.sleep(delay / 1000)
    if rng.randrange(2) == 1:
        raise WeatherServiceError(f"Wetter Service {number} ist felgeschlagen")
    results.put(f"Wetter Service {number} war erfolgreich")


def _run_service(
    number: int,
    results: queue.Queue[str],
    failures: queue.Queue[str],
    rng: random.Random,
) -> None:
    try:
        call_weather_service(number, results, rng)
    except WeatherServiceError as error:
        failures.put(str(error))


def demo(rng: Optional[random.Random] = None) -> Optional[str]:
    """Print and return the first successful answer, or ``None`` if all fail."""
    rng = rng if rng is not None else random.Random()
    outcomes: queue.Queue[tuple[bool, str]] = queue.Queue()

    class _Tagged:
        def __init__(self, success: bool) -> None:
            self._success = success

        def put(self, message: str) -> None:
            outcomes.put((self._success, message))

    for number in range(1, SERVICE_COUNT + 1):
        threading.Thread(
            target=_run_service,
            args=(number, _Tagged(True), _Tagged(False), rng),
            daemon=True,
        ).start()

    failed = 0
    while True:
        success, message = outcomes.get()
        if success:
            print("Weather empfangen:", message)
            return message
        failed += 1
        if failed == SERVICE_COUNT:
            print("Alle Wetterdienste sind fehlgeschlagen.")
            return None
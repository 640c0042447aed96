"""Simulated stopwatch that lets the machine's devices wait."""

from __future__ import annotations

import sys
import time
from functools import lru_cache

_MS_PER_TICK = 1000


class Timer:
    """Waits for simulated milliseconds, sped up by a turbo factor.

    Every simulated second that passes prints one ``*`` as a progress mark.
    """

    def __init__(self, turbo: int = 1) -> None:
        self.turbo = turbo
        self._pending_ms = 0.0

    def sleep(self, milliseconds: float) -> None:
        """Wait ``milliseconds`` of simulated time and print progress marks."""
        duration = milliseconds / 1000 / self.turbo
        if duration > 0:
            time.sleep(duration)
        self._pending_ms += milliseconds
        ticks = int(self._pending_ms // _MS_PER_TICK)
        if ticks > 0:
            self._pending_ms -= ticks * _MS_PER_TICK
            sys.stdout.write("*" * ticks)
            sys.stdout.flush()


@lru_cache(maxsize=None)
def get_timer() -> Timer:
    """Return the timer shared by the whole machine."""
    return Timer()
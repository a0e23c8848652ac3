"""
Timer used by the loop driver to pace game ticks.
"""

import time
from typing import Callable, Optional


class Timer:
    """
    Tracks elapsed time since a reference point.

    Attributes:
        clock: zero-argument callable returning seconds (monotonic)
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self._start = clock()
        self._delta: Optional[float] = None

    def tick(self) -> None:
        """Record the time elapsed since the last reset."""
        self._delta = self.clock() - self._start

    def delta(self) -> Optional[float]:
        """Seconds recorded by the last tick(), or None if not ticked since reset."""
        return self._delta

    def reset(self) -> None:
        self._start = self.clock()
        self._delta = None

    def __repr__(self):
        return f"<Timer delta={self._delta}>"

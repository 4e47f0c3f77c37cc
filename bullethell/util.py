"""Random helpers and frame timing utilities."""

from __future__ import annotations

import random
import time
from typing import Callable, Optional


def random_range(low: int, high: int, rng: Optional[random.Random] = None) -> int:
    """Return a uniformly distributed integer in the inclusive range [low, high]."""
    if low > high:
        raise ValueError(f"empty range: {low} > {high}")
    source = rng if rng is not None else random
    return source.randint(low, high)


class Interval:
    """Fires at most once every ``delay_secs`` seconds when polled."""

    def __init__(
        self,
        delay_secs: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.delay_secs = delay_secs
        self._clock = clock
        self._threshold = 0.0

    def poll(self) -> bool:
        """Return True if the delay has elapsed, restarting the wait if so."""
        now = self._clock()
        elapsed = now >= self._threshold
        if elapsed:
            self._threshold = now + self.delay_secs
        return elapsed


class Timer:
    """A counter that advances by a fixed step until it reaches its top."""

    def __init__(self, top: float, step: float) -> None:
        self.top = top
        self.step = step
        self.time = 0.0

    def has_overflowed(self) -> bool:
        return self.time >= self.top

    def reset(self) -> None:
        self.time = 0.0

    def count(self) -> None:
        self.time += self.step

    def __repr__(self) -> str:
        return f"Timer(top={self.top!r}, step={self.step!r}, time={self.time!r})"
"""Throttling downloads by sleeping between network events, and random ranges."""

from __future__ import annotations

import random

SLEEP_FACTOR = 5

_rng = random.SystemRandom()


def adjustment_value(a: int, b: int) -> int:
    """Integer quotient ``a // b``, or 1 when ``b`` is zero."""
    return a // b if b != 0 else 1


def rand_range(low: int, high: int) -> int:
    """A random integer with ``low <= n <= high``."""
    if low > high:
        raise ValueError("low must not be greater than high")
    return _rng.randint(low, high)


class SleepThrottle:
    """Keeps a sleep time that grows while the transfer is too fast and
    shrinks while it is below the limit.

    A ``max_speed`` of None means there is no limit and no sleeping.
    """

    def __init__(self, max_speed: int | None = None) -> None:
        if max_speed is not None and max_speed < 0:
            raise ValueError("max_speed must not be negative")
        self.max_speed = max_speed
        self._sleep = 0

    def sleep_time(self, current_speed: int) -> int:
        """Update and return the time to sleep, in microseconds."""
        if current_speed < 0:
            raise ValueError("current_speed must not be negative")
        if self.max_speed is None:
            return 0
        if current_speed > self.max_speed:
            self._sleep += adjustment_value(current_speed, self.max_speed) * SLEEP_FACTOR
        else:
            adjustment = adjustment_value(self.max_speed, current_speed) * SLEEP_FACTOR
            self._sleep = self._sleep - adjustment if self._sleep >= adjustment else 0
        return self._sleep
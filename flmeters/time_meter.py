"""Wall-clock timer with optional per-unit averaging."""

from __future__ import annotations

import time


class TimeMeter:
    """Measures wall-clock time over one or more running periods.

    The timer starts stopped. With ``unit`` set, ``value`` reports the
    average time per unit instead of the total time.
    """

    def __init__(self, unit: bool = False) -> None:
        self._use_unit = unit
        self._start = 0.0
        self._value = 0.0
        self._n = 0
        self._stopped = True

    def value(self) -> float:
        """Return the total time, or the time per unit when ``unit`` is set.

        A running timer keeps running.
        """
        if not self._stopped:
            now = time.perf_counter()
            self._value += now - self._start
            self._start = now
        if self._use_unit:
            return self._value / self._n if self._n > 0 else 0.0
        return self._value

    def reset(self) -> None:
        """Clear the counters and stop the timer."""
        self._n = 0
        self._value = 0.0
        self._stopped = True

    def inc_unit(self, num: int = 1) -> None:
        """Increase the number of units by ``num``."""
        self._n += num

    def resume(self) -> None:
        """Start the timer if it is stopped."""
        if not self._stopped:
            return
        self._start = time.perf_counter()
        self._stopped = False

    def stop(self) -> None:
        """Stop the timer if it is running."""
        if self._stopped:
            return
        self._value += time.perf_counter() - self._start
        self._stopped = True

    def set(self, val: float, num: int = 1) -> None:
        """Set the total time to ``val`` and the number of units to ``num``."""
        self._value = val
        self._n = num

    def stop_and_inc_unit(self, num: int = 1) -> None:
        """Stop the timer and increase the number of units by ``num``."""
        self.stop()
        self.inc_unit(num)